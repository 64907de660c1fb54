"""Next-valid-instant calculation.

Two stages:

1. **Day search.** Starting from the callee's current local date, pick today
   if it is an allowed weekday and the window has not opened yet; otherwise
   the first allowed weekday within the next seven days.
2. **Local -> UTC convergence.** Solve for the UTC instant whose projection
   through the zone reads ``start_hour:00`` on the target date. The offset
   between wall-clock time and UTC is a step function of the instant itself
   (it jumps at DST boundaries), so the instant is found by fixed-point
   iteration: guess, project, shift by the wall-clock error, repeat.

A zone's offset changes at most once around any given date, so the guess
settles after one correction plus one confirmation; the third step only
matters when the first guess landed on the other side of a transition.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta
from typing import Final

from dialwindow.kernel.errors import ValidationError
from dialwindow.kernel.time import Clock, SystemClock
from dialwindow.observability.logging import get_logger
from dialwindow.window.model import DAYS_PER_WEEK, CallingWindow, LocalInstant
from dialwindow.window.projection import DEFAULT_PROJECTOR, LocalProjector

MAX_DAYS_AHEAD: Final = 7
MAX_CONVERGENCE_STEPS: Final = 3
MINUTES_PER_DAY: Final = 24 * 60
HALF_DAY_MINUTES: Final = MINUTES_PER_DAY // 2

_log = get_logger(__name__)


def next_window_date(window: CallingWindow, local: LocalInstant) -> date:
    """Local calendar date on which *window* next opens, seen from *local*."""
    if window.allows_day(local.weekday) and local.hour < window.start_hour:
        return local.date

    for days_ahead in range(1, MAX_DAYS_AHEAD + 1):
        if window.allows_day((local.weekday + days_ahead) % DAYS_PER_WEEK):
            return local.date + timedelta(days=days_ahead)

    # Only reachable with an empty days_of_week.
    _log.warning(
        "calling_window_without_days",
        start_hour=window.start_hour,
        end_hour=window.end_hour,
        fallback="tomorrow",
    )
    return local.date + timedelta(days=1)


def normalize_minute_shift(diff: int) -> int:
    """Fold a wall-clock minute difference into ``(-720, 720]``.

    The hour/minute comparison ignores the date, so a raw difference of e.g.
    ``-1140`` really means "five hours later on the next day" (``+300``).
    """
    if diff > HALF_DAY_MINUTES:
        return diff - MINUTES_PER_DAY
    if diff <= -HALF_DAY_MINUTES:
        return diff + MINUTES_PER_DAY
    return diff


def _converge(
    timezone: str,
    candidate: datetime,
    target_minute_of_day: int,
    projector: LocalProjector,
) -> datetime:
    for _ in range(MAX_CONVERGENCE_STEPS):
        local = projector.project(timezone, candidate)
        diff = target_minute_of_day - local.minute_of_day
        if diff == 0:
            break
        candidate += timedelta(minutes=normalize_minute_shift(diff))
    return candidate


def build_instant_in_zone(
    timezone: str,
    target_date: date,
    hour: int,
    minute: int = 0,
    *,
    projector: LocalProjector | None = None,
) -> datetime:
    """Return the UTC instant that reads ``hour:minute`` on *target_date* in *timezone*.

    The first guess reads the wall-clock time as if it were UTC and is then
    corrected by at most :data:`MAX_CONVERGENCE_STEPS` projections. Zones at
    least twelve hours away from UTC can converge onto the neighbouring day;
    that case is detected and corrected by a whole-day shift followed by
    one more convergence pass.

    Wall-clock times skipped by a DST gap do not exist; for those the result
    is the bounded loop's last guess, within an hour of the request.
    """
    if not 0 <= hour <= 23 or not 0 <= minute <= 59:
        raise ValidationError(
            f"Invalid wall-clock time {hour:02d}:{minute:02d}",
            errors=[{"field": "hour/minute", "reason": "expected 00:00..23:59"}],
        )
    projector = projector or DEFAULT_PROJECTOR
    target = hour * 60 + minute

    rough = datetime.combine(target_date, time(hour, minute), tzinfo=UTC)
    candidate = _converge(timezone, rough, target, projector)

    landed = projector.project(timezone, candidate).date
    if landed != target_date:
        shift = timedelta(days=(target_date - landed).days)
        candidate = _converge(timezone, candidate + shift, target, projector)
    return candidate


def next_valid_call_time(
    timezone: str,
    window: CallingWindow,
    *,
    clock: Clock | None = None,
    projector: LocalProjector | None = None,
) -> datetime:
    """UTC instant at which *window* next opens for a callee in *timezone*.

    Callers are expected to check :func:`~dialwindow.window.evaluator.is_within_calling_window`
    first; if the window is already open the result is still its next opening.
    """
    projector = projector or DEFAULT_PROJECTOR
    now = (clock or SystemClock()).now()
    local = projector.project(timezone, now)
    target_date = next_window_date(window, local)
    instant = build_instant_in_zone(timezone, target_date, window.start_hour, 0, projector=projector)
    _log.debug(
        "next_valid_call_time",
        timezone=timezone,
        target_date=target_date.isoformat(),
        scheduled_at=instant.isoformat(),
    )
    return instant


__all__ = [
    "HALF_DAY_MINUTES",
    "MAX_CONVERGENCE_STEPS",
    "MAX_DAYS_AHEAD",
    "MINUTES_PER_DAY",
    "build_instant_in_zone",
    "next_valid_call_time",
    "next_window_date",
    "normalize_minute_shift",
]
