"""Call planning: dial now, or hold until the callee's window opens.

This is the decision the trigger endpoints make when a call request arrives,
and the one the scheduled-call worker repeats right before dialing (config
and DST may have changed since the call was queued).
"""

from __future__ import annotations

import dataclasses
from datetime import datetime

from dialwindow.kernel.time import Clock, SystemClock
from dialwindow.observability.logging import get_logger
from dialwindow.phone.resolver import TimezoneResolver
from dialwindow.window.evaluator import is_within_calling_window
from dialwindow.window.model import CallingWindowConfig
from dialwindow.window.projection import DEFAULT_PROJECTOR, LocalProjector
from dialwindow.window.scheduler import next_valid_call_time

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class CallPlan:
    """Outcome of planning a single call.

    ``scheduled_at is None`` means "dial immediately". ``timezone_delayed``
    is set only when the calling window pushed the call back.
    """

    lead_timezone: str | None
    scheduled_at: datetime | None = None
    timezone_delayed: bool = False
    original_scheduled_at: datetime | None = None

    @property
    def call_now(self) -> bool:
        return self.scheduled_at is None


class CallScheduler:
    """Apply an agency's :class:`CallingWindowConfig` to outbound calls."""

    def __init__(
        self,
        config: CallingWindowConfig,
        *,
        clock: Clock | None = None,
        projector: LocalProjector | None = None,
        resolver: TimezoneResolver | None = None,
    ) -> None:
        self._config = config
        self._clock = clock or SystemClock()
        self._projector = projector or DEFAULT_PROJECTOR
        self._resolver = resolver or TimezoneResolver()

    @property
    def config(self) -> CallingWindowConfig:
        return self._config

    def lead_timezone(self, phone_number: str) -> str | None:
        return self._config.timezone_override or self._resolver.resolve(phone_number)

    def plan(self, phone_number: str, requested_at: datetime | None = None) -> CallPlan:
        """Plan a new call to *phone_number*.

        An explicit *requested_at* is honoured as-is. Otherwise the call is
        delayed only if the window is enabled, the lead's zone is known and
        the window is closed right now.
        """
        tz = self.lead_timezone(phone_number)
        if requested_at is not None:
            return CallPlan(lead_timezone=tz, scheduled_at=requested_at)

        next_open = self._next_open_if_closed(tz)
        if next_open is None:
            return CallPlan(lead_timezone=tz)

        _log.info(
            "call_delayed_outside_window",
            phone_number=phone_number,
            lead_timezone=tz,
            scheduled_at=next_open.isoformat(),
        )
        return CallPlan(lead_timezone=tz, scheduled_at=next_open, timezone_delayed=True)

    def recheck(self, lead_timezone: str | None, scheduled_at: datetime | None = None) -> CallPlan:
        """Re-validate a queued call just before dialing it."""
        next_open = self._next_open_if_closed(lead_timezone)
        if next_open is None:
            return CallPlan(lead_timezone=lead_timezone, original_scheduled_at=scheduled_at)

        _log.info(
            "call_rescheduled_outside_window",
            lead_timezone=lead_timezone,
            original_scheduled_at=scheduled_at.isoformat() if scheduled_at else None,
            scheduled_at=next_open.isoformat(),
        )
        return CallPlan(
            lead_timezone=lead_timezone,
            scheduled_at=next_open,
            timezone_delayed=True,
            original_scheduled_at=scheduled_at,
        )

    def _next_open_if_closed(self, tz: str | None) -> datetime | None:
        if not self._config.enabled or not tz:
            return None
        window = self._config.window
        if is_within_calling_window(tz, window, clock=self._clock, projector=self._projector):
            return None
        return next_valid_call_time(tz, window, clock=self._clock, projector=self._projector)


__all__ = ["CallPlan", "CallScheduler"]
