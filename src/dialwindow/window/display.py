"""Human-facing rendering of zones and local times. No decision logic."""

from __future__ import annotations

from datetime import timedelta

from dialwindow.kernel.time import Clock, SystemClock
from dialwindow.window.model import LocalInstant
from dialwindow.window.projection import DEFAULT_PROJECTOR, LocalProjector


def _project_now(
    timezone: str, clock: Clock | None, projector: LocalProjector | None
) -> LocalInstant:
    return (projector or DEFAULT_PROJECTOR).project(timezone, (clock or SystemClock()).now())


def format_utc_offset(offset: timedelta) -> str:
    """``UTC-5``, ``UTC+5:30``, ``UTC+0``."""
    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    if minutes:
        return f"UTC{sign}{hours}:{minutes:02d}"
    return f"UTC{sign}{hours}"


def format_clock_time(hour: int, minute: int) -> str:
    """12-hour clock, e.g. ``2:30 PM`` or ``12:05 AM``."""
    suffix = "AM" if hour < 12 else "PM"
    return f"{hour % 12 or 12}:{minute:02d} {suffix}"


def format_hour_label(hour: int) -> str:
    """Compact timeline label: ``12a``, ``9a``, ``12p``, ``8p``."""
    hour %= 24
    suffix = "a" if hour < 12 else "p"
    return f"{hour % 12 or 12}{suffix}"


def format_timezone_display(
    timezone: str,
    *,
    clock: Clock | None = None,
    projector: LocalProjector | None = None,
) -> str:
    """Current abbreviation and offset of *timezone*, e.g. ``EST (UTC-5)``.

    Falls back to the zone name when the database has no abbreviation.
    """
    local = _project_now(timezone, clock, projector)
    return f"{local.abbreviation or timezone} ({format_utc_offset(local.utc_offset)})"


def format_local_time(
    timezone: str,
    *,
    clock: Clock | None = None,
    projector: LocalProjector | None = None,
) -> str:
    """Current wall-clock time in *timezone*, e.g. ``2:30 PM``."""
    local = _project_now(timezone, clock, projector)
    return format_clock_time(local.hour, local.minute)


__all__ = [
    "format_clock_time",
    "format_hour_label",
    "format_local_time",
    "format_timezone_display",
    "format_utc_offset",
]
