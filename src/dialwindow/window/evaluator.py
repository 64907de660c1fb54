"""Calling-window evaluation: is calling allowed right now?"""

from __future__ import annotations

from dialwindow.kernel.time import Clock, SystemClock
from dialwindow.window.model import CallingWindow, LocalInstant
from dialwindow.window.projection import DEFAULT_PROJECTOR, LocalProjector


def is_hour_in_window(hour: int, start_hour: int, end_hour: int) -> bool:
    """Hour-range test alone, ignoring weekdays.

    Same-day ranges are half-open ``[start, end)``; ``start == end`` never
    matches. Overnight ranges match from ``start`` through midnight to ``end``.
    """
    if start_hour <= end_hour:
        return start_hour <= hour < end_hour
    return hour >= start_hour or hour < end_hour


def window_allows(window: CallingWindow, local: LocalInstant) -> bool:
    if not window.allows_day(local.weekday):
        return False
    return is_hour_in_window(local.hour, window.start_hour, window.end_hour)


def active_hours(window: CallingWindow) -> tuple[int, ...]:
    """Hours of the day (0..23) during which *window* is open."""
    return tuple(h for h in range(24) if is_hour_in_window(h, window.start_hour, window.end_hour))


def is_within_calling_window(
    timezone: str,
    window: CallingWindow,
    *,
    clock: Clock | None = None,
    projector: LocalProjector | None = None,
) -> bool:
    """Return ``True`` when the current instant is callable in *timezone*."""
    now = (clock or SystemClock()).now()
    local = (projector or DEFAULT_PROJECTOR).project(timezone, now)
    return window_allows(window, local)


__all__ = ["active_hours", "is_hour_in_window", "is_within_calling_window", "window_allows"]
