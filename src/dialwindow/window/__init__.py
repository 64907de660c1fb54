"""Calling windows – evaluation, next-opening calculation, display, planning.

Import path convention::

    from dialwindow.window import CallingWindow, is_within_calling_window
    from dialwindow.window import next_valid_call_time, CallScheduler
"""
from dialwindow.window.display import (
    format_clock_time,
    format_hour_label,
    format_local_time,
    format_timezone_display,
    format_utc_offset,
)
from dialwindow.window.evaluator import (
    active_hours,
    is_hour_in_window,
    is_within_calling_window,
    window_allows,
)
from dialwindow.window.model import (
    ALL_DAYS,
    WEEKDAYS,
    CallingWindow,
    CallingWindowConfig,
    LocalInstant,
    sunday_based_weekday,
)
from dialwindow.window.planner import CallPlan, CallScheduler
from dialwindow.window.projection import DEFAULT_PROJECTOR, LocalProjector, ZoneInfoProjector
from dialwindow.window.scheduler import (
    build_instant_in_zone,
    next_valid_call_time,
    next_window_date,
    normalize_minute_shift,
)

__all__ = [
    "ALL_DAYS",
    "DEFAULT_PROJECTOR",
    "WEEKDAYS",
    "CallPlan",
    "CallScheduler",
    "CallingWindow",
    "CallingWindowConfig",
    "LocalInstant",
    "LocalProjector",
    "ZoneInfoProjector",
    "active_hours",
    "build_instant_in_zone",
    "format_clock_time",
    "format_hour_label",
    "format_local_time",
    "format_timezone_display",
    "format_utc_offset",
    "is_hour_in_window",
    "is_within_calling_window",
    "next_valid_call_time",
    "next_window_date",
    "normalize_minute_shift",
    "sunday_based_weekday",
    "window_allows",
]
