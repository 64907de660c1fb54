"""Config settings – CallingWindowSettings.

Environment variables (prefix ``CALLING_WINDOW``)::

    CALLING_WINDOW_ENABLED=true
    CALLING_WINDOW_START_HOUR=9
    CALLING_WINDOW_END_HOUR=20
    CALLING_WINDOW_DAYS_OF_WEEK=1,2,3,4,5
    CALLING_WINDOW_TIMEZONE_OVERRIDE=America/Chicago
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dialwindow.config.settings.base import Settings
from dialwindow.config.validation import InvalidSettingValueError
from dialwindow.window.model import DEFAULT_END_HOUR, DEFAULT_START_HOUR, WEEKDAYS, CallingWindowConfig


@dataclasses.dataclass
class CallingWindowSettings(Settings):
    _prefix: ClassVar[str] = "CALLING_WINDOW"

    enabled: bool = False
    start_hour: int = DEFAULT_START_HOUR
    end_hour: int = DEFAULT_END_HOUR
    days_of_week: list[int] = dataclasses.field(default_factory=lambda: sorted(WEEKDAYS))
    timezone_override: str = ""

    def _validate(self) -> None:
        if not 0 <= self.start_hour <= 23:
            raise InvalidSettingValueError("start_hour", self.start_hour, "expected 0..23")
        if not 0 <= self.end_hour <= 24:
            raise InvalidSettingValueError("end_hour", self.end_hour, "expected 0..24")
        bad = [d for d in self.days_of_week if not 0 <= d <= 6]
        if bad:
            raise InvalidSettingValueError("days_of_week", self.days_of_week, "weekdays are 0 (Sun)..6 (Sat)")
        if self.timezone_override:
            try:
                ZoneInfo(self.timezone_override)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise InvalidSettingValueError(
                    "timezone_override", self.timezone_override, "unknown IANA timezone"
                ) from exc

    def to_config(self) -> CallingWindowConfig:
        return CallingWindowConfig(
            enabled=self.enabled,
            start_hour=self.start_hour,
            end_hour=self.end_hour,
            days_of_week=tuple(self.days_of_week),
            timezone_override=self.timezone_override or None,
        )


__all__ = ["CallingWindowSettings"]
