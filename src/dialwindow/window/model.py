"""Calling-window value objects."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta
from typing import Any, Final

from dialwindow.kernel.errors import ValidationError

SUNDAY: Final = 0
SATURDAY: Final = 6
DAYS_PER_WEEK: Final = 7
WEEKDAYS: Final = frozenset({1, 2, 3, 4, 5})
ALL_DAYS: Final = frozenset(range(DAYS_PER_WEEK))

DEFAULT_START_HOUR: Final = 9
DEFAULT_END_HOUR: Final = 20


def sunday_based_weekday(day: date) -> int:
    """Weekday number with Sunday=0 .. Saturday=6."""
    return day.isoweekday() % DAYS_PER_WEEK


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclasses.dataclass(frozen=True, slots=True)
class CallingWindow:
    """Daily hour range plus the weekdays on which it applies.

    ``start_hour == end_hour`` is a zero-width window that never opens.
    ``start_hour > end_hour`` wraps past midnight (e.g. 22 -> 6).
    ``end_hour`` may be 24 so that ``0..24`` covers the whole day.

    *days_of_week* accepts any iterable of Sunday-based weekday numbers and is
    stored as a ``frozenset``. ``None`` means Monday to Friday; an explicitly
    empty collection stays empty and the window is then always closed.
    """

    start_hour: int
    end_hour: int
    days_of_week: frozenset[int] = WEEKDAYS

    def __post_init__(self) -> None:
        days: Iterable[int] | None = self.days_of_week
        object.__setattr__(
            self, "days_of_week", WEEKDAYS if days is None else frozenset(days)
        )
        self._validate()

    def _validate(self) -> None:
        errors: list[dict[str, Any]] = []
        if not _is_int(self.start_hour) or not 0 <= self.start_hour <= 23:
            errors.append({"field": "start_hour", "reason": "must be an integer in 0..23"})
        if not _is_int(self.end_hour) or not 0 <= self.end_hour <= 24:
            errors.append({"field": "end_hour", "reason": "must be an integer in 0..24"})
        bad_days = sorted(
            repr(d) for d in self.days_of_week if not _is_int(d) or not SUNDAY <= d <= SATURDAY
        )
        if bad_days:
            errors.append({"field": "days_of_week", "reason": f"invalid weekdays {bad_days}"})
        if errors:
            raise ValidationError("Invalid calling window", errors=errors)

    @property
    def is_overnight(self) -> bool:
        return self.start_hour > self.end_hour

    @property
    def is_never_open(self) -> bool:
        return self.start_hour == self.end_hour or not self.days_of_week

    def allows_day(self, weekday: int) -> bool:
        return weekday in self.days_of_week


@dataclasses.dataclass(frozen=True, slots=True)
class LocalInstant:
    """A UTC instant projected through a zone's rules for that date."""

    date: date
    hour: int
    minute: int
    weekday: int
    utc_offset: timedelta = timedelta(0)
    abbreviation: str = ""

    @classmethod
    def from_datetime(cls, local: datetime) -> LocalInstant:
        """Build from an aware datetime already converted to the local zone."""
        return cls(
            date=local.date(),
            hour=local.hour,
            minute=local.minute,
            weekday=sunday_based_weekday(local.date()),
            utc_offset=local.utcoffset() or timedelta(0),
            abbreviation=local.tzname() or "",
        )

    @property
    def minute_of_day(self) -> int:
        return self.hour * 60 + self.minute


@dataclasses.dataclass(frozen=True, slots=True)
class CallingWindowConfig:
    """Agency-level calling-window settings, as stored in the
    ``calling_window`` JSON document::

        {"enabled": true, "start_hour": 9, "end_hour": 20,
         "days_of_week": [1, 2, 3, 4, 5], "timezone_override": null}
    """

    enabled: bool = False
    start_hour: int = DEFAULT_START_HOUR
    end_hour: int = DEFAULT_END_HOUR
    days_of_week: tuple[int, ...] = tuple(sorted(WEEKDAYS))
    timezone_override: str | None = None

    def __post_init__(self) -> None:
        days = self.days_of_week
        object.__setattr__(
            self,
            "days_of_week",
            tuple(sorted(WEEKDAYS)) if days is None else tuple(sorted(set(days))),
        )
        if not self.timezone_override:
            object.__setattr__(self, "timezone_override", None)
        # Builds (and so validates) the window eagerly.
        _ = self.window

    @property
    def window(self) -> CallingWindow:
        return CallingWindow(self.start_hour, self.end_hour, frozenset(self.days_of_week))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> CallingWindowConfig:
        """Build from a ``calling_window`` document; unknown keys are ignored."""
        data = data or {}
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            if data.get(field.name) is not None:
                kwargs[field.name] = data[field.name]
        return cls(**kwargs)

    def to_mapping(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "start_hour": self.start_hour,
            "end_hour": self.end_hour,
            "days_of_week": list(self.days_of_week),
            "timezone_override": self.timezone_override,
        }


__all__ = [
    "ALL_DAYS",
    "DAYS_PER_WEEK",
    "DEFAULT_END_HOUR",
    "DEFAULT_START_HOUR",
    "SATURDAY",
    "SUNDAY",
    "WEEKDAYS",
    "CallingWindow",
    "CallingWindowConfig",
    "LocalInstant",
    "sunday_based_weekday",
]
