"""Unit tests for next-valid-instant calculation and local->UTC convergence."""

from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from dialwindow.kernel.errors import ValidationError
from dialwindow.kernel.time import FrozenClock
from dialwindow.testing.fakes import FixedOffsetProjector
from dialwindow.testing.generators import calling_window_strategy, timezone_strategy
from dialwindow.window import (
    ALL_DAYS,
    CallingWindow,
    LocalInstant,
    ZoneInfoProjector,
    build_instant_in_zone,
    is_within_calling_window,
    next_valid_call_time,
    next_window_date,
    normalize_minute_shift,
)
from dialwindow.window.scheduler import MAX_CONVERGENCE_STEPS

_PROJECTOR = ZoneInfoProjector()


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=UTC)


def _wall_clock_exists(tz: str, day: date, hour: int, minute: int) -> bool:
    zone = ZoneInfo(tz)
    naive = datetime.combine(day, time(hour, minute))
    back = naive.replace(tzinfo=zone).astimezone(UTC).astimezone(zone)
    return back.replace(tzinfo=None) == naive


# ---------------------------------------------------------------------------
# normalize_minute_shift
# ---------------------------------------------------------------------------


class TestNormalizeMinuteShift:
    @pytest.mark.parametrize(
        ("diff", "expected"),
        [(0, 0), (300, 300), (720, 720), (721, -719), (-719, -719), (-720, 720), (-1140, 300), (1380, -60)],
    )
    def test_folds_into_half_open_range(self, diff: int, expected: int) -> None:
        assert normalize_minute_shift(diff) == expected


# ---------------------------------------------------------------------------
# next_window_date (day search)
# ---------------------------------------------------------------------------


class TestNextWindowDate:
    def _local(self, hour: int, weekday: int, on: date) -> LocalInstant:
        return LocalInstant(date=on, hour=hour, minute=0, weekday=weekday)

    def test_today_before_start(self) -> None:
        local = self._local(7, 4, date(2026, 1, 1))
        assert next_window_date(CallingWindow(9, 17), local) == date(2026, 1, 1)

    def test_today_after_start_moves_to_next_allowed(self) -> None:
        local = self._local(9, 4, date(2026, 1, 1))
        assert next_window_date(CallingWindow(9, 17), local) == date(2026, 1, 2)

    def test_skips_weekend(self) -> None:
        local = self._local(18, 5, date(2026, 1, 2))  # Friday evening
        assert next_window_date(CallingWindow(9, 17), local) == date(2026, 1, 5)

    def test_disallowed_today_even_before_start(self) -> None:
        local = self._local(6, 6, date(2026, 1, 3))  # Saturday morning
        assert next_window_date(CallingWindow(9, 17), local) == date(2026, 1, 5)

    def test_single_day_wraps_full_week(self) -> None:
        local = self._local(10, 1, date(2026, 1, 5))  # Monday, past start
        assert next_window_date(CallingWindow(9, 17, frozenset({1})), local) == date(2026, 1, 12)

    def test_empty_days_falls_back_to_tomorrow(self) -> None:
        local = self._local(7, 4, date(2026, 1, 1))
        assert next_window_date(CallingWindow(9, 17, frozenset()), local) == date(2026, 1, 2)


# ---------------------------------------------------------------------------
# build_instant_in_zone (convergence)
# ---------------------------------------------------------------------------


class TestBuildInstantInZone:
    @pytest.mark.parametrize(
        ("tz", "day", "hour", "minute", "expected"),
        [
            ("America/New_York", date(2026, 1, 5), 9, 0, _utc(2026, 1, 5, 14, 0)),
            ("America/New_York", date(2026, 7, 6), 9, 0, _utc(2026, 7, 6, 13, 0)),
            ("Asia/Kolkata", date(2026, 1, 5), 9, 0, _utc(2026, 1, 5, 3, 30)),
            ("America/St_Johns", date(2026, 1, 5), 9, 0, _utc(2026, 1, 5, 12, 30)),
            ("Asia/Tokyo", date(2026, 1, 5), 0, 15, _utc(2026, 1, 4, 15, 15)),
            ("Australia/Sydney", date(2026, 4, 5), 9, 0, _utc(2026, 4, 4, 23, 0)),
        ],
    )
    def test_ordinary_and_fractional_offsets(
        self, tz: str, day: date, hour: int, minute: int, expected: datetime
    ) -> None:
        assert build_instant_in_zone(tz, day, hour, minute) == expected

    def test_spring_forward_day(self) -> None:
        # 2026-03-08: US clocks jump 02:00 EST -> 03:00 EDT (07:00 UTC).
        tz = "America/New_York"
        day = date(2026, 3, 8)
        assert build_instant_in_zone(tz, day, 9, 0) == _utc(2026, 3, 8, 13, 0)
        assert build_instant_in_zone(tz, day, 1, 30) == _utc(2026, 3, 8, 6, 30)
        assert build_instant_in_zone(tz, day, 3, 0) == _utc(2026, 3, 8, 7, 0)

    def test_fall_back_day(self) -> None:
        # 2026-11-01: US clocks fall back 02:00 EDT -> 01:00 EST (06:00 UTC).
        tz = "America/New_York"
        assert build_instant_in_zone(tz, date(2026, 11, 1), 9, 0) == _utc(2026, 11, 1, 14, 0)
        assert build_instant_in_zone(tz, date(2026, 11, 1), 2, 0) == _utc(2026, 11, 1, 7, 0)

    def test_london_spring_forward(self) -> None:
        assert build_instant_in_zone("Europe/London", date(2026, 3, 29), 9, 0) == _utc(2026, 3, 29, 8, 0)

    @pytest.mark.parametrize(
        ("tz", "expected"),
        [
            ("Pacific/Kiritimati", _utc(2026, 1, 4, 19, 0)),  # UTC+14
            ("Pacific/Tongatapu", _utc(2026, 1, 4, 20, 0)),  # UTC+13
            ("Pacific/Auckland", _utc(2026, 1, 4, 20, 0)),  # NZDT, UTC+13
        ],
    )
    def test_offsets_beyond_half_day_land_on_target_date(self, tz: str, expected: datetime) -> None:
        instant = build_instant_in_zone(tz, date(2026, 1, 5), 9, 0)
        assert instant == expected
        assert _PROJECTOR.project(tz, instant).date == date(2026, 1, 5)

    def test_result_is_utc_aware(self) -> None:
        instant = build_instant_in_zone("Europe/Berlin", date(2026, 6, 1), 9, 0)
        assert instant.tzinfo is UTC

    def test_bounded_projection_calls(self) -> None:
        projector = FixedOffsetProjector(timedelta(hours=-5))
        instant = build_instant_in_zone("Fixed/Minus5", date(2026, 1, 5), 9, 0, projector=projector)
        assert instant == _utc(2026, 1, 5, 14, 0)
        # convergence loop + one date check
        assert len(projector.calls) <= MAX_CONVERGENCE_STEPS + 1

    def test_nonexistent_time_does_not_raise(self) -> None:
        # 02:30 does not exist on the spring-forward date.
        instant = build_instant_in_zone("America/New_York", date(2026, 3, 8), 2, 30)
        assert abs(instant - _utc(2026, 3, 8, 7, 0)) <= timedelta(hours=1)

    @pytest.mark.parametrize(("hour", "minute"), [(24, 0), (-1, 0), (9, 60)])
    def test_invalid_wall_clock_raises(self, hour: int, minute: int) -> None:
        with pytest.raises(ValidationError):
            build_instant_in_zone("UTC", date(2026, 1, 5), hour, minute)

    @given(
        timezone_strategy(),
        st.dates(min_value=date(2024, 1, 1), max_value=date(2030, 12, 31)),
        st.integers(min_value=0, max_value=23),
        st.integers(min_value=0, max_value=59),
    )
    def test_round_trip(self, tz: str, day: date, hour: int, minute: int) -> None:
        assume(_wall_clock_exists(tz, day, hour, minute))
        local = _PROJECTOR.project(tz, build_instant_in_zone(tz, day, hour, minute))
        assert (local.date, local.hour, local.minute) == (day, hour, minute)


# ---------------------------------------------------------------------------
# next_valid_call_time
# ---------------------------------------------------------------------------


class TestNextValidCallTime:
    NY = "America/New_York"

    def test_later_today(self, fake_clock: FrozenClock) -> None:
        # 07:00 EST Thursday -> 09:00 EST same day.
        assert next_valid_call_time(self.NY, CallingWindow(9, 17), clock=fake_clock) == _utc(2026, 1, 1, 14, 0)

    def test_after_close_moves_to_tomorrow(self) -> None:
        clock = FrozenClock(_utc(2026, 1, 1, 23, 0))  # 18:00 EST Thursday
        assert next_valid_call_time(self.NY, CallingWindow(9, 17), clock=clock) == _utc(2026, 1, 2, 14, 0)

    def test_inside_window_returns_next_opening(self) -> None:
        clock = FrozenClock(_utc(2026, 1, 1, 15, 0))  # 10:00 EST Thursday
        assert next_valid_call_time(self.NY, CallingWindow(9, 17), clock=clock) == _utc(2026, 1, 2, 14, 0)

    def test_friday_evening_moves_to_monday(self) -> None:
        clock = FrozenClock(_utc(2026, 1, 2, 23, 0))  # 18:00 EST Friday
        assert next_valid_call_time(self.NY, CallingWindow(9, 17), clock=clock) == _utc(2026, 1, 5, 14, 0)

    def test_local_date_drives_day_search(self) -> None:
        clock = FrozenClock(_utc(2026, 1, 2, 10, 0))  # 19:00 JST Friday
        assert next_valid_call_time("Asia/Tokyo", CallingWindow(9, 17), clock=clock) == _utc(2026, 1, 5, 0, 0)

    def test_dst_regression_into_spring_forward_sunday(self) -> None:
        # Saturday 2026-03-07 22:00 EST; the next day starts on EST and opens on EDT.
        clock = FrozenClock(_utc(2026, 3, 8, 3, 0))
        every_day = CallingWindow(9, 17, ALL_DAYS)
        assert next_valid_call_time(self.NY, every_day, clock=clock) == _utc(2026, 3, 8, 13, 0)
        assert next_valid_call_time(self.NY, CallingWindow(9, 17), clock=clock) == _utc(2026, 3, 9, 13, 0)

    def test_overnight_window_opens_tonight(self) -> None:
        clock = FrozenClock(_utc(2026, 1, 1, 17, 0))  # 12:00 EST
        window = CallingWindow(22, 6, ALL_DAYS)
        assert next_valid_call_time(self.NY, window, clock=clock) == _utc(2026, 1, 2, 3, 0)

    def test_empty_days_falls_back_to_tomorrow(self, fake_clock: FrozenClock) -> None:
        window = CallingWindow(9, 17, frozenset())
        assert next_valid_call_time(self.NY, window, clock=fake_clock) == _utc(2026, 1, 2, 14, 0)

    def test_far_east_zone(self, fake_clock: FrozenClock) -> None:
        # 2026-01-01 12:00 UTC is Friday 02:00 in Kiritimati (UTC+14).
        assert next_valid_call_time("Pacific/Kiritimati", CallingWindow(9, 17), clock=fake_clock) == _utc(
            2026, 1, 1, 19, 0
        )

    def test_with_fixed_offset_projector(self, fake_clock: FrozenClock) -> None:
        projector = FixedOffsetProjector(timedelta(hours=-5))
        result = next_valid_call_time("Fixed/Minus5", CallingWindow(9, 17), clock=fake_clock, projector=projector)
        assert result == _utc(2026, 1, 1, 14, 0)

    @given(
        timezone_strategy(),
        st.datetimes(min_value=datetime(2024, 1, 1), max_value=datetime(2030, 12, 31), timezones=st.just(UTC)),
        calling_window_strategy(allow_empty_days=False),
    )
    def test_scheduling_law(self, tz: str, now: datetime, window: CallingWindow) -> None:
        clock = FrozenClock(now)
        before = _PROJECTOR.project(tz, now)
        assume(_wall_clock_exists(tz, next_window_date(window, before), window.start_hour, 0))
        result = next_valid_call_time(tz, window, clock=clock)
        after = _PROJECTOR.project(tz, result)

        assert result > now
        assert (after.hour, after.minute) == (window.start_hour, 0)
        assert after.weekday in window.days_of_week
        if before.weekday in window.days_of_week and before.hour < window.start_hour:
            assert after.date == before.date
        else:
            assert 1 <= (after.date - before.date).days <= 7
            for gap in range(1, (after.date - before.date).days):
                assert (before.weekday + gap) % 7 not in window.days_of_week

    def test_closed_window_then_open_at_returned_instant(self) -> None:
        clock = FrozenClock(_utc(2026, 1, 3, 15, 0))  # Saturday
        window = CallingWindow(9, 17)
        assert not is_within_calling_window(self.NY, window, clock=clock)
        opening = next_valid_call_time(self.NY, window, clock=clock)
        assert is_within_calling_window(self.NY, window, clock=FrozenClock(opening))
