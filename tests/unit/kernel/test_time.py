"""Unit tests for kernel time utilities."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from dialwindow.kernel.time import Clock, FrozenClock, SystemClock, utc_now


class TestSystemClock:
    def test_now_is_utc_aware(self) -> None:
        now = SystemClock().now()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_close_to_wall_clock(self) -> None:
        assert abs(SystemClock().now() - utc_now()) < timedelta(seconds=1)


class TestFrozenClock:
    def _fixed(self) -> datetime:
        return datetime(2026, 3, 8, 6, 59, tzinfo=UTC)

    def test_now_returns_fixed_time(self) -> None:
        assert FrozenClock(self._fixed()).now() == self._fixed()

    def test_naive_is_read_as_utc(self) -> None:
        assert FrozenClock(datetime(2026, 3, 8, 6, 59)).now() == self._fixed()

    def test_other_offsets_normalized_to_utc(self) -> None:
        est = timezone(timedelta(hours=-5))
        clk = FrozenClock(datetime(2026, 3, 8, 1, 59, tzinfo=est))
        assert clk.now() == self._fixed()
        assert clk.now().tzinfo is UTC

    def test_advance_crosses_dst_boundary_in_utc(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.advance(minutes=2)
        assert clk.now() == datetime(2026, 3, 8, 7, 1, tzinfo=UTC)

    def test_set(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.set(datetime(2026, 1, 1))
        assert clk.now() == datetime(2026, 1, 1, tzinfo=UTC)

    def test_satisfies_protocol(self) -> None:
        clk: Clock = FrozenClock(self._fixed())
        assert clk.now() == self._fixed()
