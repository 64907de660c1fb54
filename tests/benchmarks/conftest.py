"""conftest.py for benchmarks.

Shared fixtures pin "now" so every benchmark run measures the same
convergence path.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from dialwindow.kernel.time import FrozenClock
from dialwindow.window import CallingWindow


@pytest.fixture(scope="session")
def tuesday_night_clock() -> FrozenClock:
    """2026-03-10 03:00 UTC: late evening Monday across the Americas."""
    return FrozenClock(datetime(2026, 3, 10, 3, 0, tzinfo=UTC))


@pytest.fixture(scope="session")
def business_window() -> CallingWindow:
    return CallingWindow(start_hour=9, end_hour=20)
