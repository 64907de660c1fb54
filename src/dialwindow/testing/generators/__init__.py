"""Testing generators – property-based strategies."""
from dialwindow.testing.generators.strategies import (
    SAMPLE_TIMEZONES,
    calling_window_strategy,
    nanp_number_strategy,
    timezone_strategy,
)

__all__ = [
    "SAMPLE_TIMEZONES",
    "calling_window_strategy",
    "nanp_number_strategy",
    "timezone_strategy",
]
