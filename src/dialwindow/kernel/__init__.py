"""Kernel – framework-agnostic building blocks shared by every module."""

from dialwindow.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ValidationError,
)
from dialwindow.kernel.time import Clock, FrozenClock, SystemClock, utc_now

__all__ = [
    "ApplicationError",
    "BaseError",
    "Clock",
    "DomainError",
    "FrozenClock",
    "SystemClock",
    "ValidationError",
    "utc_now",
]
