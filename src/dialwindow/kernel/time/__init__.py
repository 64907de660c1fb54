"""Kernel time – Clock port + implementations."""
from dialwindow.kernel.time.clock import Clock, FrozenClock, SystemClock, utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
