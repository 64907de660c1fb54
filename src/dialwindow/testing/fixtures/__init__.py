"""Testing fixtures – pytest fixtures for fake doubles.

Enable with ``pytest_plugins = ["dialwindow.testing.fixtures"]``.
"""
from dialwindow.testing.fixtures.clock import fake_clock, fixed_offset_projector

__all__ = ["fake_clock", "fixed_offset_projector"]
