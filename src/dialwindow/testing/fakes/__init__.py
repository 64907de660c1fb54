"""Testing fakes – deterministic clock and projector doubles."""
from dialwindow.testing.fakes.clock import FAKE_NOW, FakeClock
from dialwindow.testing.fakes.projector import FixedOffsetProjector, FrozenProjector

__all__ = ["FAKE_NOW", "FakeClock", "FixedOffsetProjector", "FrozenProjector"]
