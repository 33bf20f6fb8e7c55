"""Testing fakes – deterministic doubles."""
from eventdripper.testing.fakes.clock import FAKE_NOW, FakeClock

__all__ = ["FAKE_NOW", "FakeClock"]
