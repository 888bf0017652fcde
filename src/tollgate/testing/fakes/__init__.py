"""Testing fakes – in-memory doubles for kernel ports."""
from tollgate.kernel.time import ManualClock
from tollgate.testing.fakes.clock import FakeClock

__all__ = ["FakeClock", "ManualClock"]
