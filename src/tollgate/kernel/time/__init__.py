"""Kernel time – Clock port + implementations."""
from tollgate.kernel.time.clock import Clock, ManualClock, MonotonicClock, WallClock

__all__ = ["Clock", "ManualClock", "MonotonicClock", "WallClock"]
