"""Testing chaos – failure / latency injection for state stores."""
from tollgate.testing.chaos.failure import FailureInjector
from tollgate.testing.chaos.latency import LatencyInjector
from tollgate.testing.chaos.store import ChaosStateStore

__all__ = ["ChaosStateStore", "FailureInjector", "LatencyInjector"]
