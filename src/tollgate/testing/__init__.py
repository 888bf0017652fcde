"""Testing support – fakes, fixtures, chaos wrappers and hypothesis strategies.

Import in your ``conftest.py``::

    pytest_plugins = ["tollgate.testing.fixtures"]
"""

from tollgate.testing.chaos import ChaosStateStore, FailureInjector, LatencyInjector
from tollgate.testing.fakes import FakeClock

__all__ = ["ChaosStateStore", "FailureInjector", "FakeClock", "LatencyInjector"]
