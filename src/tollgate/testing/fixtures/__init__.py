"""Testing fixtures – pytest fixtures for fake doubles."""
from tollgate.testing.fixtures.clock import fake_clock
from tollgate.testing.fixtures.store import memory_store

__all__ = ["fake_clock", "memory_store"]
