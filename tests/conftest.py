"""Shared pytest configuration: exposes the tollgate.testing fixtures."""

from tollgate.testing.fixtures import fake_clock, memory_store  # noqa: F401
