"""conftest.py for benchmarks.

Benchmarks drive ``RateLimiter.check`` thousands of times per round, so
they share one session-scoped event loop instead of paying for
``asyncio.run`` (a fresh loop) on every call.
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def event_loop():
    """Session-scoped event loop shared by all async benchmarks."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()
