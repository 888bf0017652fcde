"""Kernel time – Clock protocol + implementations.

Every limiter reads time through a :class:`Clock` so tests can drive it
deterministically. Values are seconds as a float; limiters only ever
subtract them, but stored timestamps are compared by whoever reads the
state next. A process-local store can use :class:`MonotonicClock`, whose
zero point is arbitrary per process. State shared between hosts needs
:class:`WallClock`, the one scale all hosts agree on (to within NTP skew,
which the strategies absorb by never crediting time that ran backwards).
"""
from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: time source in seconds."""

    def now(self) -> float: ...


class MonotonicClock:
    """Production clock backed by :func:`time.monotonic`."""

    def now(self) -> float:
        return time.monotonic()


class WallClock:
    """Clock over UTC epoch seconds, for state kept in a shared store."""

    def now(self) -> float:
        return datetime.now(UTC).timestamp()


class ManualClock:
    """Test clock that only moves when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, **kwargs: int | float) -> None:
        """Advance by the given ``timedelta`` kwargs (``seconds=1.5``, ``minutes=1``)."""
        self._now += timedelta(**kwargs).total_seconds()

    def set(self, value: float) -> None:
        """Pin the clock to *value*. Moving backwards simulates clock skew."""
        self._now = float(value)


__all__ = ["Clock", "ManualClock", "MonotonicClock", "WallClock"]
