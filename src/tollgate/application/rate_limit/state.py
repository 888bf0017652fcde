"""Application rate limiting – per-key state records.

One frozen dataclass per strategy. Stores compare them with ``==``, so
every field participates in equality and nothing mutable is held.
"""
from __future__ import annotations

import dataclasses
from typing import Union


@dataclasses.dataclass(frozen=True)
class TokenBucketState:
    tokens: float
    last_refill_at: float


@dataclasses.dataclass(frozen=True)
class FixedWindowState:
    window_start: float
    count: int


@dataclasses.dataclass(frozen=True)
class SlidingWindowState:
    """Admission log, oldest first. Each entry is ``(timestamp, weight)``."""

    entries: tuple[tuple[float, int], ...] = ()

    @property
    def used(self) -> int:
        return sum(weight for _, weight in self.entries)


@dataclasses.dataclass(frozen=True)
class LeakyBucketState:
    level: float
    last_leak_at: float


State = Union[TokenBucketState, FixedWindowState, SlidingWindowState, LeakyBucketState]

__all__ = [
    "FixedWindowState",
    "LeakyBucketState",
    "SlidingWindowState",
    "State",
    "TokenBucketState",
]
