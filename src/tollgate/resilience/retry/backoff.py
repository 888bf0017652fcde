"""Resilience – backoff strategies.

A limiter that loses a compare-and-swap must not re-read immediately: every
loser of the same round would read the same state again and collide again.
The backoff sets the ceiling of the pause; a :mod:`jitter` strategy then
picks the actual pause inside it.
"""
from __future__ import annotations

import abc


class BackoffStrategy(abc.ABC):
    """Compute the pause ceiling (seconds) after the *attempt*-th lost round."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class ConstantBackoff(BackoffStrategy):
    """Same ceiling after every lost round; ``ConstantBackoff(0)`` retries at once."""

    def __init__(self, delay: float = 0.005) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._delay = delay

    def compute(self, attempt: int) -> float:  # noqa: ARG002
        return self._delay


class ExponentialBackoff(BackoffStrategy):
    """Ceiling doubles per lost round: ``base_delay * 2^attempt``, capped at *max_delay*.

    The defaults keep a five-round check under roughly 60ms of total pause,
    small next to a network round trip to a shared store.
    """

    def __init__(self, base_delay: float = 0.002, max_delay: float = 0.05) -> None:
        if base_delay < 0 or max_delay < base_delay:
            raise ValueError("expected 0 <= base_delay <= max_delay")
        self._base = base_delay
        self._max = max_delay

    def compute(self, attempt: int) -> float:
        return min(self._base * (2 ** attempt), self._max)

    def __repr__(self) -> str:
        return f"ExponentialBackoff(base_delay={self._base}, max_delay={self._max})"


__all__ = ["BackoffStrategy", "ConstantBackoff", "ExponentialBackoff"]
