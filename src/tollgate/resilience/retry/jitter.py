"""Resilience – jitter strategies."""
from __future__ import annotations

import abc
import random


class JitterStrategy(abc.ABC):
    """Spread a backoff ceiling so contenders of one round wake apart."""

    @abc.abstractmethod
    def apply(self, delay: float) -> float: ...


class NoJitter(JitterStrategy):
    def apply(self, delay: float) -> float:
        return delay


class FullJitter(JitterStrategy):
    """Uniform random in ``[0, delay]``; *seed* makes the sequence repeatable."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)  # noqa: S311

    def apply(self, delay: float) -> float:
        return self._random.uniform(0, delay)


__all__ = ["FullJitter", "JitterStrategy", "NoJitter"]
