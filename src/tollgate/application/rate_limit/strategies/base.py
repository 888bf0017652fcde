"""Application rate limiting – Strategy port.

A strategy is a pure function of ``(stored state, cost, now)``. It never
touches the store or the clock itself; the facade feeds it a freshly loaded
state on every CAS attempt and persists whatever it returns.
"""
from __future__ import annotations

import abc
import dataclasses
from typing import ClassVar

from tollgate.application.rate_limit.config import LimitConfig, StrategyKind
from tollgate.application.rate_limit.decision import Decision
from tollgate.application.rate_limit.state import State

# Absorbs float drift from repeated ``elapsed * rate`` accumulation.
EPSILON = 1e-9


@dataclasses.dataclass(frozen=True)
class Evaluation:
    decision: Decision
    state: State


class Strategy(abc.ABC):
    """Port: one admission algorithm over a single key's state."""

    kind: ClassVar[StrategyKind]

    def __init__(self, config: LimitConfig) -> None:
        self.config = config

    @abc.abstractmethod
    def initial_state(self, now: float) -> State:
        """State for a key seen for the first time."""

    @abc.abstractmethod
    def evaluate(self, state: State | None, cost: int, now: float) -> Evaluation:
        """Decide on a request and return the state to persist."""

    @abc.abstractmethod
    def state_ttl(self) -> float:
        """Seconds after the last write when the state is as good as fresh."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config.label})"


__all__ = ["EPSILON", "Evaluation", "Strategy"]
