"""Leaky bucket – a queue that drains at a constant ``rate``.

Admissions raise the level by ``cost``; the level falls continuously. Unlike
the token bucket, this shapes the sustained output rate: over any span
``T`` no more than ``capacity + T * rate`` permits get through.
"""
from __future__ import annotations

import math

from tollgate.application.rate_limit.config import StrategyKind
from tollgate.application.rate_limit.decision import Decision
from tollgate.application.rate_limit.state import LeakyBucketState, State
from tollgate.application.rate_limit.strategies.base import EPSILON, Evaluation, Strategy


class LeakyBucketStrategy(Strategy):
    kind = StrategyKind.LEAKY_BUCKET

    def initial_state(self, now: float) -> LeakyBucketState:
        return LeakyBucketState(level=0.0, last_leak_at=now)

    def evaluate(self, state: State | None, cost: int, now: float) -> Evaluation:
        capacity = self.config.capacity
        rate = self.config.rate
        current = state if isinstance(state, LeakyBucketState) else self.initial_state(now)

        elapsed = max(0.0, now - current.last_leak_at)
        leaked_at = max(current.last_leak_at, now)
        level = max(0.0, current.level - elapsed * rate)

        if level + cost <= capacity + EPSILON:
            filled = min(float(capacity), level + cost)
            return Evaluation(
                decision=Decision.admit(capacity, math.floor(capacity - filled + EPSILON)),
                state=LeakyBucketState(level=filled, last_leak_at=leaked_at),
            )

        retry_after = self.config.window_seconds if cost > capacity else (level + cost - capacity) / rate
        return Evaluation(
            decision=Decision.deny(capacity, math.floor(capacity - level + EPSILON), retry_after),
            state=LeakyBucketState(level=level, last_leak_at=leaked_at),
        )

    def state_ttl(self) -> float:
        return self.config.capacity / self.config.rate


__all__ = ["LeakyBucketStrategy"]
