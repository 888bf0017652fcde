"""Token bucket – a reservoir refilled continuously at ``rate``.

Bursts up to ``capacity`` are admitted at once; after that requests are
admitted as fast as tokens trickle back in.
"""
from __future__ import annotations

import math

from tollgate.application.rate_limit.config import StrategyKind
from tollgate.application.rate_limit.decision import Decision
from tollgate.application.rate_limit.state import State, TokenBucketState
from tollgate.application.rate_limit.strategies.base import EPSILON, Evaluation, Strategy


class TokenBucketStrategy(Strategy):
    kind = StrategyKind.TOKEN_BUCKET

    def initial_state(self, now: float) -> TokenBucketState:
        return TokenBucketState(tokens=float(self.config.capacity), last_refill_at=now)

    def evaluate(self, state: State | None, cost: int, now: float) -> Evaluation:
        capacity = self.config.capacity
        rate = self.config.rate
        current = state if isinstance(state, TokenBucketState) else self.initial_state(now)

        # A clock that went backwards earns nothing and must not rewind the bucket.
        elapsed = max(0.0, now - current.last_refill_at)
        refilled_at = max(current.last_refill_at, now)
        tokens = min(float(capacity), current.tokens + elapsed * rate)

        if tokens + EPSILON >= cost:
            left = max(0.0, tokens - cost)
            return Evaluation(
                decision=Decision.admit(capacity, math.floor(left + EPSILON)),
                state=TokenBucketState(tokens=left, last_refill_at=refilled_at),
            )

        # A cost above capacity never fits; report a full window like the window strategies.
        retry_after = self.config.window_seconds if cost > capacity else (cost - tokens) / rate
        return Evaluation(
            decision=Decision.deny(capacity, math.floor(tokens + EPSILON), retry_after),
            state=TokenBucketState(tokens=tokens, last_refill_at=refilled_at),
        )

    def state_ttl(self) -> float:
        return self.config.capacity / self.config.rate


__all__ = ["TokenBucketStrategy"]
