"""Fixed window – a counter per aligned window of ``window_seconds``.

Windows start at multiples of the window length. Up to twice the capacity
can pass around a window boundary (the tail of one window plus the head of
the next); that is the price of O(1) state. Use the sliding window when
the seam matters.
"""
from __future__ import annotations

import math

from tollgate.application.rate_limit.config import StrategyKind
from tollgate.application.rate_limit.decision import Decision
from tollgate.application.rate_limit.state import FixedWindowState, State
from tollgate.application.rate_limit.strategies.base import Evaluation, Strategy


class FixedWindowStrategy(Strategy):
    kind = StrategyKind.FIXED_WINDOW

    def window_start(self, now: float) -> float:
        window = self.config.window_seconds
        return float(math.floor(now / window) * window)

    def initial_state(self, now: float) -> FixedWindowState:
        return FixedWindowState(window_start=self.window_start(now), count=0)

    def evaluate(self, state: State | None, cost: int, now: float) -> Evaluation:
        capacity = self.config.capacity
        window = self.config.window_seconds
        start = self.window_start(now)

        # A stored window later than ``start`` means the clock regressed; keep counting in it.
        if isinstance(state, FixedWindowState) and state.window_start >= start:
            current = state
        else:
            current = FixedWindowState(window_start=start, count=0)

        if current.count + cost <= capacity:
            count = current.count + cost
            return Evaluation(
                decision=Decision.admit(capacity, capacity - count),
                state=FixedWindowState(window_start=current.window_start, count=count),
            )

        if cost > capacity:
            retry_after = window
        else:
            retry_after = current.window_start + window - now
        return Evaluation(
            decision=Decision.deny(capacity, capacity - current.count, retry_after),
            state=current,
        )

    def state_ttl(self) -> float:
        return self.config.window_seconds


__all__ = ["FixedWindowStrategy"]
