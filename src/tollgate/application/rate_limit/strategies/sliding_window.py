"""Sliding window log – exact accounting over the last ``window_seconds``.

The log keeps one ``(timestamp, weight)`` entry per admission instant, so
its length never exceeds the capacity. An entry stops counting exactly
``window_seconds`` after it was written: the live window is
``(now - window, now]``.
"""
from __future__ import annotations

from tollgate.application.rate_limit.config import StrategyKind
from tollgate.application.rate_limit.decision import Decision
from tollgate.application.rate_limit.state import SlidingWindowState, State
from tollgate.application.rate_limit.strategies.base import Evaluation, Strategy

Entries = tuple[tuple[float, int], ...]


class SlidingWindowStrategy(Strategy):
    kind = StrategyKind.SLIDING_WINDOW

    def initial_state(self, now: float) -> SlidingWindowState:  # noqa: ARG002
        return SlidingWindowState()

    def evaluate(self, state: State | None, cost: int, now: float) -> Evaluation:
        capacity = self.config.capacity
        horizon = now - self.config.window_seconds
        logged = state.entries if isinstance(state, SlidingWindowState) else ()
        entries: Entries = tuple(entry for entry in logged if entry[0] > horizon)
        used = sum(weight for _, weight in entries)

        if used + cost <= capacity:
            return Evaluation(
                decision=Decision.admit(capacity, capacity - used - cost),
                state=SlidingWindowState(entries=_append(entries, now, cost)),
            )

        return Evaluation(
            decision=Decision.deny(capacity, capacity - used, self._retry_after(entries, used, cost, now)),
            state=SlidingWindowState(entries=entries),
        )

    def _retry_after(self, entries: Entries, used: int, cost: int, now: float) -> float:
        """Time until enough of the oldest weight expires for *cost* to fit."""
        capacity = self.config.capacity
        window = self.config.window_seconds
        if cost > capacity:
            return window
        freed = 0
        for timestamp, weight in entries:
            freed += weight
            if used - freed + cost <= capacity:
                return timestamp + window - now
        return window

    def state_ttl(self) -> float:
        return self.config.window_seconds


def _append(entries: Entries, now: float, cost: int) -> Entries:
    if cost == 0:
        return entries
    if entries and entries[-1][0] == now:
        return entries[:-1] + ((now, entries[-1][1] + cost),)
    if entries and entries[-1][0] > now:
        # Clock regressed; keep the log ordered oldest first.
        return tuple(sorted(entries + ((now, cost),), key=lambda entry: entry[0]))
    return entries + ((now, cost),)


__all__ = ["SlidingWindowStrategy"]
