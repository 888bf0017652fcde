"""Application rate limiting – the four admission strategies."""
from __future__ import annotations

from tollgate.application.rate_limit.config import LimitConfig, StrategyKind
from tollgate.application.rate_limit.strategies.base import Evaluation, Strategy
from tollgate.application.rate_limit.strategies.fixed_window import FixedWindowStrategy
from tollgate.application.rate_limit.strategies.leaky_bucket import LeakyBucketStrategy
from tollgate.application.rate_limit.strategies.sliding_window import SlidingWindowStrategy
from tollgate.application.rate_limit.strategies.token_bucket import TokenBucketStrategy

STRATEGIES: dict[StrategyKind, type[Strategy]] = {
    StrategyKind.TOKEN_BUCKET: TokenBucketStrategy,
    StrategyKind.FIXED_WINDOW: FixedWindowStrategy,
    StrategyKind.SLIDING_WINDOW: SlidingWindowStrategy,
    StrategyKind.LEAKY_BUCKET: LeakyBucketStrategy,
}


def build_strategy(kind: StrategyKind | str, config: LimitConfig) -> Strategy:
    """Instantiate the strategy registered for *kind*."""
    return STRATEGIES[StrategyKind.parse(kind)](config)


__all__ = [
    "STRATEGIES",
    "Evaluation",
    "FixedWindowStrategy",
    "LeakyBucketStrategy",
    "SlidingWindowStrategy",
    "Strategy",
    "TokenBucketStrategy",
    "build_strategy",
]
