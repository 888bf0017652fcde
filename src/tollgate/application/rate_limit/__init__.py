"""Application rate limiting – strategies, state store port and the RateLimiter facade."""
from tollgate.application.rate_limit.config import LimitConfig, StrategyKind
from tollgate.application.rate_limit.decision import Decision
from tollgate.application.rate_limit.factory import RateLimitSettings, build_rate_limiter
from tollgate.application.rate_limit.keys import KeyResolver, hashed_key, namespaced
from tollgate.application.rate_limit.limiter import RateLimiter
from tollgate.application.rate_limit.local import InMemoryStateStore
from tollgate.application.rate_limit.policy import FailurePolicy
from tollgate.application.rate_limit.state import (
    FixedWindowState,
    LeakyBucketState,
    SlidingWindowState,
    State,
    TokenBucketState,
)
from tollgate.application.rate_limit.store import StateStore
from tollgate.application.rate_limit.strategies import (
    Evaluation,
    FixedWindowStrategy,
    LeakyBucketStrategy,
    SlidingWindowStrategy,
    Strategy,
    TokenBucketStrategy,
    build_strategy,
)

__all__ = [
    "Decision",
    "Evaluation",
    "FailurePolicy",
    "FixedWindowState",
    "FixedWindowStrategy",
    "InMemoryStateStore",
    "KeyResolver",
    "LeakyBucketState",
    "LeakyBucketStrategy",
    "LimitConfig",
    "RateLimitSettings",
    "RateLimiter",
    "SlidingWindowState",
    "SlidingWindowStrategy",
    "State",
    "StateStore",
    "StrategyKind",
    "Strategy",
    "TokenBucketState",
    "TokenBucketStrategy",
    "build_rate_limiter",
    "build_strategy",
    "hashed_key",
    "namespaced",
]
