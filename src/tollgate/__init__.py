"""
tollgate – keyed admission control for services.

Import path convention::

    from tollgate.application.rate_limit import RateLimiter, LimitConfig, StrategyKind
    from tollgate.adapters.redis import RedisStateStore
    from tollgate.adapters.fastapi import RateLimitMiddleware
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
