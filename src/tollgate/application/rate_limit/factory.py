"""Application rate limiting – settings-driven construction.

Example::

    settings = EnvSettingsLoader().load(RateLimitSettings)
    limiter = build_rate_limiter(settings)

reads ``RATE_LIMIT_STRATEGY``, ``RATE_LIMIT_CAPACITY``,
``RATE_LIMIT_WINDOW_SECONDS`` and the other fields below.
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from tollgate.application.rate_limit.config import LimitConfig, StrategyKind
from tollgate.application.rate_limit.limiter import RateLimiter
from tollgate.application.rate_limit.policy import FailurePolicy
from tollgate.application.rate_limit.store import StateStore
from tollgate.application.rate_limit.strategies import build_strategy
from tollgate.config.settings import Settings
from tollgate.config.validation import InvalidSettingValueError
from tollgate.kernel.errors import InvalidConfigurationError
from tollgate.kernel.time import Clock
from tollgate.resilience.retry import ExponentialBackoff


@dataclasses.dataclass
class RateLimitSettings(Settings):
    """One limit rule plus the knobs of the facade around it.

    ``refill_rate = 0`` derives the rate from capacity and window,
    ``store_timeout_seconds = 0`` disables the store timeout and an empty
    ``redis_url`` keeps state in process memory. ``cas_backoff_seconds``
    and ``cas_backoff_max_seconds`` pace the retries of a check that lost
    a compare-and-swap race.
    """

    _prefix: ClassVar[str] = "RATE_LIMIT"

    strategy: str = "token_bucket"
    capacity: int = 60
    window_seconds: float = 60.0
    refill_rate: float = 0.0
    cost: int = 1
    failure_policy: str = "open"
    max_attempts: int = 5
    cas_backoff_seconds: float = 0.002
    cas_backoff_max_seconds: float = 0.05
    store_timeout_seconds: float = 0.0
    redis_url: str = ""
    key_prefix: str = "tollgate"

    def _validate(self) -> None:
        try:
            StrategyKind.parse(self.strategy)
        except InvalidConfigurationError as exc:
            raise InvalidSettingValueError.from_configuration_error(exc, "strategy", self.strategy) from exc
        try:
            FailurePolicy.parse(self.failure_policy)
        except InvalidConfigurationError as exc:
            raise InvalidSettingValueError.from_configuration_error(
                exc, "failure_policy", self.failure_policy
            ) from exc
        if self.max_attempts < 1:
            raise InvalidSettingValueError("max_attempts", self.max_attempts, "must be >= 1")
        if self.store_timeout_seconds < 0:
            raise InvalidSettingValueError("store_timeout_seconds", self.store_timeout_seconds, "must be >= 0")
        if self.cas_backoff_seconds < 0:
            raise InvalidSettingValueError("cas_backoff_seconds", self.cas_backoff_seconds, "must be >= 0")
        if self.cas_backoff_max_seconds < self.cas_backoff_seconds:
            raise InvalidSettingValueError(
                "cas_backoff_max_seconds", self.cas_backoff_max_seconds, "must be >= cas_backoff_seconds"
            )
        try:
            self.limit_config()
        except InvalidConfigurationError as exc:
            raise InvalidSettingValueError.from_configuration_error(exc) from exc

    def limit_config(self) -> LimitConfig:
        return LimitConfig(
            capacity=self.capacity,
            window_seconds=self.window_seconds,
            refill_rate=self.refill_rate or None,
            cost=self.cost,
        )


def build_rate_limiter(
    settings: RateLimitSettings,
    *,
    store: StateStore | None = None,
    clock: Clock | None = None,
    name: str = "default",
) -> RateLimiter:
    """Compose strategy, store and facade from *settings*.

    An explicit *store* wins over ``settings.redis_url``. Without a *clock*
    a Redis-backed limiter reads :class:`~tollgate.kernel.time.WallClock`,
    since its state is shared with every other host using the same URL.
    """
    strategy = build_strategy(settings.strategy, settings.limit_config())
    if store is None and settings.redis_url:
        from tollgate.adapters.redis import RedisStateStore

        store = RedisStateStore.from_url(settings.redis_url, prefix=settings.key_prefix)
    return RateLimiter(
        strategy,
        store,
        clock,
        failure_policy=settings.failure_policy,
        max_attempts=settings.max_attempts,
        backoff=ExponentialBackoff(settings.cas_backoff_seconds, settings.cas_backoff_max_seconds),
        store_timeout=settings.store_timeout_seconds or None,
        name=name,
    )


__all__ = ["RateLimitSettings", "build_rate_limiter"]
