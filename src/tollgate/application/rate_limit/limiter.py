"""Application rate limiting – RateLimiter facade.

Combines a :class:`Strategy`, a :class:`StateStore` and a :class:`Clock`
behind ``check(key, cost)``. Concurrent checks on one key are serialised
by the store's compare-and-swap: each attempt reloads the state, lets the
strategy recompute, and writes only if nobody else wrote in between. A
check that loses a round pauses for a jittered, growing delay before it
reads again, so the losers of one round do not collide again in the next.
"""
from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

from tollgate.application.rate_limit.config import LimitConfig
from tollgate.application.rate_limit.decision import Decision
from tollgate.application.rate_limit.local import InMemoryStateStore
from tollgate.application.rate_limit.policy import FailurePolicy
from tollgate.application.rate_limit.store import StateStore
from tollgate.application.rate_limit.strategies import Strategy
from tollgate.kernel.errors import (
    CASConflictExhaustedError,
    InvalidConfigurationError,
    RateLimitExceededError,
    StoreTimeoutError,
    StoreUnavailableError,
)
from tollgate.kernel.time import Clock, MonotonicClock, WallClock
from tollgate.observability.logging import get_logger
from tollgate.resilience.retry import BackoffStrategy, ExponentialBackoff, FullJitter, JitterStrategy

T = TypeVar("T")


class RateLimiter:
    """Public entry point for admission decisions.

    Parameters
    ----------
    strategy:
        The admission algorithm, already bound to its :class:`LimitConfig`.
    store:
        Where per-key state lives. Defaults to a fresh
        :class:`InMemoryStateStore` sharing *clock*.
    clock:
        Time source. Defaults to :class:`WallClock` when *store* is shared
        between processes (``store.shared``): stored timestamps must mean
        the same instant on every host. Otherwise :class:`MonotonicClock`.
    failure_policy:
        Outcome when the store is unavailable, times out or a key stays
        contended for *max_attempts* rounds.
    max_attempts:
        Ceiling on compare-and-swap rounds per check.
    backoff:
        Pause ceiling after each lost round; defaults to
        :class:`ExponentialBackoff`.
    jitter:
        Picks the actual pause under the ceiling; defaults to
        :class:`FullJitter`.
    store_timeout:
        Seconds allowed for each store call; ``None`` waits indefinitely.
    fallback_retry_after:
        ``retry_after`` reported on fail-closed denials.
    name:
        Bound into every log line for this limiter.
    """

    def __init__(
        self,
        strategy: Strategy,
        store: StateStore | None = None,
        clock: Clock | None = None,
        *,
        failure_policy: FailurePolicy | str = FailurePolicy.FAIL_OPEN,
        max_attempts: int = 5,
        backoff: BackoffStrategy | None = None,
        jitter: JitterStrategy | None = None,
        store_timeout: float | None = None,
        fallback_retry_after: float = 1.0,
        name: str = "default",
    ) -> None:
        if max_attempts < 1:
            raise InvalidConfigurationError(
                "max_attempts must be >= 1",
                errors=[{"field": "max_attempts", "value": max_attempts}],
            )
        if store_timeout is not None and not store_timeout > 0:
            raise InvalidConfigurationError(
                "store_timeout must be > 0 when set",
                errors=[{"field": "store_timeout", "value": store_timeout}],
            )
        self._strategy = strategy
        if clock is None:
            clock = WallClock() if store is not None and store.shared else MonotonicClock()
        self._clock = clock
        self._store = store if store is not None else InMemoryStateStore(self._clock)
        self._policy = FailurePolicy.parse(failure_policy)
        self._max_attempts = max_attempts
        self._backoff = backoff or ExponentialBackoff()
        self._jitter = jitter or FullJitter()
        self._store_timeout = store_timeout
        self._fallback_retry_after = fallback_retry_after
        self._log = get_logger(__name__, limiter=name, strategy=strategy.kind.value)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def config(self) -> LimitConfig:
        return self._strategy.config

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @property
    def store(self) -> StateStore:
        return self._store

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def failure_policy(self) -> FailurePolicy:
        return self._policy

    # ------------------------------------------------------------------
    # Admission
    # ------------------------------------------------------------------

    async def check(self, key: str, cost: int | None = None) -> Decision:
        """Decide whether *key* may spend *cost* permits now.

        Denials are returned, never raised. Store failures are resolved by
        the failure policy unless it is ``RAISE``.
        """
        cost = self._resolve_cost(cost)
        try:
            decision = await self._admit(key, cost)
        except StoreUnavailableError as exc:
            return self._on_store_failure(key, cost, exc)
        if not decision.allowed:
            self._log.debug(
                "rate_limit.denied",
                key=key,
                cost=cost,
                remaining=decision.remaining,
                retry_after=decision.retry_after,
            )
        return decision

    async def enforce(self, key: str, cost: int | None = None) -> Decision:
        """Like :meth:`check`, but raise :class:`RateLimitExceededError` on denial."""
        decision = await self.check(key, cost)
        if not decision.allowed:
            raise RateLimitExceededError(
                f"Rate limit exceeded for '{key}' ({self.config.label})",
                retry_after_seconds=decision.retry_after,
                detail={"limit": decision.limit, "remaining": decision.remaining},
            )
        return decision

    async def peek(self, key: str) -> Decision:
        """Report *key*'s standing without consuming permits or writing."""
        try:
            current = await self._call(self._store.load(key))
        except StoreUnavailableError as exc:
            return self._on_store_failure(key, 0, exc)
        return self._strategy.evaluate(current, 0, self._clock.now()).decision

    async def reset(self, key: str) -> None:
        """Forget *key*'s state; its next request starts fresh."""
        await self._call(self._store.delete(key))
        self._log.info("rate_limit.reset", key=key)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve_cost(self, cost: int | None) -> int:
        if cost is None:
            return self.config.cost
        if isinstance(cost, bool) or not isinstance(cost, int) or cost < 0:
            raise ValueError(f"cost must be a non-negative integer, got {cost!r}")
        return cost

    async def _admit(self, key: str, cost: int) -> Decision:
        ttl = self._strategy.state_ttl()
        for attempt in range(1, self._max_attempts + 1):
            current = await self._call(self._store.load(key))
            outcome = self._strategy.evaluate(current, cost, self._clock.now())
            if outcome.state == current:
                return outcome.decision
            if await self._call(self._store.compare_and_swap(key, current, outcome.state, ttl=ttl)):
                return outcome.decision
            if attempt == self._max_attempts:
                break
            delay = self._jitter.apply(self._backoff.compute(attempt))
            self._log.debug("rate_limit.cas_conflict", key=key, attempt=attempt, delay=delay)
            await asyncio.sleep(delay)
        raise CASConflictExhaustedError(self._store.name, key, self._max_attempts)

    async def _call(self, awaitable: Awaitable[T]) -> T:
        if self._store_timeout is None:
            return await awaitable
        try:
            return await asyncio.wait_for(awaitable, self._store_timeout)
        except asyncio.TimeoutError as exc:
            raise StoreTimeoutError(
                self._store.name,
                f"State store '{self._store.name}' did not answer within {self._store_timeout}s",
                cause=exc,
            ) from exc

    def _on_store_failure(self, key: str, cost: int, exc: StoreUnavailableError) -> Decision:
        if self._policy is FailurePolicy.RAISE:
            raise exc
        limit = self.config.capacity
        if self._policy is FailurePolicy.FAIL_OPEN:
            decision = Decision(allowed=True, remaining=0, retry_after=0.0, limit=limit, degraded=True)
        else:
            decision = Decision(
                allowed=False,
                remaining=0,
                retry_after=self._fallback_retry_after,
                limit=limit,
                degraded=True,
            )
        fields = exc.log_fields()
        fields.update(key=key, cost=cost, policy=self._policy.value, allowed=decision.allowed)
        self._log.warning("rate_limit.store_unavailable", **fields)
        return decision

    def __repr__(self) -> str:
        return f"RateLimiter({self._strategy!r}, store={self._store.name}, policy={self._policy.value})"


__all__ = ["RateLimiter"]
