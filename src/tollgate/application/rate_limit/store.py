"""Application rate limiting – StateStore port."""
from __future__ import annotations

import abc

from tollgate.application.rate_limit.state import State


class StateStore(abc.ABC):
    """Port: per-key state with optimistic concurrency.

    ``compare_and_swap`` writes *new* only if the stored state still equals
    *expected*; ``expected=None`` means the key must be absent. A ``False``
    return tells the caller to reload and recompute. *ttl* (seconds) bounds
    how long the entry may live without being written again.

    Backends that talk to the network raise
    :class:`~tollgate.kernel.errors.StoreUnavailableError` when they cannot
    answer.

    ``shared`` marks backends that several processes or hosts read and
    write. Timestamps kept in a shared store must come from a clock every
    writer agrees on.
    """

    name: str = "store"
    shared: bool = False

    @abc.abstractmethod
    async def load(self, key: str) -> State | None: ...

    @abc.abstractmethod
    async def compare_and_swap(
        self,
        key: str,
        expected: State | None,
        new: State,
        *,
        ttl: float | None = None,
    ) -> bool: ...

    @abc.abstractmethod
    async def delete(self, key: str) -> None: ...


__all__ = ["StateStore"]
