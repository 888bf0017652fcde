"""Application rate limiting – in-memory state store."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from tollgate.application.rate_limit.state import State
from tollgate.application.rate_limit.store import StateStore
from tollgate.kernel.time import Clock, MonotonicClock


@dataclass(frozen=True)
class _Entry:
    state: State
    expires_at: float | None


class InMemoryStateStore(StateStore):
    """Single-process state store.

    A ``threading.Lock`` makes each operation atomic, so one store may be
    shared by coroutines on several event loops and by plain threads.
    Entries written with a *ttl* read as absent once it elapses; call
    :meth:`sweep` periodically to reclaim their memory.
    """

    name = "memory"

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or MonotonicClock()
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def _live(self, key: str, now: float) -> _Entry | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at is not None and entry.expires_at <= now:
            del self._entries[key]
            return None
        return entry

    async def load(self, key: str) -> State | None:
        with self._lock:
            entry = self._live(key, self._clock.now())
            return entry.state if entry is not None else None

    async def compare_and_swap(
        self,
        key: str,
        expected: State | None,
        new: State,
        *,
        ttl: float | None = None,
    ) -> bool:
        with self._lock:
            now = self._clock.now()
            entry = self._live(key, now)
            current = entry.state if entry is not None else None
            if current != expected:
                return False
            expires_at = now + ttl if ttl is not None else None
            self._entries[key] = _Entry(state=new, expires_at=expires_at)
            return True

    async def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def sweep(self) -> int:
        """Drop expired entries and return how many were removed."""
        with self._lock:
            now = self._clock.now()
            expired = [
                key
                for key, entry in self._entries.items()
                if entry.expires_at is not None and entry.expires_at <= now
            ]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["InMemoryStateStore"]
