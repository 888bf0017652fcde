"""Redis adapter – RedisStateStore.

Shares per-key state between processes. Compare-and-swap runs as a single
Lua script so the GET-compare-SET is atomic on the server; the entry's TTL
is refreshed on every successful write so idle keys reap themselves.
"""
from __future__ import annotations

import math
from typing import Any

from tollgate.adapters.redis.client import RedisClient
from tollgate.adapters.redis.codec import decode_state, encode_state
from tollgate.application.rate_limit.state import State
from tollgate.application.rate_limit.store import StateStore

# ARGV[1] = expected bytes ('' = key must be absent), ARGV[2] = new bytes,
# ARGV[3] = TTL in ms ('' = no expiry).
CAS_SCRIPT = """
local current = redis.call('GET', KEYS[1])
if ARGV[1] == '' then
    if current then
        return 0
    end
elseif current ~= ARGV[1] then
    return 0
end
if ARGV[3] == '' then
    redis.call('SET', KEYS[1], ARGV[2])
else
    redis.call('SET', KEYS[1], ARGV[2], 'PX', ARGV[3])
end
return 1
"""


class RedisStateStore(StateStore):
    """State store backed by Redis string keys ``<prefix>:<key>``."""

    name = "redis"
    shared = True

    def __init__(self, client: RedisClient, prefix: str = "tollgate") -> None:
        self._client = client
        self._prefix = prefix

    @classmethod
    def from_url(cls, url: str, prefix: str = "tollgate", **kwargs: Any) -> RedisStateStore:
        return cls(RedisClient(url, **kwargs), prefix=prefix)

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    async def load(self, key: str) -> State | None:
        raw = await self._client.get(self._key(key))
        if raw is None:
            return None
        return decode_state(raw)

    async def compare_and_swap(
        self,
        key: str,
        expected: State | None,
        new: State,
        *,
        ttl: float | None = None,
    ) -> bool:
        expected_raw = b"" if expected is None else encode_state(expected)
        ttl_ms = "" if ttl is None else str(max(1, math.ceil(ttl * 1000)))
        result = await self._client.eval(
            CAS_SCRIPT, 1, self._key(key), expected_raw, encode_state(new), ttl_ms
        )
        return int(result) == 1

    async def delete(self, key: str) -> None:
        await self._client.delete(self._key(key))

    async def close(self) -> None:
        await self._client.close()


__all__ = ["CAS_SCRIPT", "RedisStateStore"]
