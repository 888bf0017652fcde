"""Redis adapter – RedisClient."""
from __future__ import annotations

from typing import Any, Awaitable, TypeVar

from tollgate.kernel.errors import StoreUnavailableError

T = TypeVar("T")


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError("Install 'tollgate[redis]' to use the Redis adapter") from exc


def _redis_errors() -> tuple[type[BaseException], ...]:
    from redis.exceptions import RedisError

    return (RedisError, OSError)


class RedisClient:
    """Thin async Redis wrapper that reports failures as ``StoreUnavailableError``.

    Extra *kwargs* go to ``redis.asyncio.from_url``; pass
    ``socket_timeout`` / ``socket_connect_timeout`` to bound network waits.
    """

    def __init__(self, url: str, **kwargs: Any) -> None:
        aioredis = _require_redis()
        self._client = aioredis.from_url(url, **kwargs)
        self._errors = _redis_errors()

    async def _run(self, operation: str, awaitable: Awaitable[T]) -> T:
        try:
            return await awaitable
        except self._errors as exc:
            raise StoreUnavailableError(
                "redis", f"Redis {operation} failed: {exc}", cause=exc
            ) from exc

    async def get(self, key: str) -> bytes | None:
        return await self._run("GET", self._client.get(key))

    async def eval(self, script: str, numkeys: int, *keys_and_args: Any) -> Any:
        return await self._run("EVAL", self._client.eval(script, numkeys, *keys_and_args))

    async def delete(self, key: str) -> None:
        await self._run("DEL", self._client.delete(key))

    async def ping(self) -> bool:
        return bool(await self._run("PING", self._client.ping()))

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisClient"]
