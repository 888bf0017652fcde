"""FastAPI adapter – RateLimitMiddleware.

Pure ASGI middleware; works under FastAPI, Starlette or any ASGI server.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Callable, Iterable, Sequence

from tollgate.adapters.fastapi.keys import client_ip_key, forwarded_ip_key
from tollgate.application.rate_limit import Decision, RateLimiter

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'tollgate[fastapi]' to use the FastAPI adapter"
        ) from exc


def rate_limit_headers(decision: Decision) -> list[tuple[bytes, bytes]]:
    """``X-RateLimit-*`` (and, on denial, ``Retry-After``) headers for *decision*."""
    headers = [
        (b"x-ratelimit-limit", str(decision.limit).encode()),
        (b"x-ratelimit-remaining", str(decision.remaining).encode()),
    ]
    if not decision.allowed:
        headers.append((b"retry-after", decision.retry_after_header.encode()))
    return headers


class RateLimitMiddleware:
    """Admit or reject HTTP requests through a :class:`RateLimiter`.

    Parameters
    ----------
    app:
        The inner ASGI application.
    limiter:
        Global limiter, used when no entry in *routes* matches. ``None``
        leaves unmatched paths unlimited.
    key_resolver:
        ``(scope) -> key``; defaults to :func:`client_ip_key`, or to
        :func:`forwarded_ip_key` when *trusted_proxies* is given.
    trusted_proxies:
        Peers (IPs, CIDR blocks, names) whose ``X-Forwarded-For`` is
        believed. Ignored when *key_resolver* is set.
    cost_fn:
        ``(scope) -> cost``; defaults to the limiter's configured cost.
    routes:
        ``(path_prefix, limiter)`` pairs. The longest matching prefix wins
        and its keys are namespaced by the prefix.
    """

    def __init__(
        self,
        app: "ASGIApp",
        limiter: RateLimiter | None = None,
        *,
        key_resolver: Callable[["Scope"], str] | None = None,
        cost_fn: Callable[["Scope"], int] | None = None,
        routes: Sequence[tuple[str, RateLimiter]] = (),
        trusted_proxies: Iterable[str] = (),
    ) -> None:
        _require_fastapi()
        self.app = app
        self._limiter = limiter
        trusted = list(trusted_proxies)
        if key_resolver is None:
            key_resolver = forwarded_ip_key(trusted) if trusted else client_ip_key
        self._key_resolver = key_resolver
        self._cost_fn = cost_fn
        self._routes = sorted(routes, key=lambda route: len(route[0]), reverse=True)

    def _select(self, path: str, key: str) -> tuple[RateLimiter | None, str]:
        for prefix, limiter in self._routes:
            if path.startswith(prefix):
                return limiter, f"route:{prefix}:{key}"
        return self._limiter, key

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        limiter, key = self._select(scope.get("path", ""), self._key_resolver(scope))
        if limiter is None:
            await self.app(scope, receive, send)
            return

        cost = self._cost_fn(scope) if self._cost_fn is not None else None
        decision = await limiter.check(key, cost)
        extra_headers = rate_limit_headers(decision)

        if not decision.allowed:
            body = json.dumps({
                "code": "rate_limit_exceeded",
                "message": f"Rate limit exceeded. Retry after {decision.retry_after_header}s.",
            }).encode()
            headers = [
                (b"content-type", b"application/json"),
                (b"content-length", str(len(body)).encode()),
                *extra_headers,
            ]
            await send({"type": "http.response.start", "status": 429, "headers": headers})
            await send({"type": "http.response.body", "body": body})
            return

        async def send_with_headers(message: Any) -> None:
            if message["type"] == "http.response.start":
                headers_list: list[tuple[bytes, bytes]] = list(message.get("headers", []))
                headers_list.extend(extra_headers)
                message = {**message, "headers": headers_list}
            await send(message)

        await self.app(scope, receive, send_with_headers)


__all__ = ["RateLimitMiddleware", "rate_limit_headers"]
