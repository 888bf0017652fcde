"""Application rate limiting – KeyResolver port and key helpers.

The engine only ever sees the resolved key string. Resolvers live with
whatever receives the request (see :mod:`tollgate.adapters.fastapi.keys`).
"""
from __future__ import annotations

import hashlib
from typing import Protocol, TypeVar

RequestT_contra = TypeVar("RequestT_contra", contravariant=True)


class KeyResolver(Protocol[RequestT_contra]):
    """Port: map an inbound request to the key its quota is tracked under."""

    def __call__(self, request: RequestT_contra) -> str: ...


def hashed_key(value: str, length: int = 32) -> str:
    """SHA-256 of *value*, truncated to *length* hex chars (128 bits by default)."""
    return hashlib.sha256(value.encode()).hexdigest()[:length]


def namespaced(prefix: str, resolver: KeyResolver[RequestT_contra]) -> KeyResolver[RequestT_contra]:
    """Wrap *resolver* so its keys read ``<prefix>:<key>``."""

    def resolve(request: RequestT_contra) -> str:
        return f"{prefix}:{resolver(request)}"

    return resolve


__all__ = ["KeyResolver", "hashed_key", "namespaced"]
