"""Infrastructure errors — state backend failures."""

from __future__ import annotations

from typing import Any

from tollgate.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a rule violation."""

    default_code = "infrastructure_error"


class StoreUnavailableError(InfrastructureError):
    """The state store could not be reached or answered with an error."""

    default_code = "store_unavailable"
    context_fields = ("store",)

    def __init__(
        self,
        store: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"State store '{store}' is unavailable", **kwargs)
        self.store = store


class StoreTimeoutError(StoreUnavailableError):
    """A store call exceeded the caller-supplied timeout."""

    default_code = "store_timeout"


class CASConflictExhaustedError(StoreUnavailableError):
    """Too many concurrent writers raced on one key."""

    default_code = "cas_conflict_exhausted"
    context_fields = ("store", "key", "attempts")

    def __init__(self, store: str, key: str, attempts: int, **kwargs: Any) -> None:
        super().__init__(
            store,
            f"Gave up on key '{key}' after {attempts} conflicting writes",
            **kwargs,
        )
        self.key = key
        self.attempts = attempts


class StateCodecError(StoreUnavailableError):
    """A stored state could not be decoded (corrupt or foreign value)."""

    default_code = "state_codec_error"


__all__ = [
    "CASConflictExhaustedError",
    "InfrastructureError",
    "StateCodecError",
    "StoreTimeoutError",
    "StoreUnavailableError",
]
