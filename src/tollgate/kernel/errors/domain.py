"""Domain errors — limit rules that can never be satisfied."""

from __future__ import annotations

from typing import Any

from tollgate.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a rate-limit rule or invariant is violated."""

    default_code = "domain_error"


class InvalidConfigurationError(DomainError):
    """A limit configuration violates its invariants.

    Raised at construction time only; a request path never raises it.
    ``errors`` lists the offending fields.
    """

    default_code = "invalid_configuration"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = ["DomainError", "InvalidConfigurationError"]
