"""Application-layer errors — raised to callers that opt into exceptions."""

from __future__ import annotations

from typing import Any

from tollgate.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class RateLimitExceededError(ApplicationError):
    """Request quota exceeded.

    Only :meth:`RateLimiter.enforce` raises this; :meth:`RateLimiter.check`
    reports denials through its return value.
    """

    default_code = "rate_limit_exceeded"
    context_fields = ("retry_after_seconds",)

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        retry_after_seconds: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.retry_after_seconds = retry_after_seconds


__all__ = ["ApplicationError", "RateLimitExceededError"]
