"""Application rate limiting – behaviour when the state store fails."""
from __future__ import annotations

from enum import Enum

from tollgate.kernel.errors import InvalidConfigurationError


class FailurePolicy(str, Enum):
    """What :meth:`RateLimiter.check` returns when the store is unavailable.

    ``FAIL_OPEN`` admits the request (suits low-criticality limits),
    ``FAIL_CLOSED`` denies it (suits security-sensitive limits such as login
    throttling) and ``RAISE`` lets :class:`StoreUnavailableError` propagate.
    """

    FAIL_OPEN = "open"
    FAIL_CLOSED = "closed"
    RAISE = "raise"

    @classmethod
    def parse(cls, value: str | FailurePolicy) -> FailurePolicy:
        if isinstance(value, cls):
            return value
        normalised = str(value).strip().lower().replace("_", "-").removeprefix("fail-")
        try:
            return cls(normalised)
        except ValueError:
            raise InvalidConfigurationError(
                f"Unknown failure policy {value!r}; expected open, closed or raise",
                errors=[{"field": "failure_policy", "value": value}],
            ) from None


__all__ = ["FailurePolicy"]
