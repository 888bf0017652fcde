"""Application rate limiting – Decision value object."""
from __future__ import annotations

import dataclasses
import math


@dataclasses.dataclass(frozen=True)
class Decision:
    """Outcome of one admission check.

    ``retry_after`` is in seconds and is ``0.0`` for admitted requests. A
    cost larger than the capacity can never be admitted; every strategy
    then reports one full ``window_seconds``.
    ``degraded`` marks decisions made by the failure policy because the
    state store could not be consulted.
    """

    allowed: bool
    remaining: int
    retry_after: float
    limit: int
    degraded: bool = False

    @property
    def retry_after_header(self) -> str:
        """``Retry-After`` value in whole seconds, rounded up."""
        return str(max(0, math.ceil(self.retry_after)))

    @classmethod
    def admit(cls, limit: int, remaining: int) -> Decision:
        return cls(allowed=True, remaining=_clamp(remaining, limit), retry_after=0.0, limit=limit)

    @classmethod
    def deny(cls, limit: int, remaining: int, retry_after: float) -> Decision:
        return cls(
            allowed=False,
            remaining=_clamp(remaining, limit),
            retry_after=max(0.0, retry_after),
            limit=limit,
        )


def _clamp(remaining: int, limit: int) -> int:
    return max(0, min(limit, remaining))


__all__ = ["Decision"]
