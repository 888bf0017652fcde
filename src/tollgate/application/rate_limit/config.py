"""Application rate limiting – StrategyKind and LimitConfig."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from tollgate.kernel.errors import InvalidConfigurationError


class StrategyKind(str, Enum):
    TOKEN_BUCKET = "token_bucket"
    FIXED_WINDOW = "fixed_window"
    SLIDING_WINDOW = "sliding_window"
    LEAKY_BUCKET = "leaky_bucket"

    @classmethod
    def parse(cls, value: str | StrategyKind) -> StrategyKind:
        """Accept ``token_bucket``, ``tokenBucket``, ``token-bucket`` and friends."""
        if isinstance(value, cls):
            return value
        raw = str(value).strip().replace("-", "_")
        snake = "".join(f"_{ch.lower()}" if ch.isupper() else ch for ch in raw).lstrip("_")
        for candidate in (raw.lower(), snake):
            try:
                return cls(candidate)
            except ValueError:
                continue
        choices = ", ".join(k.value for k in cls)
        raise InvalidConfigurationError(
            f"Unknown strategy {value!r}; expected one of: {choices}",
            errors=[{"field": "strategy", "value": value}],
        )


@dataclasses.dataclass(frozen=True)
class LimitConfig:
    """Immutable limit rule supplied when a strategy is built.

    *capacity* – max permits per window (or bucket size).
    *window_seconds* – window length; also sets the default refill rate.
    *refill_rate* – permits per second for the bucket strategies.
      Defaults to ``capacity / window_seconds``.
    *cost* – permits a request consumes when the caller does not say.
    """

    capacity: int
    window_seconds: float
    refill_rate: float | None = None
    cost: int = 1

    def __post_init__(self) -> None:
        errors: list[dict[str, Any]] = []
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int) or self.capacity < 1:
            errors.append({"field": "capacity", "value": self.capacity, "reason": "must be an integer >= 1"})
        if not self.window_seconds > 0:
            errors.append({"field": "window_seconds", "value": self.window_seconds, "reason": "must be > 0"})
        if self.refill_rate is not None and not self.refill_rate > 0:
            errors.append({"field": "refill_rate", "value": self.refill_rate, "reason": "must be > 0"})
        if not isinstance(self.cost, int) or self.cost < 0:
            errors.append({"field": "cost", "value": self.cost, "reason": "must be an integer >= 0"})
        if errors:
            fields = ", ".join(e["field"] for e in errors)
            raise InvalidConfigurationError(f"Invalid limit configuration: {fields}", errors=errors)

    @property
    def rate(self) -> float:
        """Effective permits per second."""
        if self.refill_rate is not None:
            return float(self.refill_rate)
        return self.capacity / self.window_seconds

    @property
    def label(self) -> str:
        return f"{self.capacity} req/{self.window_seconds:g}s"


__all__ = ["LimitConfig", "StrategyKind"]
