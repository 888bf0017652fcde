"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class KeyRedactionProcessor:
    """structlog processor that shortens rate-limit keys in log events.

    Keys often embed client identity (IPs, API-key hashes). When *keep* is
    set, only the first *keep* characters of the ``key`` field survive.

    Usage::

        structlog.configure(processors=[KeyRedactionProcessor(keep=12), ...])
    """

    def __init__(self, keep: int = 12, field: str = "key") -> None:
        self._keep = keep
        self._field = field

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        value = event_dict.get(self._field)
        if isinstance(value, str) and len(value) > self._keep:
            event_dict[self._field] = value[: self._keep] + "…"
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["KeyRedactionProcessor", "get_logger"]
