"""Root error class for the tollgate error hierarchy.

Every error carries a stable ``code`` plus the structured facts that explain
it (which store failed, which key, which setting). Subclasses name those
facts in ``context_fields``; :meth:`BaseError.to_dict` and
:meth:`BaseError.log_fields` pick them up, so a 429 body, a JSON ``str()``
and a structlog warning all describe a failure the same way.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Caller-supplied extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"
    context_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    @property
    def context(self) -> dict[str, Any]:
        """Attributes named in ``context_fields`` that are set on this instance."""
        return {
            name: getattr(self, name)
            for name in self.context_fields
            if getattr(self, name, None) is not None
        }

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging / HTTP responses)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        context = self.context
        if context:
            payload["context"] = context
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Flat keyword arguments for a structlog event describing this error."""
        return {"error": self.code, **self.context}


__all__ = ["BaseError"]
