"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from tollgate.kernel.errors import (
    ApplicationError,
    BaseError,
    CASConflictExhaustedError,
    DomainError,
    InfrastructureError,
    InvalidConfigurationError,
    RateLimitExceededError,
    StateCodecError,
    StoreTimeoutError,
    StoreUnavailableError,
)


# ---------------------------------------------------------------------------
# BaseError
# ---------------------------------------------------------------------------


class TestBaseError:
    def test_message_and_default_code(self) -> None:
        err = BaseError("boom")
        assert err.message == "boom"
        assert err.code == "base_error"
        assert err.detail == {}

    def test_custom_code_and_detail(self) -> None:
        err = BaseError("boom", code="custom", detail={"k": 1})
        assert err.code == "custom"
        assert err.detail == {"k": 1}

    def test_cause_is_chained(self) -> None:
        original = RuntimeError("root")
        err = BaseError("wrapped", cause=original)
        assert err.__cause__ is original
        assert err.to_dict()["cause"] == repr(original)

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("boom")))
        assert payload == {"code": "base_error", "message": "boom", "detail": {}}

    def test_repr(self) -> None:
        assert repr(BaseError("x")) == "BaseError(code='base_error', message='x')"

    def test_no_context_by_default(self) -> None:
        err = BaseError("boom")
        assert err.context == {}
        assert "context" not in err.to_dict()
        assert err.log_fields() == {"error": "base_error"}

    def test_context_fields_collected(self) -> None:
        class QuotaError(BaseError):
            default_code = "quota"
            context_fields = ("tenant", "missing")

        err = QuotaError("over")
        err.tenant = "acme"  # type: ignore[attr-defined]
        assert err.context == {"tenant": "acme"}
        assert json.loads(str(err))["context"] == {"tenant": "acme"}
        assert err.log_fields() == {"error": "quota", "tenant": "acme"}


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls,parent",
        [
            (DomainError, BaseError),
            (InvalidConfigurationError, DomainError),
            (ApplicationError, BaseError),
            (RateLimitExceededError, ApplicationError),
            (InfrastructureError, BaseError),
            (StoreUnavailableError, InfrastructureError),
            (StoreTimeoutError, StoreUnavailableError),
            (CASConflictExhaustedError, StoreUnavailableError),
            (StateCodecError, StoreUnavailableError),
        ],
    )
    def test_subclassing(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)


class TestInvalidConfigurationError:
    def test_errors_included_in_dict(self) -> None:
        err = InvalidConfigurationError("bad", errors=[{"field": "capacity"}])
        assert err.code == "invalid_configuration"
        assert err.to_dict()["errors"] == [{"field": "capacity"}]

    def test_errors_default_empty(self) -> None:
        assert InvalidConfigurationError("bad").errors == []


class TestRateLimitExceededError:
    def test_defaults(self) -> None:
        err = RateLimitExceededError()
        assert err.message == "Rate limit exceeded"
        assert err.code == "rate_limit_exceeded"
        assert err.retry_after_seconds is None

    def test_retry_after(self) -> None:
        assert RateLimitExceededError(retry_after_seconds=2.5).retry_after_seconds == 2.5

    def test_retry_after_in_dict(self) -> None:
        assert RateLimitExceededError(retry_after_seconds=2.5).to_dict()["context"] == {"retry_after_seconds": 2.5}
        assert "context" not in RateLimitExceededError().to_dict()


class TestStoreErrors:
    def test_store_unavailable_default_message(self) -> None:
        err = StoreUnavailableError("redis")
        assert err.store == "redis"
        assert "redis" in err.message
        assert err.code == "store_unavailable"

    def test_timeout_code(self) -> None:
        assert StoreTimeoutError("redis").code == "store_timeout"

    def test_cas_exhausted_fields(self) -> None:
        err = CASConflictExhaustedError("memory", "user-1", 5)
        assert err.key == "user-1"
        assert err.attempts == 5
        assert err.store == "memory"
        assert "5" in err.message
        assert err.code == "cas_conflict_exhausted"

    def test_store_in_log_fields(self) -> None:
        assert StoreTimeoutError("redis").log_fields() == {"error": "store_timeout", "store": "redis"}

    def test_cas_exhausted_context(self) -> None:
        payload = json.loads(str(CASConflictExhaustedError("memory", "user-1", 5)))
        assert payload["context"] == {"store": "memory", "key": "user-1", "attempts": 5}
