"""Config validation errors.

Setting errors are configuration errors: they share the ``errors`` list of
:class:`InvalidConfigurationError` (``field`` / ``value`` / ``reason``
entries), so callers can report a bad ``LimitConfig`` and a bad
environment variable the same way.
"""
from __future__ import annotations

from tollgate.kernel.errors import InvalidConfigurationError


class ConfigError(InvalidConfigurationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable is absent."""
    default_code = "missing_required_setting"
    context_fields = ("setting_name",)

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            errors=[{"field": setting_name, "value": None, "reason": "missing"}],
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but cannot drive a limiter."""
    default_code = "invalid_setting_value"
    context_fields = ("setting_name", "reason")

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            errors=[{"field": setting_name, "value": value, "reason": reason}],
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason

    @classmethod
    def from_configuration_error(
        cls,
        exc: InvalidConfigurationError,
        setting_name: str | None = None,
        value: object = None,
    ) -> "InvalidSettingValueError":
        """Re-state a domain validation failure in terms of a setting.

        Without *setting_name* the first entry of ``exc.errors`` names it.
        """
        if setting_name is None and exc.errors:
            first = exc.errors[0]
            return cls(first["field"], first.get("value"), first.get("reason", exc.message))
        return cls(setting_name or "<unknown>", value, exc.message)


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
