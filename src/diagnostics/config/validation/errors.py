"""Config validation – errors raised while reading settings."""
from __future__ import annotations

from diagnostics.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be read or do not describe a usable log setup."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A single setting holds a value the logging pipeline cannot use.

    ``setting_name`` is the environment variable when the value was read
    by a loader, otherwise the dataclass field name.
    """

    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            f"{setting_name}={value!r} is not usable: {reason}",
            detail={"setting": setting_name, "value": str(value), "reason": reason},
            cause=cause,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
