"""Config settings – LoggingSettings.

Read from the environment with :class:`EnvSettingsLoader`::

    LOG_MIN_LEVEL=info LOG_FORMAT=structured LOG_SERVICE_NAME=billing
"""
from __future__ import annotations

import dataclasses

from diagnostics.config.settings.base import Settings
from diagnostics.config.validation.errors import InvalidSettingValueError
from diagnostics.observability.logging.level import Level

FORMATS = ("console", "structured")


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Settings for the base log event."""

    _prefix: dataclasses.ClassVar[str] = "LOG"

    min_level: str = "debug"
    format: str = "console"
    service_name: str = ""
    service_version: str = ""
    with_trace: bool = False

    def _validate(self) -> None:
        if Level.lookup(self.min_level) is None:
            raise InvalidSettingValueError(
                "min_level", self.min_level, "must be a level name or an integer"
            )
        self.format = self.format.strip().lower()
        if self.format not in FORMATS:
            raise InvalidSettingValueError(
                "format", self.format, f"must be one of {', '.join(FORMATS)}"
            )


__all__ = ["LoggingSettings"]
