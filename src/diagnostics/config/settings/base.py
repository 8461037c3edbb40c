"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base for settings read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and check their values in :meth:`_validate`,
    raising :class:`~diagnostics.config.validation.InvalidSettingValueError`
    with the *field* name; loaders translate it to the variable name.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Check field values after construction."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``LOG`` + ``min_level`` → ``LOG_MIN_LEVEL``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")


__all__ = ["Settings"]
