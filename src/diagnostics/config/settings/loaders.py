"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from diagnostics.config.settings.base import Settings
from diagnostics.config.validation import ConfigError, InvalidSettingValueError

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Each field maps to :meth:`Settings.env_key`; unset variables keep the
    field default.  *environ* replaces ``os.environ`` (handy in tests).
    """

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        env_keys = {f.name: settings_class.env_key(f.name) for f in dataclasses.fields(settings_class)}
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            env_key = env_keys[field.name]
            raw = environ.get(env_key)
            if raw is None:
                continue
            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc), cause=exc) from exc

        try:
            return settings_class(**kwargs)
        except InvalidSettingValueError as exc:
            if exc.setting_name not in env_keys:
                raise
            raise InvalidSettingValueError(
                env_keys[exc.setting_name], exc.value, exc.reason, cause=exc
            ) from exc
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:
        if type_hint is bool or type_hint == "bool":
            return value.strip().lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint == "int":
            return int(value)
        if type_hint is float or type_hint == "float":
            return float(value)
        return value


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file then fall back to ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        try:
            from dotenv import load_dotenv
        except ImportError as exc:
            raise ImportError("Install 'dusted-diagnostics[dotenv]' to use DotenvSettingsLoader") from exc
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
