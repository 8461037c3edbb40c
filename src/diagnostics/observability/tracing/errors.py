"""Tracing – identifier parsing errors."""
from __future__ import annotations

from enum import Enum
from typing import Any

from diagnostics.kernel.errors import ValidationError


class IdErrorKind(str, Enum):
    """Why an identifier string was rejected."""

    LENGTH = "length"
    CHARACTER = "character"
    VALUE = "value"
    FORMAT = "format"


class InvalidIdError(ValidationError, ValueError):
    """A trace or span identifier could not be parsed.

    Also a :class:`ValueError`, so callers may catch either.
    """

    default_code = "invalid_id"
    kind: IdErrorKind = IdErrorKind.FORMAT

    def __init__(self, message: str, *, value: str = "", **kwargs: Any) -> None:
        super().__init__(message, detail={"value": value, "kind": self.kind.value}, **kwargs)
        self.value = value


class InvalidLengthError(InvalidIdError):
    """The identifier string has the wrong number of characters."""

    default_code = "invalid_id_length"
    kind = IdErrorKind.LENGTH


class InvalidCharacterError(InvalidIdError):
    """The identifier string contains characters outside ``[a-f0-9]``."""

    default_code = "invalid_id_character"
    kind = IdErrorKind.CHARACTER


class InvalidValueError(InvalidIdError):
    """The identifier decodes to the all-zero (unset) value."""

    default_code = "invalid_id_value"
    kind = IdErrorKind.VALUE


class InvalidFormatError(InvalidIdError):
    """The identifier is not a valid unsigned 64-bit decimal number."""

    default_code = "invalid_id_format"
    kind = IdErrorKind.FORMAT


__all__ = [
    "IdErrorKind",
    "InvalidCharacterError",
    "InvalidFormatError",
    "InvalidIdError",
    "InvalidLengthError",
    "InvalidValueError",
]
