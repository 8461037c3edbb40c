"""Tracing – TraceId / SpanId value objects and parsers.

Hex forms follow the W3C trace-context layout
(https://www.w3.org/TR/trace-context/#trace-id). Some cloud backends send
span ids as unsigned 64-bit decimals instead; :attr:`SpanId.decimal` and
:func:`parse_span_id_decimal` read and write those through the same
little-endian byte layout so both forms round-trip.
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from diagnostics.kernel.errors import InvariantViolationError
from diagnostics.observability.tracing.errors import (
    InvalidCharacterError,
    InvalidFormatError,
    InvalidLengthError,
    InvalidValueError,
)

TRACE_ID_SIZE = 16
SPAN_ID_SIZE = 8

_HEX_DIGITS = frozenset("0123456789abcdef")
_MAX_UINT64 = 2**64 - 1


@dataclasses.dataclass(frozen=True, slots=True)
class _FixedId:
    """Base for fixed-width byte identifiers; all-zero means unset."""

    size: ClassVar[int] = 0

    value: bytes = b""

    def __post_init__(self) -> None:
        if not self.value:
            object.__setattr__(self, "value", bytes(self.size))
        elif len(self.value) != self.size:
            raise InvariantViolationError(
                f"{type(self).__name__} requires exactly {self.size} bytes, got {len(self.value)}"
            )

    def is_valid(self) -> bool:
        """Return ``True`` unless the identifier consists of zeros only."""
        return any(self.value)

    def hex(self) -> str:
        return self.value.hex()

    def __str__(self) -> str:
        return self.value.hex()


@dataclasses.dataclass(frozen=True, slots=True)
class TraceId(_FixedId):
    """Identifier of an entire trace (16 bytes)."""

    size: ClassVar[int] = TRACE_ID_SIZE


@dataclasses.dataclass(frozen=True, slots=True)
class SpanId(_FixedId):
    """Identifier of a single span within a trace (8 bytes)."""

    size: ClassVar[int] = SPAN_ID_SIZE

    @property
    def decimal(self) -> int:
        """The id read as a little-endian unsigned 64-bit integer."""
        return int.from_bytes(self.value, "little")

    @classmethod
    def from_decimal(cls, number: int) -> "SpanId":
        return cls(number.to_bytes(SPAN_ID_SIZE, "little"))


INVALID_TRACE_ID = TraceId()
INVALID_SPAN_ID = SpanId()


def _decode_hex(value: str, size: int, label: str) -> bytes:
    if len(value) != size * 2:
        raise InvalidLengthError(
            f"cannot parse {label} because the string value has an invalid length "
            f"(must be {size * 2} characters long)",
            value=value,
        )
    if not _HEX_DIGITS.issuperset(value):
        raise InvalidCharacterError(f"invalid hexadecimal value for {label}", value=value)
    return bytes.fromhex(value)


def parse_trace_id(value: str) -> TraceId:
    """Parse 32 lowercase hex characters into a :class:`TraceId`.

    Raises
    ------
    InvalidLengthError
        ``value`` is not exactly 32 characters long.
    InvalidCharacterError
        ``value`` contains anything outside ``[a-f0-9]``.
    InvalidValueError
        ``value`` decodes to the all-zero id.
    """
    trace_id = TraceId(_decode_hex(value, TRACE_ID_SIZE, "trace ID"))
    if not trace_id.is_valid():
        raise InvalidValueError("invalid/empty trace ID", value=value)
    return trace_id


def parse_span_id_hex(value: str) -> SpanId:
    """Parse 16 lowercase hex characters into a :class:`SpanId`.

    Same failure modes as :func:`parse_trace_id`, with a length of 16.
    """
    span_id = SpanId(_decode_hex(value, SPAN_ID_SIZE, "span ID"))
    if not span_id.is_valid():
        raise InvalidValueError("invalid/empty span ID", value=value)
    return span_id


def parse_span_id_decimal(value: str) -> SpanId:
    """Parse an unsigned 64-bit decimal string into a :class:`SpanId`.

    Raises
    ------
    InvalidFormatError
        ``value`` is not a plain decimal number in ``[0, 2**64)``.
    InvalidValueError
        ``value`` is zero.
    """
    if not value.isascii() or not value.isdigit():
        raise InvalidFormatError(f"span ID {value!r} is not an unsigned integer", value=value)
    number = int(value)
    if number > _MAX_UINT64:
        raise InvalidFormatError(f"span ID {value!r} is out of range for uint64", value=value)
    span_id = SpanId.from_decimal(number)
    if not span_id.is_valid():
        raise InvalidValueError("invalid/empty span ID", value=value)
    return span_id


__all__ = [
    "INVALID_SPAN_ID",
    "INVALID_TRACE_ID",
    "SPAN_ID_SIZE",
    "TRACE_ID_SIZE",
    "SpanId",
    "TraceId",
    "parse_span_id_decimal",
    "parse_span_id_hex",
    "parse_trace_id",
]
