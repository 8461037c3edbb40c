"""Observability – distributed tracing identifiers."""
from diagnostics.observability.tracing.context import TraceContext
from diagnostics.observability.tracing.errors import (
    IdErrorKind,
    InvalidCharacterError,
    InvalidFormatError,
    InvalidIdError,
    InvalidLengthError,
    InvalidValueError,
)
from diagnostics.observability.tracing.generator import DEFAULT_GENERATOR, IdGenerator, RandomIdGenerator
from diagnostics.observability.tracing.ids import (
    INVALID_SPAN_ID,
    INVALID_TRACE_ID,
    SpanId,
    TraceId,
    parse_span_id_decimal,
    parse_span_id_hex,
    parse_trace_id,
)
from diagnostics.observability.tracing.propagation import (
    format_traceparent,
    parse_cloud_trace_context,
    parse_traceparent,
)

__all__ = [
    "DEFAULT_GENERATOR",
    "INVALID_SPAN_ID",
    "INVALID_TRACE_ID",
    "IdErrorKind",
    "IdGenerator",
    "InvalidCharacterError",
    "InvalidFormatError",
    "InvalidIdError",
    "InvalidLengthError",
    "InvalidValueError",
    "RandomIdGenerator",
    "SpanId",
    "TraceContext",
    "TraceId",
    "format_traceparent",
    "parse_cloud_trace_context",
    "parse_span_id_decimal",
    "parse_span_id_hex",
    "parse_trace_id",
]
