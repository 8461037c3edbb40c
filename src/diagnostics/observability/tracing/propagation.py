"""Tracing – parse and format trace headers.

Two inbound header formats are understood:

* W3C ``traceparent``: ``00-<32 hex trace id>-<16 hex span id>-<2 hex flags>``
* Google Cloud ``X-Cloud-Trace-Context``: ``<32 hex trace id>/<decimal span id>;o=<0|1>``
"""
from __future__ import annotations

from diagnostics.observability.tracing.errors import InvalidFormatError, InvalidLengthError
from diagnostics.observability.tracing.ids import (
    INVALID_SPAN_ID,
    SpanId,
    TraceId,
    parse_span_id_decimal,
    parse_span_id_hex,
    parse_trace_id,
)

TRACEPARENT_HEADER = "traceparent"
CLOUD_TRACE_CONTEXT_HEADER = "x-cloud-trace-context"


def parse_traceparent(header: str) -> tuple[TraceId, SpanId]:
    """Extract ``(trace_id, span_id)`` from a W3C ``traceparent`` value."""
    parts = header.strip().split("-")
    if len(parts) != 4:
        raise InvalidFormatError(f"malformed traceparent header {header!r}", value=header)
    version, trace_hex, span_hex, flags = parts
    if len(version) != 2 or len(flags) != 2:
        raise InvalidLengthError(f"malformed traceparent header {header!r}", value=header)
    return parse_trace_id(trace_hex), parse_span_id_hex(span_hex)


def parse_cloud_trace_context(header: str) -> tuple[TraceId, SpanId]:
    """Extract ``(trace_id, span_id)`` from an ``X-Cloud-Trace-Context`` value.

    The span segment is optional; when missing the invalid span id is
    returned alongside the parsed trace id.
    """
    value = header.strip().split(";", 1)[0]
    trace_hex, _, span_text = value.partition("/")
    trace_id = parse_trace_id(trace_hex)
    if not span_text:
        return trace_id, INVALID_SPAN_ID
    return trace_id, parse_span_id_decimal(span_text)


def format_traceparent(trace_id: TraceId, span_id: SpanId, sampled: bool = True) -> str:
    return f"00-{trace_id}-{span_id}-{'01' if sampled else '00'}"


__all__ = [
    "CLOUD_TRACE_CONTEXT_HEADER",
    "TRACEPARENT_HEADER",
    "format_traceparent",
    "parse_cloud_trace_context",
    "parse_traceparent",
]
