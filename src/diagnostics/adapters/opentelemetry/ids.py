"""OpenTelemetry adapter – bridge the active span to TraceId / SpanId."""
from __future__ import annotations

from opentelemetry import trace

from diagnostics.observability.logging import Event
from diagnostics.observability.tracing import INVALID_SPAN_ID, INVALID_TRACE_ID, SpanId, TraceId


def otel_trace_ids() -> tuple[TraceId, SpanId]:
    """Return the current span's ids, or the invalid ids when no span is active.

    OpenTelemetry exposes ids as big-endian integers matching their hex form.
    """
    ctx = trace.get_current_span().get_span_context()
    if not ctx.is_valid:
        return INVALID_TRACE_ID, INVALID_SPAN_ID
    return TraceId(ctx.trace_id.to_bytes(16, "big")), SpanId(ctx.span_id.to_bytes(8, "big"))


def with_otel_span(event: Event) -> Event:
    """Return *event* carrying the active OTel span's ids, if any."""
    trace_id, span_id = otel_trace_ids()
    if not trace_id.is_valid():
        return event
    return event.set_trace_id(trace_id).set_span_id(span_id)


__all__ = ["otel_trace_ids", "with_otel_span"]
