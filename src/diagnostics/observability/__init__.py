"""Observability – structured log events and distributed tracing ids."""

from diagnostics.observability.logging import (
    DEFAULT_EVENT,
    ConsoleFormatter,
    Event,
    Level,
    LogContext,
    StructuredFormatter,
    new_event,
    new_event_with_trace,
)
from diagnostics.observability.tracing import SpanId, TraceContext, TraceId

__all__ = [
    "DEFAULT_EVENT",
    "ConsoleFormatter",
    "Event",
    "Level",
    "LogContext",
    "SpanId",
    "StructuredFormatter",
    "TraceContext",
    "TraceId",
    "new_event",
    "new_event_with_trace",
]
