"""Observability – immutable log events, formatters, filters and exporters."""
from diagnostics.observability.logging.context import LogContext
from diagnostics.observability.logging.event import Event
from diagnostics.observability.logging.exporters import (
    Exporter,
    StderrExporter,
    StdoutExporter,
    StreamExporter,
)
from diagnostics.observability.logging.factory import (
    DEFAULT_EVENT,
    new_event,
    new_event_from_settings,
    new_event_with_trace,
)
from diagnostics.observability.logging.filters import (
    DeduplicationFilter,
    Filter,
    NoFilter,
    SampledFilter,
)
from diagnostics.observability.logging.formatters import (
    ConsoleFormatter,
    Formatter,
    StructuredFormatter,
)
from diagnostics.observability.logging.http import HttpRequestSnapshot
from diagnostics.observability.logging.level import Level
from diagnostics.observability.logging.processors import (
    TraceContextProcessor,
    configure_structlog,
    get_logger,
)

__all__ = [
    "DEFAULT_EVENT",
    "ConsoleFormatter",
    "DeduplicationFilter",
    "Event",
    "Exporter",
    "Filter",
    "Formatter",
    "HttpRequestSnapshot",
    "Level",
    "LogContext",
    "NoFilter",
    "SampledFilter",
    "StderrExporter",
    "StdoutExporter",
    "StreamExporter",
    "StructuredFormatter",
    "TraceContextProcessor",
    "configure_structlog",
    "get_logger",
    "new_event",
    "new_event_from_settings",
    "new_event_with_trace",
]
