"""Observability – factories for base events."""
from __future__ import annotations

from typing import TYPE_CHECKING

from diagnostics.observability.logging.event import Event
from diagnostics.observability.logging.exporters import Exporter, StdoutExporter
from diagnostics.observability.logging.filters import Filter, NoFilter
from diagnostics.observability.logging.formatters import ConsoleFormatter, Formatter, StructuredFormatter
from diagnostics.observability.logging.level import Level
from diagnostics.observability.tracing.generator import DEFAULT_GENERATOR, IdGenerator

if TYPE_CHECKING:
    from diagnostics.config.settings.logging import LoggingSettings


def new_event(
    filter: Filter | None = None,  # noqa: A002
    formatter: Formatter | None = None,
    exporter: Exporter | None = None,
    min_level: Level | int = Level.DEBUG,
) -> Event:
    """Create a base event at level DEBUG.

    Missing collaborators default to :class:`NoFilter`,
    :class:`ConsoleFormatter` and :class:`StdoutExporter`.
    """
    return Event(
        filter=filter,
        formatter=formatter,
        exporter=exporter,
        min_level=min_level,
        level=Level.DEBUG,
    )


def new_event_with_trace(
    filter: Filter | None = None,  # noqa: A002
    formatter: Formatter | None = None,
    exporter: Exporter | None = None,
    min_level: Level | int = Level.DEBUG,
    generator: IdGenerator | None = None,
) -> Event:
    """Like :func:`new_event`, with freshly generated trace and span ids."""
    trace_id, span_id = (generator or DEFAULT_GENERATOR).new_trace_ids()
    return new_event(filter, formatter, exporter, min_level).set_trace_id(trace_id).set_span_id(span_id)


def new_event_from_settings(
    settings: "LoggingSettings",
    exporter: Exporter | None = None,
    filter: Filter | None = None,  # noqa: A002
    generator: IdGenerator | None = None,
) -> Event:
    """Build the base event described by :class:`LoggingSettings`."""
    formatter: Formatter = StructuredFormatter() if settings.format == "structured" else ConsoleFormatter()
    min_level = Level.parse(settings.min_level)
    if settings.with_trace:
        event = new_event_with_trace(filter, formatter, exporter, min_level, generator)
    else:
        event = new_event(filter, formatter, exporter, min_level)
    return event.set_service_name(settings.service_name).set_service_version(settings.service_version)


DEFAULT_EVENT: Event = new_event(NoFilter(), ConsoleFormatter(), StdoutExporter(), Level.DEBUG)

__all__ = ["DEFAULT_EVENT", "new_event", "new_event_from_settings", "new_event_with_trace"]
