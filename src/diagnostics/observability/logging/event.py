"""Observability – Event, the immutable log event builder.

Every setter returns a new :class:`Event`; the receiver never changes, so
a long-lived base event can be shared across threads and tasks and
enriched per call site::

    log = new_event(formatter=StructuredFormatter(), min_level=Level.INFO)
    log.set_service_name("billing").add_label("tenant", "acme").info().msg("started")
"""
from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from diagnostics.observability.logging.exporters import Exporter, StdoutExporter
from diagnostics.observability.logging.filters import Filter, NoFilter
from diagnostics.observability.logging.formatters import ConsoleFormatter, Formatter
from diagnostics.observability.logging.http import HttpRequestSnapshot
from diagnostics.observability.logging.level import Level
from diagnostics.observability.logging.processors import get_logger
from diagnostics.observability.tracing.context import TraceContext
from diagnostics.observability.tracing.ids import INVALID_SPAN_ID, INVALID_TRACE_ID, SpanId, TraceId

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Event:
    """A single, chain-configured log occurrence.

    ``message`` is only assigned by the terminal :meth:`msg` / :meth:`fmt`
    calls.  ``filter``, ``formatter`` and ``exporter`` given as ``None``
    are replaced by :class:`NoFilter`, :class:`ConsoleFormatter` and
    :class:`StdoutExporter`.
    """

    filter: Filter = dataclasses.field(default_factory=NoFilter)
    formatter: Formatter = dataclasses.field(default_factory=ConsoleFormatter)
    exporter: Exporter = dataclasses.field(default_factory=StdoutExporter)
    min_level: Level = Level.DEFAULT
    level: Level = Level.DEFAULT
    service_name: str = ""
    service_version: str = ""
    http_request: HttpRequestSnapshot | None = None
    exception: BaseException | None = None
    data: Any = None
    labels: Mapping[str, str] = dataclasses.field(default_factory=dict)
    trace_id: TraceId = INVALID_TRACE_ID
    span_id: SpanId = INVALID_SPAN_ID
    message: str = ""

    def __post_init__(self) -> None:
        if self.filter is None:
            object.__setattr__(self, "filter", NoFilter())
        if self.formatter is None:
            object.__setattr__(self, "formatter", ConsoleFormatter())
        if self.exporter is None:
            object.__setattr__(self, "exporter", StdoutExporter())
        object.__setattr__(self, "min_level", Level(self.min_level))
        object.__setattr__(self, "level", Level(self.level))
        if not isinstance(self.labels, MappingProxyType):
            object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    def _replace(self, **changes: Any) -> "Event":
        return dataclasses.replace(self, **changes)

    # ------------------------------------------------------------------
    # Pipeline wiring
    # ------------------------------------------------------------------

    def set_filter(self, filter: Filter | None) -> "Event":  # noqa: A002
        return self._replace(filter=filter)

    def set_formatter(self, formatter: Formatter | None) -> "Event":
        return self._replace(formatter=formatter)

    def set_exporter(self, exporter: Exporter | None) -> "Event":
        return self._replace(exporter=exporter)

    def set_min_level(self, min_level: Level | int) -> "Event":
        return self._replace(min_level=min_level)

    # ------------------------------------------------------------------
    # Event fields
    # ------------------------------------------------------------------

    def set_service_name(self, name: str) -> "Event":
        return self._replace(service_name=name)

    def set_service_version(self, version: str) -> "Event":
        return self._replace(service_version=version)

    def set_http_request(self, request: Any) -> "Event":
        """Attach the fields of an HTTP request.

        Accepts an :class:`HttpRequestSnapshot` or a Starlette / FastAPI
        ``Request``; ``None`` returns the receiver unchanged.
        """
        if request is None:
            return self
        if not isinstance(request, HttpRequestSnapshot):
            request = HttpRequestSnapshot.from_request(request)
        return self._replace(http_request=request)

    def set_error(self, exc: BaseException | None) -> "Event":
        return self._replace(exception=exc)

    def set_data(self, data: Any) -> "Event":
        """Attach an arbitrary payload, serialised to JSON at format time.

        The payload is deep-copied so later changes by the caller do not
        alter the event.  Objects that cannot be copied are kept by
        reference.
        """
        try:
            snapshot = copy.deepcopy(data)
        except Exception as exc:  # noqa: BLE001
            _log.debug("log.data_kept_by_reference", payload_type=type(data).__name__, error=str(exc))
            snapshot = data
        return self._replace(data=snapshot)

    def set_trace_id(self, trace_id: TraceId) -> "Event":
        return self._replace(trace_id=trace_id)

    def set_span_id(self, span_id: SpanId) -> "Event":
        return self._replace(span_id=span_id)

    def add_label(self, key: str, value: str) -> "Event":
        return self._replace(labels={**self.labels, key: value})

    def with_trace_context(self) -> "Event":
        """Copy trace and span ids from :class:`TraceContext` when present."""
        event = self
        trace_id, found = TraceContext.try_get_trace_id()
        if found:
            event = event.set_trace_id(trace_id)
        span_id, found = TraceContext.try_get_span_id()
        if found:
            event = event.set_span_id(span_id)
        return event

    # ------------------------------------------------------------------
    # Levels
    # ------------------------------------------------------------------

    def debug(self) -> "Event":
        return self._replace(level=Level.DEBUG)

    def info(self) -> "Event":
        return self._replace(level=Level.INFO)

    def notice(self) -> "Event":
        return self._replace(level=Level.NOTICE)

    def warning(self) -> "Event":
        return self._replace(level=Level.WARNING)

    def error(self) -> "Event":
        return self._replace(level=Level.ERROR)

    def critical(self) -> "Event":
        return self._replace(level=Level.CRITICAL)

    def alert(self) -> "Event":
        return self._replace(level=Level.ALERT)

    def emergency(self) -> "Event":
        return self._replace(level=Level.EMERGENCY)

    # ------------------------------------------------------------------
    # Emit
    # ------------------------------------------------------------------

    def is_enabled(self) -> bool:
        """``True`` when the current level passes the minimum level."""
        return self.level >= self.min_level

    def msg(self, message: str) -> None:
        """Emit *message* verbatim."""
        if self.is_enabled():
            self._emit(message)

    def fmt(self, template: str, *args: Any) -> None:
        """Emit ``template % args`` (printf style, as in :mod:`logging`)."""
        if self.is_enabled():
            self._emit(template % args if args else template)

    def _emit(self, message: str) -> None:
        event = self._replace(message=message)
        if event.filter.can_write(event):
            event.exporter.export(event.formatter.format(event))


__all__ = ["Event"]
