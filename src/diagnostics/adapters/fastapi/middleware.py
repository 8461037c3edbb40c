"""FastAPI adapter – FastAPILogEventMiddleware.

For every HTTP request the middleware

1. reads trace ids from ``X-Cloud-Trace-Context`` or ``traceparent``
   (generating new ones when neither is usable),
2. stores them in :class:`~diagnostics.observability.tracing.TraceContext`,
3. derives a request event from the base event (HTTP snapshot + ids) and
   stores it in :class:`~diagnostics.observability.logging.LogContext`.

Handlers then log with ``LogContext.inherit().info().msg("...")``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from diagnostics.observability.logging import DEFAULT_EVENT, Event, HttpRequestSnapshot, LogContext, get_logger
from diagnostics.observability.tracing import (
    DEFAULT_GENERATOR,
    IdGenerator,
    InvalidIdError,
    SpanId,
    TraceContext,
    TraceId,
    parse_cloud_trace_context,
    parse_traceparent,
)
from diagnostics.observability.tracing.propagation import CLOUD_TRACE_CONTEXT_HEADER, TRACEPARENT_HEADER

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send

_log = get_logger(__name__)


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'dusted-diagnostics[fastapi]' to use the FastAPI adapter"
        ) from exc


def trace_ids_from_headers(headers: dict[str, str]) -> tuple[TraceId, SpanId] | None:
    """Return ids from the first well-formed trace header, else ``None``.

    ``X-Cloud-Trace-Context`` wins over ``traceparent``.  Header names must
    already be lower-cased.
    """
    parsers = (
        (CLOUD_TRACE_CONTEXT_HEADER, parse_cloud_trace_context),
        (TRACEPARENT_HEADER, parse_traceparent),
    )
    for name, parse in parsers:
        value = headers.get(name)
        if not value:
            continue
        try:
            return parse(value)
        except InvalidIdError as exc:
            _log.debug("log.trace_header_rejected", header=name, **exc.to_dict())
    return None


class FastAPILogEventMiddleware:
    """Populate ``TraceContext`` and ``LogContext`` for each request.

    Parameters
    ----------
    app:
        The inner ASGI application.
    base_event:
        Event every request event is derived from.  Defaults to
        :data:`~diagnostics.observability.logging.DEFAULT_EVENT`.
    generator:
        Source of ids when the request carries no usable trace header.
    """

    def __init__(
        self,
        app: "ASGIApp",
        base_event: Event | None = None,
        generator: IdGenerator | None = None,
    ) -> None:
        _require_fastapi()
        self.app = app
        self._base_event = base_event or DEFAULT_EVENT
        self._generator = generator or DEFAULT_GENERATOR

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = {
            k.decode("latin-1").lower(): v.decode("latin-1")
            for k, v in scope.get("headers", [])
        }
        ids = trace_ids_from_headers(headers)
        if ids is None:
            ids = self._generator.new_trace_ids()
        trace_id, span_id = ids

        event = (
            self._base_event
            .set_http_request(HttpRequestSnapshot.from_scope(scope))
            .set_trace_id(trace_id)
            .set_span_id(span_id)
        )

        with TraceContext.scope(trace_id, span_id), LogContext.scope(event):
            await self.app(scope, receive, send)


__all__ = ["FastAPILogEventMiddleware", "trace_ids_from_headers"]
