"""Tracing – ambient trace/span ids stored in a ``ContextVar``."""
from __future__ import annotations

import contextlib
from contextvars import ContextVar, Token
from typing import Any, Iterator

from diagnostics.observability.tracing.ids import INVALID_SPAN_ID, INVALID_TRACE_ID, SpanId, TraceId

_TRACE_ID_VAR: ContextVar[Any] = ContextVar("_diagnostics_trace_id", default=None)
_SPAN_ID_VAR: ContextVar[Any] = ContextVar("_diagnostics_span_id", default=None)

_Tokens = tuple[Token[Any], Token[Any]]


class TraceContext:
    """Request-scoped trace and span ids.

    Lookups never raise: when nothing (or something of the wrong type) is
    stored, the zero id is returned together with ``found=False``.
    """

    @staticmethod
    def set(trace_id: TraceId, span_id: SpanId) -> _Tokens:
        return _TRACE_ID_VAR.set(trace_id), _SPAN_ID_VAR.set(span_id)

    @staticmethod
    def reset(tokens: _Tokens) -> None:
        trace_token, span_token = tokens
        _SPAN_ID_VAR.reset(span_token)
        _TRACE_ID_VAR.reset(trace_token)

    @staticmethod
    def try_get_trace_id() -> tuple[TraceId, bool]:
        value = _TRACE_ID_VAR.get()
        if isinstance(value, TraceId):
            return value, True
        return INVALID_TRACE_ID, False

    @staticmethod
    def try_get_span_id() -> tuple[SpanId, bool]:
        value = _SPAN_ID_VAR.get()
        if isinstance(value, SpanId):
            return value, True
        return INVALID_SPAN_ID, False

    @staticmethod
    def clear() -> None:
        _TRACE_ID_VAR.set(None)
        _SPAN_ID_VAR.set(None)

    @staticmethod
    @contextlib.contextmanager
    def scope(trace_id: TraceId, span_id: SpanId) -> Iterator[None]:
        """Set both ids for the duration of the ``with`` block."""
        tokens = TraceContext.set(trace_id, span_id)
        try:
            yield
        finally:
            TraceContext.reset(tokens)


__all__ = ["TraceContext"]
