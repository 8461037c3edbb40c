"""Observability – LogContext, an inherited Event stored in a ``ContextVar``.

Outer layers (typically middleware) place a pre-configured event in the
context; inner layers pick it up with :meth:`LogContext.inherit` and keep
enriching it.
"""
from __future__ import annotations

import contextlib
from contextvars import ContextVar, Token
from typing import Any, Iterator

from diagnostics.observability.logging.event import Event
from diagnostics.observability.logging.factory import DEFAULT_EVENT

_EVENT_VAR: ContextVar[Any] = ContextVar("_diagnostics_log_event", default=None)


class LogContext:
    """Ambient log event for the current request / task."""

    @staticmethod
    def set(event: Event) -> Token[Any]:
        return _EVENT_VAR.set(event)

    @staticmethod
    def reset(token: Token[Any]) -> None:
        _EVENT_VAR.reset(token)

    @staticmethod
    def inherit() -> Event:
        """Return the stored event, or :data:`DEFAULT_EVENT` when absent."""
        event = _EVENT_VAR.get()
        if isinstance(event, Event):
            return event
        return DEFAULT_EVENT

    @staticmethod
    def clear() -> None:
        _EVENT_VAR.set(None)

    @staticmethod
    @contextlib.contextmanager
    def scope(event: Event) -> Iterator[Event]:
        """Store *event* for the duration of the ``with`` block."""
        token = LogContext.set(event)
        try:
            yield event
        finally:
            LogContext.reset(token)


__all__ = ["LogContext"]
