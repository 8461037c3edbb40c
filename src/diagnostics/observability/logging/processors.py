"""Observability – structlog helpers for the library's own diagnostics.

These loggers report problems *inside* the pipeline (an unserialisable
payload, a malformed trace header).  They are separate from the
:class:`~diagnostics.observability.logging.event.Event` output.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from diagnostics.observability.tracing.context import TraceContext

ROOT_LOGGER_NAME = "diagnostics"


class TraceContextProcessor:
    """structlog processor that injects ids from :class:`TraceContext`.

    Adds ``trace_id`` and ``span_id`` (hex) when present; existing keys are
    left untouched.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        trace_id, found = TraceContext.try_get_trace_id()
        if found:
            event_dict.setdefault("trace_id", str(trace_id))
        span_id, found = TraceContext.try_get_span_id()
        if found:
            event_dict.setdefault("span_id", str(span_id))
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger backed by the stdlib logger *name*.

    Processors come from the current structlog configuration, but output is
    handed to :mod:`logging` and never printed to stdout, where the default
    exporter writes log lines.  Without any logging setup only warnings and
    above reach stderr.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(logging.getLogger(name or ROOT_LOGGER_NAME))
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def configure_structlog(level: int = logging.WARNING) -> None:
    """Configure structlog to write JSON diagnostics to stderr.

    The ``diagnostics`` stdlib logger gets its own stderr handler so
    diagnostics stay apart from the default stdout exporter.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers = [logging.StreamHandler(sys.stderr)]
    root.setLevel(level)
    root.propagate = False

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            TraceContextProcessor(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


__all__ = ["ROOT_LOGGER_NAME", "TraceContextProcessor", "configure_structlog", "get_logger"]
