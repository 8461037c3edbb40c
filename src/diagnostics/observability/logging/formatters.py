"""Observability – Formatter port, console and structured formatters."""
from __future__ import annotations

import dataclasses
import json
import traceback
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from diagnostics.kernel.errors import SerializationError
from diagnostics.kernel.time import Clock, SystemClock
from diagnostics.observability.logging.level import Level
from diagnostics.observability.logging.processors import get_logger

if TYPE_CHECKING:
    from diagnostics.observability.logging.event import Event

_log = get_logger(__name__)


@runtime_checkable
class Formatter(Protocol):
    """Port: render a finalised event as a single string."""

    def format(self, event: "Event") -> str: ...


def describe_error(exc: BaseException) -> str:
    """Return ``str(exc)``, a blank line, then a stack trace.

    Raised exceptions carry their own traceback; for an exception that was
    never raised the current call stack is used instead.
    """
    if exc.__traceback__ is not None:
        stack = "".join(traceback.format_exception(exc))
    else:
        stack = "".join(traceback.format_stack())
    return f"{exc}\n\n{stack}"


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

RESET = "\033[0m"

NORMAL = 0

RED = 31
BLUE = 34
LIGHT_GRAY = 37
DARK_GRAY = 90
LIGHT_RED = 91
LIGHT_GREEN = 92
LIGHT_YELLOW = 93
WHITE = 97


def ansi(color: int, weight: int = NORMAL) -> str:
    return f"\033[{weight};{color}m"


_COLORS: dict[int, tuple[str, str]] = {
    Level.DEBUG: (ansi(DARK_GRAY), ansi(DARK_GRAY)),
    Level.INFO: (ansi(LIGHT_GRAY), RESET),
    Level.NOTICE: (ansi(LIGHT_GREEN), RESET),
    Level.WARNING: (ansi(LIGHT_YELLOW), RESET),
    Level.ERROR: (ansi(LIGHT_RED), RESET),
    Level.ALERT: (ansi(RED), RESET),
    Level.CRITICAL: (ansi(LIGHT_RED), ansi(LIGHT_RED)),
    Level.EMERGENCY: (ansi(RED), ansi(RED)),
}
_DEFAULT_COLORS = (ansi(WHITE), RESET)


def level_colors(level: Level) -> tuple[str, str]:
    """Return ``(severity colour, message colour)`` for *level*."""
    return _COLORS.get(int(level), _DEFAULT_COLORS)


class ConsoleFormatter:
    """Colourised, human readable single line.

    ``[2024-06-15 12:00:00.000][<trace id>] [INF] message``
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def timestamp(self) -> str:
        now = self._clock.now().astimezone(UTC)
        return f"{now:%Y-%m-%d %H:%M:%S}.{now.microsecond // 1000:03d}"

    def format(self, event: "Event") -> str:
        severity_color, text_color = level_colors(event.level)
        err = f"\n\n{describe_error(event.exception)}" if event.exception is not None else ""
        return (
            f"{ansi(BLUE)}[{self.timestamp()}]{RESET} "
            f"{ansi(LIGHT_GRAY)}[{event.trace_id}] "
            f"{severity_color}[{event.level.short}]{text_color} "
            f"{event.message}{err}{RESET}"
        )


# ---------------------------------------------------------------------------
# Structured (Google Cloud Logging JSON)
# ---------------------------------------------------------------------------

ERROR_EVENT_TYPE = (
    "type.googleapis.com/google.devtools.clouderrorreporting.v1beta1.ReportedErrorEvent"
)
TRACE_SAMPLED_KEY = "logging.googleapis.com/trace_sampled"
TRACE_KEY = "logging.googleapis.com/trace"
SPAN_ID_KEY = "logging.googleapis.com/spanId"
LABELS_KEY = "logging.googleapis.com/labels"

DATA_FAILURE_MESSAGE = (
    "Could not successfully serialize data object into JSON when writing this message."
)


def _json_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    model_dump = getattr(obj, "model_dump", None)
    if callable(model_dump):
        return model_dump(mode="json")
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


_HTML_SAFE = str.maketrans({
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
})


def _dumps(value: Any) -> str:
    # NaN and infinities are not valid JSON.
    # The escaped characters can only occur inside JSON strings.
    text = json.dumps(
        value, ensure_ascii=False, allow_nan=False, separators=(",", ":"), default=_json_default
    )
    return text.translate(_HTML_SAFE)


def encode_data(data: Any) -> str:
    """Serialise the arbitrary payload; never raises.

    On failure a JSON string describing the problem is returned instead.
    """
    try:
        return _dumps(data)
    except Exception as exc:  # noqa: BLE001
        err = SerializationError(str(exc), payload_type=type(data).__name__, cause=exc)
        _log.warning("log.data_serialization_failed", **err.to_dict())
        return _dumps(f"{DATA_FAILURE_MESSAGE}\n\nError: {err.message}")


class StructuredFormatter:
    """Render an event as one line of Google Cloud Logging JSON.

    Keys appear in a fixed order and are omitted when empty::

        severity, [@type], message, trace fields, serviceContext.*,
        labels, httpRequest, data
    """

    def format(self, event: "Event") -> str:
        parts = [f'"severity":{_dumps(event.level.name)}']

        if event.exception is None:
            parts.append(f'"message":{_dumps(event.message)}')
        else:
            message = describe_error(event.exception)
            if event.message:
                message = f"{event.message}\n\nError:\n\n{message}"
            parts.append(f'"@type":{_dumps(ERROR_EVENT_TYPE)}')
            parts.append(f'"message":{_dumps(message)}')

        if event.trace_id.is_valid():
            parts.append(f'"{TRACE_SAMPLED_KEY}":"true"')
            parts.append(f'"{TRACE_KEY}":{_dumps(str(event.trace_id))}')
            if event.span_id.is_valid():
                parts.append(f'"{SPAN_ID_KEY}":"{event.span_id.decimal}"')

        if event.service_name:
            parts.append(f'"serviceContext.service":{_dumps(event.service_name)}')
        if event.service_version:
            parts.append(f'"serviceContext.version":{_dumps(event.service_version)}')

        if event.labels:
            labels = {key: event.labels[key] for key in sorted(event.labels)}
            parts.append(f'"{LABELS_KEY}":{_dumps(labels)}')

        if event.http_request is not None:
            parts.append(f'"httpRequest":{_dumps(event.http_request.to_dict())}')

        if event.data is not None:
            parts.append(f'"data":{encode_data(event.data)}')

        return "{" + ",".join(parts) + "}"


__all__ = [
    "ConsoleFormatter",
    "ERROR_EVENT_TYPE",
    "Formatter",
    "StructuredFormatter",
    "describe_error",
    "encode_data",
    "level_colors",
]
