"""Observability – Exporter port and stream exporters."""
from __future__ import annotations

import sys
from typing import IO, Protocol, runtime_checkable


@runtime_checkable
class Exporter(Protocol):
    """Port: receive a fully formatted log line."""

    def export(self, output: str) -> None: ...


class StreamExporter:
    """Write each line followed by a newline to a text stream.

    When *stream* is ``None`` the exporter looks up ``sys.stdout`` at export
    time, so redirected or captured output is honoured.
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    def export(self, output: str) -> None:
        stream = self.stream
        stream.write(output + "\n")
        stream.flush()


class StdoutExporter(StreamExporter):
    """Write log lines to standard output."""

    def __init__(self) -> None:
        super().__init__(None)


class StderrExporter(StreamExporter):
    """Write log lines to standard error."""

    @property
    def stream(self) -> IO[str]:
        return sys.stderr


__all__ = ["Exporter", "StderrExporter", "StdoutExporter", "StreamExporter"]
