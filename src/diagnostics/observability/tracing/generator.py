"""Tracing – IdGenerator port and the process-wide random generator."""
from __future__ import annotations

import random
import secrets
import threading
from typing import Protocol, runtime_checkable

from diagnostics.observability.tracing.ids import SPAN_ID_SIZE, TRACE_ID_SIZE, SpanId, TraceId


@runtime_checkable
class IdGenerator(Protocol):
    """Port: produce new trace and span identifiers."""

    def new_trace_ids(self) -> tuple[TraceId, SpanId]: ...

    def new_span_id(self) -> SpanId: ...


class RandomIdGenerator:
    """Pseudo-random generator seeded from :mod:`secrets`.

    A single :class:`random.Random` instance is shared by all callers, so
    every draw happens under a lock.

    Parameters
    ----------
    seed:
        Explicit seed for reproducible sequences.  Defaults to 64 bits
        from the operating system's secure source.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._lock = threading.Lock()
        self._rand = random.Random(secrets.randbits(64) if seed is None else seed)

    def _draw(self, size: int) -> bytes:
        value = self._rand.randbytes(size)
        while not any(value):
            value = self._rand.randbytes(size)
        return value

    def new_span_id(self) -> SpanId:
        """Return a non-zero span ID."""
        with self._lock:
            return SpanId(self._draw(SPAN_ID_SIZE))

    def new_trace_ids(self) -> tuple[TraceId, SpanId]:
        """Return a non-zero trace ID and a non-zero span ID."""
        with self._lock:
            trace_id = TraceId(self._draw(TRACE_ID_SIZE))
            span_id = SpanId(self._draw(SPAN_ID_SIZE))
        return trace_id, span_id


DEFAULT_GENERATOR: IdGenerator = RandomIdGenerator()

__all__ = ["DEFAULT_GENERATOR", "IdGenerator", "RandomIdGenerator"]
