"""Observability – Filter port and implementations.

A filter is the last chance to suppress an event: it runs after the
message for the current call is assigned and before formatting/export.
"""
from __future__ import annotations

import threading
from collections import defaultdict
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from diagnostics.kernel.time import Clock, SystemClock
from diagnostics.observability.logging.level import Level

if TYPE_CHECKING:
    from diagnostics.observability.logging.event import Event


@runtime_checkable
class Filter(Protocol):
    """Port: decide whether a finalised event may be written."""

    def can_write(self, event: "Event") -> bool: ...


class NoFilter:
    """Let every event through."""

    def can_write(self, event: "Event") -> bool:  # noqa: ARG002
        return True


class SampledFilter:
    """Let only 1-in-N events through, per log level.

    Parameters
    ----------
    sample_rates:
        Mapping of level → emit-1-in-N.  Example: ``{Level.DEBUG: 100,
        Level.INFO: 10}`` keeps 1 % of DEBUG and 10 % of INFO events.
    default_rate:
        Rate for levels not listed in *sample_rates*.  ``1`` means always
        emit (default).
    """

    def __init__(
        self,
        sample_rates: dict[Level, int] | None = None,
        default_rate: int = 1,
    ) -> None:
        self._rates: dict[int, int] = {int(k): v for k, v in (sample_rates or {}).items()}
        self._default_rate = max(1, default_rate)
        self._counters: dict[int, int] = defaultdict(int)
        self._lock = threading.Lock()

    def can_write(self, event: "Event") -> bool:
        level = int(event.level)
        rate = self._rates.get(level, self._default_rate)
        if rate <= 1:
            return True
        with self._lock:
            self._counters[level] += 1
            return self._counters[level] % rate == 1

    def reset_counters(self) -> None:
        """Reset sampling counters (useful in tests)."""
        with self._lock:
            self._counters.clear()


class DeduplicationFilter:
    """Suppress an event whose level and message repeat within *window* seconds."""

    def __init__(self, window: float = 1.0, clock: Clock | None = None) -> None:
        self._window = window
        self._clock = clock or SystemClock()
        self._last_seen: dict[tuple[int, str], float] = {}
        self._lock = threading.Lock()

    def can_write(self, event: "Event") -> bool:
        key = (int(event.level), event.message)
        now = self._clock.timestamp()
        with self._lock:
            previous = self._last_seen.get(key)
            if previous is not None and now - previous < self._window:
                return False
            self._last_seen[key] = now
            if len(self._last_seen) > 1024:
                self._evict(now)
            return True

    def _evict(self, now: float) -> None:
        expired = [k for k, ts in self._last_seen.items() if now - ts >= self._window]
        for k in expired:
            del self._last_seen[k]


__all__ = ["DeduplicationFilter", "Filter", "NoFilter", "SampledFilter"]
