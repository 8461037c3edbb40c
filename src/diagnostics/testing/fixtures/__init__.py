"""Testing fixtures – pytest fixtures for logging and tracing doubles."""
from diagnostics.testing.fixtures.clock import fake_clock
from diagnostics.testing.fixtures.exporter import memory_exporter
from diagnostics.testing.fixtures.trace import log_context_fixture, trace_context_fixture

__all__ = [
    "fake_clock",
    "log_context_fixture",
    "memory_exporter",
    "trace_context_fixture",
]
