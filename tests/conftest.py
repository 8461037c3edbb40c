"""Shared fixtures for the diagnostics test suite."""

from __future__ import annotations

import pytest

from diagnostics.observability.logging import LogContext
from diagnostics.observability.tracing import TraceContext
from diagnostics.testing.fixtures import (  # noqa: F401
    fake_clock,
    log_context_fixture,
    memory_exporter,
    trace_context_fixture,
)


@pytest.fixture(autouse=True)
def _clean_ambient_context():
    LogContext.clear()
    TraceContext.clear()
    yield
    LogContext.clear()
    TraceContext.clear()
