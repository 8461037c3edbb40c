"""Testing fakes – in-memory doubles for logging and tracing ports."""
from diagnostics.kernel.time import FrozenClock
from diagnostics.testing.fakes.clock import FakeClock
from diagnostics.testing.fakes.exporter import InMemoryExporter
from diagnostics.testing.fakes.ids import SequentialIdGenerator

__all__ = [
    "FakeClock",
    "FrozenClock",
    "InMemoryExporter",
    "SequentialIdGenerator",
]
