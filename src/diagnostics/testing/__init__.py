"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["diagnostics.testing.fixtures"]
"""

from diagnostics.testing.fakes import (
    FakeClock,
    FrozenClock,
    InMemoryExporter,
    SequentialIdGenerator,
)

__all__ = [
    "FakeClock",
    "FrozenClock",
    "InMemoryExporter",
    "SequentialIdGenerator",
]
