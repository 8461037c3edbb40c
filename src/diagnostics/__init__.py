"""
diagnostics – structured event logging and trace identifiers.

Import path convention::

    from diagnostics.observability.logging import Level, new_event
    from diagnostics.observability.logging import StructuredFormatter
    from diagnostics.observability.tracing import parse_trace_id
    from diagnostics.adapters.fastapi import FastAPILogEventMiddleware
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
