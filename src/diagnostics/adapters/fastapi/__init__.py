"""FastAPI adapter – request-scoped log events."""
from diagnostics.adapters.fastapi.middleware import FastAPILogEventMiddleware, trace_ids_from_headers

__all__ = ["FastAPILogEventMiddleware", "trace_ids_from_headers"]
