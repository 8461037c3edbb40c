"""OpenTelemetry adapter – read ids from the active OTel span."""
from diagnostics.adapters.opentelemetry.ids import otel_trace_ids, with_otel_span

__all__ = ["otel_trace_ids", "with_otel_span"]
