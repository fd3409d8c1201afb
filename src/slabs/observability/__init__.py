"""Optional OpenTelemetry spans around chunking calls."""

from slabs.observability.decorators import trace_span
from slabs.observability.tracer import (
    get_tracer,
    get_tracer_provider,
    init_tracer,
    is_tracing_enabled,
    shutdown_tracer,
)

__all__ = [
    "get_tracer",
    "get_tracer_provider",
    "init_tracer",
    "is_tracing_enabled",
    "shutdown_tracer",
    "trace_span",
]
