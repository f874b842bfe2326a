"""Observability helpers: structured logging, span-bound log context, tracing and metrics."""

from pattern_catalog.observability.context import bind_span, get_trace_context
from pattern_catalog.observability.logging import JsonFormatter, configure_logging
from pattern_catalog.observability.metrics import (
    DEMO_ERROR_COUNT,
    DEMO_LATENCY,
    DEMO_RUN_COUNT,
    get_metrics,
    track_latency,
)
from pattern_catalog.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "DEMO_ERROR_COUNT",
    "DEMO_LATENCY",
    "DEMO_RUN_COUNT",
    "JsonFormatter",
    "bind_span",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "track_latency",
]
