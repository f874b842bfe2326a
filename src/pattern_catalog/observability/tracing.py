"""OpenTelemetry tracing for demonstration runs."""

from __future__ import annotations

from contextlib import contextmanager
import logging
import sys
from typing import TYPE_CHECKING, Any

from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor
from opentelemetry.trace import Status, StatusCode

from pattern_catalog.observability.context import bind_span


if TYPE_CHECKING:
    from collections.abc import Generator

    from opentelemetry.trace import Span, Tracer

logger = logging.getLogger(__name__)

_tracer_holder: dict[str, Any] = {"tracer": None, "provider": None}


def init_tracing(service_name: str = "pattern-catalog", *, console: bool = False) -> TracerProvider:
    """Initialize a tracer provider, optionally printing finished spans to stderr."""
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    if console:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))
    _tracer_holder["provider"] = provider
    _tracer_holder["tracer"] = provider.get_tracer(__name__)
    logger.debug("Tracing initialized for service: %s", service_name)
    return provider


def get_tracer() -> Tracer:
    if _tracer_holder["tracer"] is None:
        init_tracing()
    return _tracer_holder["tracer"]


@contextmanager
def create_span(
    name: str,
    attributes: dict[str, Any] | None = None,
    **context: str,
) -> Generator[Span, None, None]:
    """Open a span and bind its ids to log records until it closes.

    Extra keyword arguments (for example ``pattern="proxy"``) ride along in
    the log context so the JSON formatter attaches them to every record.
    """
    with get_tracer().start_as_current_span(name, attributes=attributes, record_exception=False) as span:
        with bind_span(span, **context):
            try:
                yield span
            except Exception as exc:
                span.set_status(Status(StatusCode.ERROR, str(exc)))
                span.record_exception(exc)
                raise
