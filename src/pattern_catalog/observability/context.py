"""Span ids and pattern name made visible to log records."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from opentelemetry.trace import Span

_EMPTY: dict[str, str] = {"trace_id": "", "span_id": ""}

trace_context: ContextVar[dict[str, str]] = ContextVar("trace_context", default=_EMPTY)


def get_trace_context() -> dict[str, str]:
    """Return the ids of the open span, or empty ids outside any span."""
    return trace_context.get()


@contextmanager
def bind_span(span: Span, **extra: str) -> Iterator[dict[str, str]]:
    """Expose ``span``'s ids (plus ``extra``) to log records until the block exits."""
    ctx = span.get_span_context()
    bound = {"trace_id": format(ctx.trace_id, "032x"), "span_id": format(ctx.span_id, "016x"), **extra}
    token = trace_context.set(bound)
    try:
        yield bound
    finally:
        trace_context.reset(token)
