"""Prometheus counters and latency histogram for demonstration runs."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


REGISTRY = CollectorRegistry()

DEMO_RUN_COUNT = Counter(
    "pattern_demo_runs_total",
    "Total demonstration runs",
    ["pattern", "status"],
    registry=REGISTRY,
)

DEMO_ERROR_COUNT = Counter(
    "pattern_demo_errors_total",
    "Total demonstration failures",
    ["pattern", "error_type"],
    registry=REGISTRY,
)

DEMO_LATENCY = Histogram(
    "pattern_demo_latency_seconds",
    "Demonstration run latency in seconds",
    ["pattern"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
    registry=REGISTRY,
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.labels(**labels).observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus exposition output for the catalog registry."""
    return generate_latest(REGISTRY)
