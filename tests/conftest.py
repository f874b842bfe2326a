"""Shared test fixtures and configuration."""

import logging
import os

import pytest

from pattern_catalog.observability import tracing as tracing_module


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop any PATTERN_CATALOG_* variables inherited from the developer's shell."""
    for key in list(os.environ):
        if key.upper().startswith("PATTERN_CATALOG_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by configure_logging during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def fresh_tracer(monkeypatch):
    """Give each test its own lazily created tracer."""
    monkeypatch.setitem(tracing_module._tracer_holder, "tracer", None)
    monkeypatch.setitem(tracing_module._tracer_holder, "provider", None)
