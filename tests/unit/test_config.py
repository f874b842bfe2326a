"""Tests for environment-driven settings."""

from pydantic import ValidationError
import pytest

from pattern_catalog.config import Settings


def test_defaults() -> None:
    settings = Settings()

    assert settings.log_level == "warning"
    assert settings.log_format == "text"
    assert settings.trace_console is False
    assert settings.service_name == "pattern-catalog"
    assert settings.is_json_logging() is False


def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATTERN_CATALOG_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PATTERN_CATALOG_LOG_FORMAT", "json")
    monkeypatch.setenv("PATTERN_CATALOG_TRACE_CONSOLE", "true")

    settings = Settings()

    assert settings.log_level == "debug"
    assert settings.is_json_logging() is True
    assert settings.trace_console is True


def test_unprefixed_variables_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")

    assert Settings().log_level == "warning"


def test_rejects_unknown_log_level() -> None:
    with pytest.raises(ValidationError, match="log_level must be one of"):
        Settings(log_level="verbose")


def test_rejects_unknown_log_format() -> None:
    with pytest.raises(ValidationError):
        Settings(log_format="xml")
