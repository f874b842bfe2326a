"""Centralized configuration for pattern-catalog using Pydantic Settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class Settings(BaseSettings):
    """Typed configuration loaded from ``PATTERN_CATALOG_*`` environment variables.

    Command line flags take precedence over anything loaded here.
    """

    model_config = SettingsConfigDict(
        env_prefix="PATTERN_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    log_level: str = Field(default="warning", description="Root logging level")
    log_format: Literal["text", "json"] = Field(default="text", description="Log line format on stderr")
    trace_console: bool = Field(default=False, description="Print finished spans to stderr")
    service_name: str = Field(default="pattern-catalog", description="service.name resource attribute for spans")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return normalized

    def is_json_logging(self) -> bool:
        return self.log_format == "json"
