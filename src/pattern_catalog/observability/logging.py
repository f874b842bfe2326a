"""JSON log lines for stderr, tagged with the running demonstration.

Logs always go to stderr; stdout carries demonstration output only.
"""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import sys
from typing import Any

import orjson

from pattern_catalog.observability.context import get_trace_context


_STANDARD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Inside a demonstration span the record carries the span ids and the
    ``pattern`` name; outside one those ids are empty strings. Anything passed
    through ``extra=`` is copied as-is, falling back to ``str`` for values
    orjson cannot encode.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **get_trace_context(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        entry.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        )
        return orjson.dumps(entry, default=str).decode("utf-8")


def configure_logging(level: str = "WARNING", json_output: bool = False) -> None:
    """Replace the root logger's handlers with one stderr handler at ``level``."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root.addHandler(handler)
