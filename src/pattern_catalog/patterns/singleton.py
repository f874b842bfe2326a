"""Singleton: one shared ``Logger`` per process."""

from __future__ import annotations

import logging
import threading
from typing import ClassVar


logger = logging.getLogger(__name__)


class Logger:
    """Console logger with exactly one instance per process.

    The instance is created lazily on first access. Creation is guarded by a
    lock and re-checked inside it, so concurrent first calls still produce a
    single object. Calling ``Logger()`` directly also hands back the shared
    instance.
    """

    _instance: ClassVar[Logger | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __new__(cls) -> Logger:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    logger.debug("Created %s instance id=%s", cls.__name__, id(cls._instance))
        return cls._instance

    @classmethod
    def get_instance(cls) -> Logger:
        """Return the process-wide instance, creating it on first use."""
        return cls()

    def log_message(self, message: str) -> None:
        print(f"Log: {message}")


def demo() -> None:
    logger1 = Logger.get_instance()
    logger2 = Logger.get_instance()
    logger1.log_message("Singleton pattern in action")
    print(logger1 is logger2)
