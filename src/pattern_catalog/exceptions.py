"""Errors raised by the pattern catalog."""


class PatternCatalogError(Exception):
    """Base class for catalog errors."""


class UnknownPatternError(PatternCatalogError, KeyError):
    """Raised when a demonstration name is not registered."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        super().__init__(name)

    def __str__(self) -> str:
        if self.available:
            return f"Unknown pattern '{self.name}' (available: {', '.join(self.available)})"
        return f"Unknown pattern '{self.name}'"


class DuplicatePatternError(PatternCatalogError, ValueError):
    """Raised when a demonstration name is registered twice."""
