"""Pattern catalog: small runnable demonstrations of classic design patterns."""

from pattern_catalog.catalog import PatternCatalog, PatternDemo, build_default_catalog
from pattern_catalog.exceptions import DuplicatePatternError, PatternCatalogError, UnknownPatternError


__version__ = "0.1.0"

__all__ = [
    "DuplicatePatternError",
    "PatternCatalog",
    "PatternCatalogError",
    "PatternDemo",
    "UnknownPatternError",
    "build_default_catalog",
]
