"""Eight self-contained design pattern demonstrations."""

from pattern_catalog.patterns import (
    adapter,
    builder,
    decorator,
    factory,
    observer,
    proxy,
    singleton,
    strategy,
)


__all__ = [
    "adapter",
    "builder",
    "decorator",
    "factory",
    "observer",
    "proxy",
    "singleton",
    "strategy",
]
