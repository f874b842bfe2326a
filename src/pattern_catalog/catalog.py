"""Registry of the design pattern demonstrations."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
import logging

from pattern_catalog.exceptions import DuplicatePatternError, UnknownPatternError
from pattern_catalog.observability.metrics import DEMO_ERROR_COUNT, DEMO_LATENCY, DEMO_RUN_COUNT, track_latency
from pattern_catalog.observability.tracing import create_span
from pattern_catalog.patterns import adapter, builder, decorator, factory, observer, proxy, singleton, strategy


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternDemo:
    """One runnable demonstration in the catalog."""

    name: str
    """Lookup key, lower case (e.g. 'singleton')."""

    title: str
    """Human-readable heading (e.g. 'Singleton Pattern')."""

    summary: str
    """One-line description of what the pattern does."""

    run: Callable[[], None]
    """Callable that performs the demonstration and prints its output."""


class PatternCatalog:
    """Ordered, name-indexed collection of ``PatternDemo`` entries.

    Lookups are case-insensitive. Iteration follows registration order.
    """

    def __init__(self, demos: list[PatternDemo] | None = None):
        self._demos: dict[str, PatternDemo] = {}
        for demo in demos or []:
            self.register(demo)

    def register(self, demo: PatternDemo) -> None:
        key = demo.name.lower()
        if key in self._demos:
            raise DuplicatePatternError(f"Pattern '{demo.name}' is already registered")
        self._demos[key] = demo

    def get(self, name: str) -> PatternDemo:
        """Return the demonstration registered under ``name``.

        Raises:
            UnknownPatternError: if no demonstration has that name
        """
        try:
            return self._demos[name.strip().lower()]
        except KeyError:
            raise UnknownPatternError(name, self.names()) from None

    def names(self) -> list[str]:
        return list(self._demos)

    def __iter__(self) -> Iterator[PatternDemo]:
        return iter(self._demos.values())

    def __len__(self) -> int:
        return len(self._demos)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._demos

    def run(self, name: str) -> None:
        """Run one demonstration inside a span, recording count and latency.

        Exceptions raised by the demonstration are counted and re-raised.
        """
        demo = self.get(name)
        with create_span(f"pattern.{demo.name}", attributes={"pattern.name": demo.name}, pattern=demo.name):
            logger.debug("Running %s demonstration", demo.name)
            try:
                with track_latency(DEMO_LATENCY, pattern=demo.name):
                    demo.run()
            except Exception as exc:
                DEMO_RUN_COUNT.labels(pattern=demo.name, status="error").inc()
                DEMO_ERROR_COUNT.labels(pattern=demo.name, error_type=type(exc).__name__).inc()
                logger.error("%s demonstration failed: %s", demo.name, exc)
                raise
            DEMO_RUN_COUNT.labels(pattern=demo.name, status="ok").inc()
            logger.debug("Finished %s demonstration", demo.name)


def build_default_catalog() -> PatternCatalog:
    """Create a catalog holding the eight demonstrations in their canonical order."""
    return PatternCatalog(
        [
            PatternDemo(
                "singleton",
                "Singleton Pattern",
                "Ensures only one instance of a class is created.",
                singleton.demo,
            ),
            PatternDemo(
                "factory",
                "Factory Pattern",
                "Creates objects without specifying the exact class.",
                factory.demo,
            ),
            PatternDemo(
                "builder",
                "Builder Pattern",
                "Constructs complex objects step by step.",
                builder.demo,
            ),
            PatternDemo(
                "adapter",
                "Adapter Pattern",
                "Converts one interface into another expected by the client.",
                adapter.demo,
            ),
            PatternDemo(
                "decorator",
                "Decorator Pattern",
                "Dynamically adds behavior to objects.",
                decorator.demo,
            ),
            PatternDemo(
                "proxy",
                "Proxy Pattern",
                "Controls access to an object, adding security or caching.",
                proxy.demo,
            ),
            PatternDemo(
                "observer",
                "Observer Pattern",
                "Allows multiple objects to react to changes in another object.",
                observer.demo,
            ),
            PatternDemo(
                "strategy",
                "Strategy Pattern",
                "Defines a family of algorithms and makes them interchangeable.",
                strategy.demo,
            ),
        ]
    )
