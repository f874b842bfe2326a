"""Observer: broadcast data to every subscriber."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class Subscriber(Protocol):
    def update(self, data: Any) -> None:  # pragma: no cover - Protocol only
        """Receive one published payload."""


class Subject:
    """Keeps subscribers in the order they subscribed.

    Duplicates are allowed and there is no unsubscribe. ``notify`` calls
    every subscriber synchronously, one after another.
    """

    def __init__(self) -> None:
        self.observers: list[Subscriber] = []

    def subscribe(self, observer: Subscriber) -> None:
        self.observers.append(observer)

    def notify(self, data: Any) -> None:
        logger.debug("Notifying %d observer(s)", len(self.observers))
        for observer in self.observers:
            observer.update(data)


class Observer:
    def update(self, data: Any) -> None:
        print(f"Received data: {data}")


def demo() -> None:
    subject = Subject()
    subject.subscribe(Observer())
    subject.subscribe(Observer())
    subject.notify("Observer pattern activated")
