"""Decorator: add cost to a beverage by wrapping it."""

from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable


@runtime_checkable
class Beverage(Protocol):
    def cost(self) -> int:  # pragma: no cover - Protocol only
        """Return the price of the beverage."""


class Coffee:
    def cost(self) -> int:
        return 5


class MilkDecorator:
    """Wraps any ``Beverage`` and adds a fixed increment to its cost.

    Layers nest freely: ``MilkDecorator(MilkDecorator(Coffee())).cost()`` is 9.
    """

    increment: ClassVar[int] = 2

    def __init__(self, beverage: Beverage) -> None:
        self.beverage = beverage

    def cost(self) -> int:
        return self.beverage.cost() + self.increment


def demo() -> None:
    milk_coffee = MilkDecorator(Coffee())
    print(milk_coffee.cost())
