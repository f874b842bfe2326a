"""Builder: assemble a ``Computer`` step by step."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class Computer:
    ram: str = ""
    storage: str = ""


class ComputerBuilder:
    """Fluent builder; setters may be called in any order before ``build``.

    Example:
        computer = ComputerBuilder().set_ram("16GB").set_storage("1TB").build()
    """

    def __init__(self) -> None:
        self._ram = ""
        self._storage = ""

    def set_ram(self, ram: str) -> Self:
        self._ram = ram
        return self

    def set_storage(self, storage: str) -> Self:
        self._storage = storage
        return self

    def build(self) -> Computer:
        """Return a ``Computer`` holding exactly the accumulated fields."""
        return Computer(ram=self._ram, storage=self._storage)


def demo() -> None:
    computer = ComputerBuilder().set_ram("16GB").set_storage("1TB").build()
    print(computer)
