"""Adapter: expose ``NewSystem`` through the legacy ``fetch_data`` interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LegacyDataSource(Protocol):
    """Interface the existing clients were written against."""

    def fetch_data(self) -> str:  # pragma: no cover - Protocol only
        """Return the source's data."""


class OldSystem:
    def fetch_data(self) -> str:
        return "Old System Data"


class NewSystem:
    def get_data(self) -> str:
        return "New System Data"


class NewSystemAdapter:
    """Make a ``NewSystem`` usable wherever a ``LegacyDataSource`` is expected.

    The adaptee's result is returned verbatim; only the method name changes.
    """

    def __init__(self, new_system: NewSystem) -> None:
        self.new_system = new_system

    def fetch_data(self) -> str:
        return self.new_system.get_data()


def demo() -> None:
    adapter = NewSystemAdapter(NewSystem())
    print(adapter.fetch_data())
