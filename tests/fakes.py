"""In-memory fake repository for testing.

Implements the same abstract interface as the JSON repository but keeps
the saved items in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from invtrack.domain.model.inventory import Inventory
from invtrack.domain.model.item import Item
from invtrack.domain.repository.inventory_repository import InventoryRepository


class FakeInventoryRepository(InventoryRepository):

    def __init__(self, items: list[Item] | None = None) -> None:
        self._store: dict[str, Item] = {}
        for item in items or []:
            self._store[item.name] = item
        self.save_count = 0

    def load(self) -> Inventory:
        return Inventory(
            Item(name=i.name, quantity=i.quantity, price=i.price)
            for i in self._store.values()
        )

    def save(self, inventory: Inventory) -> str:
        self._store = {
            i.name: Item(name=i.name, quantity=i.quantity, price=i.price)
            for i in inventory.list_all()
        }
        self.save_count += 1
        return ",".join(sorted(self._store))

    def saved_items(self) -> dict[str, Item]:
        return dict(self._store)


class FailingInventoryRepository(InventoryRepository):
    """Raises the given exception from every operation."""

    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    def load(self) -> Inventory:
        raise self._exc

    def save(self, inventory: Inventory) -> str:
        raise self._exc
