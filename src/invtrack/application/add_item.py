"""Application service: Add Item use case."""

from __future__ import annotations

from invtrack.domain.model.inventory import Inventory
from invtrack.domain.model.item import Item


class AddItemHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, name: str, quantity: int, price: float) -> Item:
        """Add a new item to the in-memory inventory.

        Nothing is persisted until the inventory is saved.
        """
        return self._inventory.add_item(name, quantity, price)
