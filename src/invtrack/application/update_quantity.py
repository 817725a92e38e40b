"""Application service: Update Quantity use case."""

from __future__ import annotations

from invtrack.domain.model.inventory import Inventory
from invtrack.domain.model.item import Item


class UpdateQuantityHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, name: str, delta: int) -> Item:
        """Increase the stock of *name* by *delta*."""
        return self._inventory.update_quantity(name, delta)
