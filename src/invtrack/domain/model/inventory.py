"""Inventory aggregate — the in-memory store of items keyed by name.

The Inventory exclusively owns its items. Callers get copies of the
mapping, never the mapping itself, so every mutation goes through
``add_item()`` or ``update_quantity()``.
"""

from __future__ import annotations

from collections.abc import Iterable

from invtrack.domain.exceptions import (
    DuplicateItemError,
    InvalidQuantityError,
    ItemNotFoundError,
)
from invtrack.domain.model.item import Item


class Inventory:
    """Aggregate root for the stock list.

    Invariants:
    - no two items share a name (enforced by the underlying dict)
    - quantities only ever grow once an item exists
    """

    def __init__(self, items: Iterable[Item] | None = None) -> None:
        self._items: dict[str, Item] = {}
        for item in items or []:
            self._items[item.name] = item

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def get(self, name: str) -> Item | None:
        return self._items.get(name)

    def list_all(self) -> list[Item]:
        """Return every item in dict iteration order."""
        return list(self._items.values())

    def add_item(self, name: str, quantity: int, price: float) -> Item:
        """Insert a new item.

        Quantity and price are stored as given; no sign check is made.
        """
        if name in self._items:
            raise DuplicateItemError(f"Item {name} already present")
        item = Item(name=name, quantity=quantity, price=price)
        self._items[name] = item
        return item

    def update_quantity(self, name: str, delta: int) -> Item:
        """Increase the stock of an existing item by *delta*.

        The delta is checked before the lookup, so a non-positive delta
        is reported even for an unknown name.
        """
        if delta <= 0:
            raise InvalidQuantityError("quantity added should be greater than 0")
        item = self._items.get(name)
        if item is None:
            raise ItemNotFoundError(f"Item {name} not found")
        item.restock(delta)
        return item
