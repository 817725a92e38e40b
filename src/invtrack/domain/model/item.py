"""Item — one inventory entry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Item:
    """A named stock entry.

    ``name`` is the inventory key and never changes after creation.
    Only ``quantity`` is mutated, through ``restock()``. The owning
    Inventory validates the delta before calling it.
    """

    name: str
    quantity: int
    price: float

    def restock(self, delta: int) -> None:
        self.quantity += delta
