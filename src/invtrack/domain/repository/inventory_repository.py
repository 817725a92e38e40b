"""Abstract repository for the Inventory aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The JSON-file implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from invtrack.domain.model.inventory import Inventory


class InventoryRepository(ABC):

    @abstractmethod
    def load(self) -> Inventory:
        """Read the whole backing store; an absent or empty store gives an empty Inventory."""

    @abstractmethod
    def save(self, inventory: Inventory) -> str:
        """Overwrite the backing store with *inventory* and return the written payload."""
