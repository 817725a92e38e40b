"""Application service: Save Inventory use case."""

from __future__ import annotations

from invtrack.application.dto import SaveResultDTO
from invtrack.domain.model.inventory import Inventory
from invtrack.domain.repository.inventory_repository import InventoryRepository


class SaveInventoryHandler:

    def __init__(
        self,
        inventory: Inventory,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._inventory = inventory
        self._inventory_repo = inventory_repo

    def handle(self) -> SaveResultDTO:
        """Write the whole inventory, replacing whatever the store held."""
        payload = self._inventory_repo.save(self._inventory)
        return SaveResultDTO(payload=payload)
