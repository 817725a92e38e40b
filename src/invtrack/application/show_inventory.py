"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

import math

from invtrack.application.dto import ItemLineDTO
from invtrack.domain.model.inventory import Inventory


def format_price(price: float) -> str:
    """Render a price for the inventory listing.

    Whole numbers drop the fractional part (``10`` rather than ``10.0``);
    non-finite values print as ``NaN``, ``+Inf`` and ``-Inf``; everything
    else uses the shortest round-tripping repr.
    """
    if math.isnan(price):
        return "NaN"
    if math.isinf(price):
        return "+Inf" if price > 0 else "-Inf"
    if price == int(price) and abs(price) < 1e21:
        return str(int(price))
    return repr(float(price))


class ShowInventoryHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self) -> list[ItemLineDTO]:
        return [
            ItemLineDTO(
                name=item.name,
                quantity=item.quantity,
                price=format_price(item.price),
            )
            for item in self._inventory.list_all()
        ]
