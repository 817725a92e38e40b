"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from invtrack.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)

# Resolved against the working directory the program is started from.
DEFAULT_INVENTORY_FILE = Path("inventory.json")


def inventory_repository(file_path: Path | None = None) -> JsonInventoryRepository:
    return JsonInventoryRepository(file_path or DEFAULT_INVENTORY_FILE)
