"""JSON-file-backed implementation of InventoryRepository."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from invtrack.domain.exceptions import SerializationError, StorageError
from invtrack.domain.model.inventory import Inventory
from invtrack.domain.model.item import Item
from invtrack.domain.repository.inventory_repository import InventoryRepository

LOGGER = logging.getLogger(__name__)

# Owner read/write, group and others read. Only applied when the file is created.
FILE_MODE = 0o644


class JsonInventoryRepository(InventoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    # --- InventoryRepository interface ----------------------------------------

    def load(self) -> Inventory:
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            LOGGER.info("No inventory file at %s, starting empty", self._file_path)
            return Inventory()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"error reading file: {exc}") from exc

        # Only a zero-length file counts as empty; whitespace is a decode error.
        if not text:
            LOGGER.info("Inventory file %s is empty, starting empty", self._file_path)
            return Inventory()

        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SerializationError(f"error decoding {self._file_path}: {exc}") from exc

        inventory = Inventory(self._to_domain(raw))
        LOGGER.debug("Loaded %d item(s) from %s", len(inventory), self._file_path)
        return inventory

    def save(self, inventory: Inventory) -> str:
        try:
            payload = json.dumps(
                {item.name: self._to_raw(item) for item in inventory.list_all()},
                indent=4,
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"error marshaling data: {exc}") from exc

        try:
            self._write(payload)
        except OSError as exc:
            raise StorageError(f"error writing file: {exc}") from exc

        LOGGER.debug("Wrote %d item(s) to %s", len(inventory), self._file_path)
        return payload

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: Item) -> dict:
        return {
            "Name": item.name,
            "Quantity": item.quantity,
            "Price": item.price,
        }

    @staticmethod
    def _to_domain(raw: object) -> list[Item]:
        if raw is None:
            return []
        if not isinstance(raw, dict):
            raise SerializationError(
                f"expected a JSON object of items, got {type(raw).__name__}"
            )

        items: list[Item] = []
        for key, entry in raw.items():
            if not isinstance(entry, dict):
                raise SerializationError(
                    f"entry {key!r} must be a JSON object, got {type(entry).__name__}"
                )
            name = entry.get("Name", key)
            quantity = entry.get("Quantity", 0)
            price = entry.get("Price", 0.0)

            if not isinstance(name, str):
                raise SerializationError(f"entry {key!r}: Name must be a string")
            # The object key is the item's identity; a differing Name would
            # collapse distinct entries into one on the next save.
            if name != key:
                raise SerializationError(
                    f"entry {key!r}: Name {name!r} does not match its key"
                )
            if isinstance(quantity, bool) or not isinstance(quantity, int):
                raise SerializationError(f"entry {key!r}: Quantity must be an integer")
            if isinstance(price, bool) or not isinstance(price, (int, float)):
                raise SerializationError(f"entry {key!r}: Price must be a number")

            items.append(Item(name=name, quantity=quantity, price=float(price)))
        return items

    # --- File helpers ---------------------------------------------------------

    def _write(self, payload: str) -> None:
        # Plain truncate-and-write; there is no temp file and rename.
        fd = os.open(self._file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(payload)
