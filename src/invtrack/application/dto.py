"""Data Transfer Objects — plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemLineDTO:
    """Output: a single inventory line as displayed to the user."""

    name: str
    quantity: int
    price: str  # formatted, e.g. "2.5" or "10"


@dataclass(frozen=True)
class SaveResultDTO:
    """Output: what was written by a save."""

    payload: str
