"""Unit tests for the Inventory aggregate."""

import pytest

from invtrack.domain.exceptions import (
    DuplicateItemError,
    InvalidQuantityError,
    ItemNotFoundError,
    ValidationError,
)
from invtrack.domain.model.inventory import Inventory
from invtrack.domain.model.item import Item


class TestInventoryAddItem:

    def test_add_stores_item(self):
        inv = Inventory()
        inv.add_item("widget", 5, 2.50)
        assert inv.get("widget") == Item("widget", 5, 2.50)
        assert len(inv) == 1

    def test_duplicate_rejected_and_original_kept(self):
        inv = Inventory()
        inv.add_item("widget", 5, 2.50)
        with pytest.raises(DuplicateItemError, match="Item widget already present"):
            inv.add_item("widget", 1, 1.0)
        assert inv.get("widget") == Item("widget", 5, 2.50)

    def test_duplicate_is_a_validation_error(self):
        inv = Inventory([Item("widget", 5, 2.50)])
        with pytest.raises(ValidationError):
            inv.add_item("widget", 1, 1.0)

    def test_negative_values_accepted_as_given(self):
        inv = Inventory()
        inv.add_item("oddity", -3, -1.5)
        assert inv.get("oddity") == Item("oddity", -3, -1.5)


class TestInventoryUpdateQuantity:

    def test_update_adds_delta(self):
        inv = Inventory([Item("widget", 5, 2.50)])
        inv.update_quantity("widget", 3)
        assert inv.get("widget").quantity == 8
        assert inv.get("widget").price == 2.50

    def test_zero_delta_rejected_quantity_unchanged(self):
        inv = Inventory([Item("widget", 8, 2.50)])
        with pytest.raises(InvalidQuantityError):
            inv.update_quantity("widget", 0)
        assert inv.get("widget").quantity == 8

    def test_negative_delta_rejected_quantity_unchanged(self):
        inv = Inventory([Item("widget", 8, 2.50)])
        with pytest.raises(InvalidQuantityError):
            inv.update_quantity("widget", -2)
        assert inv.get("widget").quantity == 8

    def test_missing_item_rejected(self):
        inv = Inventory([Item("widget", 8, 2.50)])
        with pytest.raises(ItemNotFoundError, match="Item gadget not found"):
            inv.update_quantity("gadget", 1)

    def test_delta_checked_before_lookup(self):
        inv = Inventory()
        with pytest.raises(InvalidQuantityError):
            inv.update_quantity("gadget", -1)


class TestInventoryListing:

    def test_empty_inventory_lists_nothing(self):
        assert Inventory().list_all() == []

    def test_list_all_returns_a_copy(self):
        inv = Inventory([Item("widget", 1, 1.0)])
        inv.list_all().clear()
        assert len(inv) == 1

    def test_contains(self):
        inv = Inventory([Item("widget", 1, 1.0)])
        assert "widget" in inv
        assert "gadget" not in inv
