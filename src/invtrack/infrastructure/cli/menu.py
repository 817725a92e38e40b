"""Interactive menu loop.

Reads one line per prompt from a text stream, dispatches to the
application handlers and echoes results. Every DomainException is shown
as ``Error: <message>`` and the session carries on.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import TextIO

import click

from invtrack.application.add_item import AddItemHandler
from invtrack.application.save_inventory import SaveInventoryHandler
from invtrack.application.show_inventory import ShowInventoryHandler
from invtrack.application.update_quantity import UpdateQuantityHandler
from invtrack.domain.exceptions import DomainException
from invtrack.domain.model.inventory import Inventory
from invtrack.domain.repository.inventory_repository import InventoryRepository

LOGGER = logging.getLogger(__name__)

MENU = (
    "1. Add new item",
    "2. Update quantity",
    "3. Display inventory",
    "4. Save the file",
    "5. Exit",
)


class SessionState(Enum):
    RUNNING = "RUNNING"
    TERMINATED = "TERMINATED"


class EndOfInput(Exception):
    """The input stream ran dry before a line could be read."""


_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity)|nan",
    re.IGNORECASE,
)
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def parse_int(text: str) -> int:
    """Lenient integer parse: anything unparseable counts as 0.

    Only an optional sign and ASCII digits are accepted, so surrounding
    whitespace, ``_`` separators and non-ASCII digits all give 0.
    Out-of-range values saturate at the 64-bit bounds.
    """
    if not _INT_RE.fullmatch(text):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(text)))


def parse_float(text: str) -> float:
    """Lenient float parse: anything unparseable counts as 0.0.

    Accepts ASCII decimal and exponent forms plus ``inf``/``infinity``/``nan``;
    hexadecimal floats and ``_`` separators are not recognised.
    Overflow yields an infinity.
    """
    if not _FLOAT_RE.fullmatch(text):
        return 0.0
    return float(text)


class MenuSession:
    """One interactive session over a single in-memory Inventory.

    Exiting does not save; unsaved changes are discarded.
    """

    def __init__(
        self,
        inventory: Inventory,
        inventory_repo: InventoryRepository,
        stdin: TextIO,
    ) -> None:
        self._inventory = inventory
        self._inventory_repo = inventory_repo
        self._stdin = stdin
        self.state = SessionState.RUNNING
        self._actions = {
            "1": self._add_item,
            "2": self._update_quantity,
            "3": self._display_inventory,
            "4": self._save,
            "5": self._exit,
        }

    def run(self) -> None:
        while self.state is SessionState.RUNNING:
            try:
                self.step()
            except EndOfInput:
                LOGGER.debug("Input closed, ending session")
                self.state = SessionState.TERMINATED

    def step(self) -> None:
        """Show the menu once and carry out the chosen option."""
        for line in MENU:
            click.echo(line)
        choice = self._ask("Choose an option")

        action = self._actions.get(choice)
        if action is None:
            click.echo("Invalid choice")
            return

        try:
            action()
        except DomainException as exc:
            click.echo(f"Error: {exc}")

    # --- Menu options ---------------------------------------------------------

    def _add_item(self) -> None:
        name = self._ask("Enter item name")
        quantity = parse_int(self._ask("Enter quantity"))
        price = parse_float(self._ask("Enter price"))
        AddItemHandler(self._inventory).handle(name, quantity, price)
        click.echo("Item added successfully")

    def _update_quantity(self) -> None:
        name = self._ask("Enter item name")
        delta = parse_int(self._ask("Enter quantity"))
        UpdateQuantityHandler(self._inventory).handle(name, delta)
        click.echo("Quantity updated successfully")

    def _display_inventory(self) -> None:
        for line in ShowInventoryHandler(self._inventory).handle():
            click.echo(
                f"item: {line.name}, quantity: {line.quantity}, price: {line.price}"
            )

    def _save(self) -> None:
        result = SaveInventoryHandler(self._inventory, self._inventory_repo).handle()
        click.echo(f"Saving data: {result.payload}")
        click.echo("File saved successfully")

    def _exit(self) -> None:
        click.echo("Exiting...")
        self.state = SessionState.TERMINATED

    # --- Input ----------------------------------------------------------------

    def _ask(self, prompt: str) -> str:
        click.echo(prompt)
        line = self._stdin.readline()
        if not line:
            raise EndOfInput()
        return line.rstrip("\r\n")
