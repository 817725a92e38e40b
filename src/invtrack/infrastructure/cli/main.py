import logging

import click

from invtrack.domain.exceptions import PersistenceError
from invtrack.domain.model.inventory import Inventory
from invtrack.infrastructure.bootstrap import inventory_repository
from invtrack.infrastructure.cli.menu import MenuSession

LOGGER = logging.getLogger(__name__)


@click.command()
def cli() -> None:
    """Interactive inventory tracker backed by ./inventory.json."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    repo = inventory_repository()
    try:
        inventory = repo.load()
    except PersistenceError as exc:
        LOGGER.warning("Could not load inventory: %s", exc)
        click.echo("Error creating/reading the inventory file")
        inventory = Inventory()

    MenuSession(inventory, repo, stdin=click.get_text_stream("stdin")).run()
