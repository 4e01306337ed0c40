"""Interactive menu over the item catalog (``stockroom shell``).

Each menu entry maps onto one catalog operation. Prompts and catalog output
go to stdout; status lines (added, updated, not found, invalid choice) go to
stderr through the message helpers.

Malformed numbers are rejected by ``click.prompt`` itself, which asks again,
so the catalog only ever receives integers.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import TYPE_CHECKING

import click

from stockroom import config
from stockroom.domain.item import QuantityUpdate

from stockroom.logging import describe_catalog

from .helpers import error, success, supports_text, warn

if TYPE_CHECKING:
    from stockroom.bootstrap import AppContainer
    from stockroom.domain.item import Item
    from stockroom.interfaces.catalog import ItemCatalog

logger = logging.getLogger(__name__)


class MenuChoice(IntEnum):
    """Entries of the shell menu, by the number the user types."""

    ADD_ITEM = 1
    UPDATE_STOCK = 2
    DISPLAY_CATALOG = 3
    TOTAL_VALUE = 4
    EXIT = 5


MENU = "\n".join(
    [
        "",
        "\t 1) Add item",
        "\t 2) Update stock quantity",
        "\t 3) Display catalog",
        "\t 4) Calculate total value",
        "\t 5) Exit",
    ]
)

TABLE_HEADER = "ID\tName\t\tCategory\tUnit cost\tQuantity"
TABLE_RULE = "-" * 57

EMPTY_CATALOG_MSG = "Catalog is empty."
EMPTY_UPDATE_MSG = "Catalog is empty. Cannot update anything."
INVALID_CHOICE_MSG = "Invalid choice. Please try again."
GOODBYE_MSG = "Exiting STOCKROOM. Goodbye!"


def resolve_currency(label: str | None = None) -> str:
    """Pick the currency label to print, falling back to ASCII if stdout can't encode it."""
    label = label or config.get_currency()
    if supports_text(label, stream="stdout"):
        return label
    return config.ASCII_CURRENCY_FALLBACK


def format_row(item: Item) -> str:
    """Render one catalog row (tab-separated, in column order)."""
    return (
        f"{item.item_id}\t{item.name}\t\t{item.category}\t"
        f"{item.unit_cost}\t\t{item.quantity}"
    )


def add_item(catalog: ItemCatalog) -> int:
    """Prompt for a new item's fields and add it to the catalog."""
    name = click.prompt("Enter item name")
    category = click.prompt("Enter item category")
    unit_cost = click.prompt("Enter item cost", type=int)
    quantity = click.prompt("Enter stock quantity", type=int)

    item_id = catalog.add(name, category, unit_cost, quantity)
    success(f"Item added successfully with ID: {item_id}")
    return item_id


def update_stock(catalog: ItemCatalog) -> QuantityUpdate | None:
    """Prompt for an item ID and a new quantity, and apply the update.

    Returns:
        The update result, or None when the catalog was empty and nothing was asked.
    """
    if len(catalog) == 0:
        warn(EMPTY_UPDATE_MSG)
        return None

    item_id = click.prompt("Enter the item ID to update stock", type=int)
    if (item := catalog.get(item_id)) is None:
        error(f"Item with ID {item_id} not found.")
        return QuantityUpdate.not_found(item_id)

    click.echo(f"Found item: {item.name} | Current stock: {item.quantity}")
    quantity = click.prompt("Enter the new stock quantity", type=int)

    result = catalog.update_quantity(item_id, quantity)
    success(f"Stock updated: {result.previous} -> {result.quantity}")
    return result


def display_catalog(catalog: ItemCatalog) -> None:
    """Print every item in insertion order."""
    if not (items := catalog.list_items()):
        click.echo(EMPTY_CATALOG_MSG)
        return

    click.echo(TABLE_HEADER)
    for item in items:
        click.echo(format_row(item))
    click.echo(TABLE_RULE)


def show_total_value(catalog: ItemCatalog, currency: str) -> None:
    """Print the total value of the catalog."""
    click.echo(f"Total catalog value: {currency} {catalog.total_value()}")


@click.command()
@click.option(
    "--currency",
    "currency",
    default=None,
    help=f"Currency label for monetary values [env var: {config.CURRENCY_ENVVAR}; default: {config.DEFAULT_CURRENCY}].",
)
@click.pass_obj
def shell(app: AppContainer, currency: str | None) -> None:
    """Run the interactive catalog menu."""
    catalog = app.catalog
    currency = resolve_currency(currency)
    logger.info("Shell started (currency=%s)", currency)

    while True:
        click.echo(MENU)
        raw_choice = click.prompt("\n\t Enter your choice", type=int)
        try:
            choice = MenuChoice(raw_choice)
        except ValueError:
            logger.debug("Rejected menu choice %s", raw_choice)
            warn(INVALID_CHOICE_MSG)
            continue

        match choice:
            case MenuChoice.ADD_ITEM:
                add_item(catalog)
            case MenuChoice.UPDATE_STOCK:
                update_stock(catalog)
            case MenuChoice.DISPLAY_CATALOG:
                display_catalog(catalog)
            case MenuChoice.TOTAL_VALUE:
                show_total_value(catalog, currency)
            case MenuChoice.EXIT:
                click.echo(GOODBYE_MSG)
                logger.info("Shell exited: %s", describe_catalog(catalog))
                return
