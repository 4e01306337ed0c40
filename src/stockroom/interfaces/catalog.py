"""Interface for the Item Catalog."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stockroom.domain.item import Item, QuantityUpdate


class ItemCatalog(abc.ABC):
    """Append-only catalog of inventory items.

    The catalog owns every item it creates. Items come back as immutable
    snapshots; the only way to change one is `update_quantity`.
    """

    @abc.abstractmethod
    def add(self, name: str, category: str, unit_cost: int, quantity: int) -> int:
        """Insert a new item at the end of the catalog.

        Args:
            name: Short label for the item.
            category: Free-form category label.
            unit_cost: Cost of a single unit. Not range-checked.
            quantity: Initial stock quantity. Not range-checked.

        Returns:
            The identifier assigned to the new item.
        """

    @abc.abstractmethod
    def get(self, item_id: int) -> Item | None:
        """Get an item by its identifier.

        Returns:
            The item snapshot if found, otherwise None.
        """

    @abc.abstractmethod
    def update_quantity(self, item_id: int, quantity: int) -> QuantityUpdate:
        """Replace the stock quantity of an item.

        Args:
            item_id: Identifier of the item to update.
            quantity: The new stock quantity. Not range-checked.

        Returns:
            A `QuantityUpdate` carrying the item name and previous quantity, or
            a not-found result if no item has that identifier. The catalog is
            unchanged in the not-found case.
        """

    @abc.abstractmethod
    def list_items(self) -> list[Item]:
        """Return every item in insertion order (empty list if none)."""

    @abc.abstractmethod
    def total_value(self) -> int:
        """Return the sum of `unit_cost * quantity` over all items (0 if none)."""

    @abc.abstractmethod
    def __len__(self) -> int:
        """Return the number of items in the catalog."""
