"""In-memory ItemCatalog implementation."""

from __future__ import annotations

import dataclasses
import logging

from stockroom.adapters.id_generators import SequentialIdGenerator
from stockroom.domain.item import Item, QuantityUpdate
from stockroom.interfaces.catalog import ItemCatalog
from stockroom.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class InMemoryItemCatalog(ItemCatalog):
    """In-memory implementation of the ItemCatalog interface.

    Items live in a list in insertion order; identifiers come from the injected
    generator (a fresh `SequentialIdGenerator` by default). Nothing is persisted
    and there is no locking: a single caller drives one operation at a time.
    """

    def __init__(self, id_generator: IdGenerator | None = None) -> None:
        self._items: list[Item] = []
        self._id_generator = id_generator or SequentialIdGenerator()

    def add(self, name: str, category: str, unit_cost: int, quantity: int) -> int:
        item = Item(
            item_id=self._id_generator.new_id(),
            name=name,
            category=category,
            unit_cost=unit_cost,
            quantity=quantity,
        )
        self._items.append(item)
        logger.debug("Added item %s", item)
        return item.item_id

    def get(self, item_id: int) -> Item | None:
        if (index := self._index_of(item_id)) is None:
            return None
        return self._items[index]

    def update_quantity(self, item_id: int, quantity: int) -> QuantityUpdate:
        if (index := self._index_of(item_id)) is None:
            logger.debug("No item with id %s; catalog unchanged", item_id)
            return QuantityUpdate.not_found(item_id)

        current = self._items[index]
        self._items[index] = dataclasses.replace(current, quantity=quantity)
        logger.debug(
            "Item %s (%s) quantity %s -> %s",
            item_id,
            current.name,
            current.quantity,
            quantity,
        )
        return QuantityUpdate(
            item_id=item_id,
            found=True,
            name=current.name,
            previous=current.quantity,
            quantity=quantity,
        )

    def list_items(self) -> list[Item]:
        return list(self._items)

    def total_value(self) -> int:
        return sum(item.value for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def _index_of(self, item_id: int) -> int | None:
        # ids are unique, so the first match is the only one
        for index, item in enumerate(self._items):
            if item.item_id == item_id:
                return index
        return None
