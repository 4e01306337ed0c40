"""Global pytest fixtures for STOCKROOM."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from stockroom.adapters.catalog.memory import InMemoryItemCatalog


@dataclass(frozen=True)
class NewItem:
    """Arguments for one `ItemCatalog.add` call."""

    name: str
    category: str
    unit_cost: int
    quantity: int

    def as_args(self) -> tuple[str, str, int, int]:
        """Positional arguments in `add` order."""
        return (self.name, self.category, self.unit_cost, self.quantity)


SAMPLE_ITEMS = (
    NewItem("laptop", "electronics", 45000, 50),
    NewItem("smartphone", "electronics", 25000, 100),
    NewItem("tablet", "electronics", 30000, 75),
)


@pytest.fixture
def sample_items() -> tuple[NewItem, ...]:
    """Three electronics items: laptop, smartphone, tablet (in that order)."""
    return SAMPLE_ITEMS


@pytest.fixture
def stocked_catalog() -> InMemoryItemCatalog:
    """An in-memory catalog holding the sample items with ids 1..3."""
    catalog = InMemoryItemCatalog()
    for item in SAMPLE_ITEMS:
        catalog.add(*item.as_args())
    return catalog
