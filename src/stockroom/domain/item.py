"""Catalog item record and stock update result."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Item:
    """Immutable snapshot of one catalog entry.

    Conventions:
      - `item_id` is assigned by the catalog (1..N in insertion order).
      - `name` and `category` are free-form short labels.
      - `unit_cost` is in whole currency units; no sign check is applied.
      - `quantity` is the only field a catalog ever changes. It does so by
        storing a new snapshot, so a held `Item` never changes under the caller.
    """

    item_id: int
    name: str
    category: str
    unit_cost: int
    quantity: int

    @property
    def value(self) -> int:
        """Monetary value of the stock held for this item."""
        return self.unit_cost * self.quantity


@dataclass(frozen=True, slots=True)
class QuantityUpdate:
    """Outcome of a stock quantity update.

    A miss is a normal outcome, not an error: `found` is False and the other
    fields stay None. The object is truthy only when the item was found.
    """

    item_id: int
    found: bool
    name: str | None = None
    previous: int | None = None
    quantity: int | None = None

    def __bool__(self) -> bool:
        return self.found

    @classmethod
    def not_found(cls, item_id: int) -> QuantityUpdate:
        """Build the result for an id with no matching item."""
        return cls(item_id=item_id, found=False)
