"""Domain model for STOCKROOM.

Pure data types with no I/O. Adapters and entrypoints depend on this package,
never the other way around.
"""

from .item import Item, QuantityUpdate

__all__ = ["Item", "QuantityUpdate"]
