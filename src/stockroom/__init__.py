"""STOCKROOM

An in-memory catalog of inventory items. Items get sequential identifiers,
their stock quantity can be updated in place, and the catalog can be listed
and valued at any time.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
