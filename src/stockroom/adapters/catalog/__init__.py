"""Catalog adapters."""

from .memory import InMemoryItemCatalog

__all__ = ["InMemoryItemCatalog"]
