"""Build the application container with its catalog."""

from __future__ import annotations

from dataclasses import dataclass

from stockroom.adapters.catalog.memory import InMemoryItemCatalog
from stockroom.interfaces.catalog import ItemCatalog
from stockroom.interfaces.id_generator import IdGenerator


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    catalog: ItemCatalog


def build_catalog(id_generator: IdGenerator | None = None) -> ItemCatalog:
    """Build a new, empty catalog.

    Without an `id_generator` the catalog numbers its own items from 1.
    """
    return InMemoryItemCatalog(id_generator)


def bootstrap(catalog: ItemCatalog | None = None) -> AppContainer:
    """Wire up the application.

    Args:
        catalog: Use this catalog instead of building a fresh one.
    """
    return AppContainer(catalog=catalog if catalog is not None else build_catalog())
