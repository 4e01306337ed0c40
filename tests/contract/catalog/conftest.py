"""Fixtures for ItemCatalog contract tests."""

from collections.abc import Iterable

import pytest

from stockroom.adapters.catalog.memory import InMemoryItemCatalog
from stockroom.interfaces.catalog import ItemCatalog


@pytest.fixture(params=["memory"])
def catalog(request: pytest.FixtureRequest) -> Iterable[ItemCatalog]:
    """Return a fresh, empty ItemCatalog for the requested backend.

    Supported params:
      - `"memory"` → InMemoryItemCatalog

    Extend by adding new identifiers to `params` and branching below to
    construct the corresponding backend. Each invocation yields a brand-new
    catalog instance for isolation.
    """

    match request.param:
        case "memory":
            yield InMemoryItemCatalog()
        case _:
            raise ValueError(f"unknown catalog type: {request.param}")
