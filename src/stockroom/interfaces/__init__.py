"""Abstract contracts implemented by STOCKROOM adapters.

Entrypoints and tests code against these interfaces; concrete backends live in
`stockroom.adapters`.
"""

from .catalog import ItemCatalog
from .id_generator import IdGenerator

__all__ = ["ItemCatalog", "IdGenerator"]
