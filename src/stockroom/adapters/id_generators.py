"""ID generators for STOCKROOM."""

from stockroom.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class SequentialIdGenerator(IdGenerator):
    """Produces 1, 2, 3, ... with no gaps and no reuse.

    Each instance keeps its own counter, so two catalogs built with separate
    generators both start at 1.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def new_id(self) -> int:
        """Return the next identifier and advance the counter by one."""
        new_id = self._next
        self._next += 1
        return new_id
