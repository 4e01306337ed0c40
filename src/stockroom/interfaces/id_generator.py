"""Interface for ID generators."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for an item ID generator.

    Implementations must never return the same ID twice and must return IDs in
    strictly increasing order.
    """

    @abc.abstractmethod
    def new_id(self) -> int:
        """Generate a new unique identifier."""
