"""Abstract interface for whole-collection record storage."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Any


class IRecordStore(ABC):
    """
    Interface for collection persistence.

    A collection is read and written as a whole; there are no partial
    updates. Callers doing read-modify-write must hold lock(collection)
    across the load and the save.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Create the storage location and any missing empty collections."""
        pass

    @abstractmethod
    async def load_all(self, collection: str) -> list[dict[str, Any]]:
        """Load every record of a collection in insertion order."""
        pass

    @abstractmethod
    async def save_all(self, collection: str, records: list[dict[str, Any]]) -> None:
        """Replace the persisted collection with records."""
        pass

    @abstractmethod
    def lock(self, collection: str) -> AbstractAsyncContextManager[None]:
        """Exclusive access to a collection for a read-modify-write sequence."""
        pass
