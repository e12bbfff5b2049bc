"""Record store interface for key/value persistence."""

import asyncio
from abc import ABC, abstractmethod
from typing import Dict, Optional


class RecordStore(ABC):
    """
    Abstract key/value store holding one JSON document per key.

    Values are JSON text, the way a browser's local storage holds them.
    Implementations may use a local file, a SQL table or a remote REST
    database; all of them are accessed asynchronously.
    """

    backend: str = "unknown"

    @property
    def mutation_lock(self) -> asyncio.Lock:
        """
        Lock held by services from loading records to writing them back.

        There is one lock per store instance, so read-modify-write cycles
        from overlapping requests in this process apply one after another.
        """
        if getattr(self, "_mutation_lock", None) is None:
            self._mutation_lock = asyncio.Lock()
        return self._mutation_lock

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Read the JSON text stored under a key.

        Args:
            key: The record key (e.g. "transactions")

        Returns:
            The stored JSON text, or None if the key was never written

        Raises:
            RecordStoreException: If the underlying medium cannot be read
        """
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """
        Write JSON text under a key, replacing any previous value.

        Raises:
            RecordStoreException: If the write fails
        """
        ...

    @abstractmethod
    async def set_many(self, values: Dict[str, str]) -> None:
        """
        Write several keys atomically.

        Either every key is replaced or, when the write fails, none is.

        Raises:
            RecordStoreException: If the write fails
        """
        ...
