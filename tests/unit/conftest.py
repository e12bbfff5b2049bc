"""
Fixtures for unit tests.

Provides an in-memory RecordStore so services and repositories can be
exercised without touching disk, a database or the network.
"""

from datetime import date
from typing import Dict, Optional

import pytest

from trakr.domain.exceptions import RecordStoreException
from trakr.domain.interfaces import RecordStore

TODAY = date(2024, 3, 15)


class InMemoryRecordStore(RecordStore):
    """RecordStore over a dict; can be told to fail every write."""

    backend = "memory"

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})
        self.fail_writes = False
        self.write_count = 0

    async def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        await self.set_many({key: value})

    async def set_many(self, values: Dict[str, str]) -> None:
        if self.fail_writes:
            raise RecordStoreException("write failed")
        self.write_count += 1
        self.data.update(values)


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def today():
    return lambda: TODAY
