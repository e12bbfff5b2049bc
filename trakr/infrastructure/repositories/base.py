"""Shared load/save logic for repositories over a RecordStore."""

import json
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

import structlog

from trakr.core.metrics import record_decode_failure
from trakr.domain.exceptions import TrakrException
from trakr.domain.interfaces import RecordStore

logger = structlog.get_logger(__name__)

T = TypeVar("T")

# Everything a bad stored record can raise while being decoded
DECODE_ERRORS = (KeyError, TypeError, ValueError, ArithmeticError, TrakrException)


class RecordCollection(Generic[T]):
    """
    A list of entities stored as one JSON array under a key.

    A missing key is seeded with the default collection, which is written
    back so generated ids stay stable. Malformed JSON under the key is
    logged and read as an empty list; a single malformed record is logged
    and skipped.
    """

    def __init__(
        self,
        store: RecordStore,
        key: str,
        encode: Callable[[T], Dict[str, Any]],
        decode: Callable[[Dict[str, Any]], T],
        seed: Optional[Callable[[], List[T]]] = None,
    ):
        self.store = store
        self.key = key
        self._encode = encode
        self._decode = decode
        self._seed = seed

    async def load(self) -> List[T]:
        raw = await self.store.get(self.key)
        if raw is None:
            return await self._write_seed()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("record_store_decode_failed", key=self.key, error=str(e))
            record_decode_failure(self.key)
            return []

        if not isinstance(data, list):
            logger.error(
                "record_store_decode_failed",
                key=self.key,
                error=f"expected a JSON array, got {type(data).__name__}",
            )
            record_decode_failure(self.key)
            return []

        items: List[T] = []
        for index, record in enumerate(data):
            try:
                items.append(self._decode(record))
            except DECODE_ERRORS as e:
                logger.warning("record_skipped", key=self.key, index=index, error=str(e))
                record_decode_failure(self.key)
        return items

    def dumps(self, items: List[T]) -> str:
        return json.dumps([self._encode(item) for item in items])

    async def save(self, items: List[T]) -> None:
        await self.store.set(self.key, self.dumps(items))

    async def _write_seed(self) -> List[T]:
        items = self._seed() if self._seed else []
        if items:
            await self.save(items)
            logger.info("record_store_seeded", key=self.key, count=len(items))
        return items
