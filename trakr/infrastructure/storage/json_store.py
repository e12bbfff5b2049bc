"""Local JSON file implementation of RecordStore."""

import asyncio
import json
import os
from pathlib import Path
from typing import Dict, Optional

import structlog

from trakr.core.config import settings
from trakr.core.metrics import track_store_latency
from trakr.domain.exceptions import RecordStoreException
from trakr.domain.interfaces import RecordStore

logger = structlog.get_logger(__name__)


class JsonFileRecordStore(RecordStore):
    """
    Record store backed by a single JSON document on disk.

    The document maps each key to its JSON text, like a local storage
    dump. Writes go to a temporary file that replaces the document in one
    rename, so a multi-key write lands completely or not at all. File IO
    runs in a worker thread under an internal lock, so one read or write
    touches the file at a time.
    """

    backend = "json"

    def __init__(self, path: str | Path | None = None):
        self._path = Path(path or settings.storage_path)
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def get(self, key: str) -> Optional[str]:
        async with self._lock:
            with track_store_latency(self.backend, "get"):
                document = await self._load()

        value = document.get(key)
        if value is None or isinstance(value, str):
            return value
        # Hand-edited documents may hold the structure itself
        return json.dumps(value)

    async def set(self, key: str, value: str) -> None:
        await self.set_many({key: value})

    async def set_many(self, values: Dict[str, str]) -> None:
        async with self._lock:
            with track_store_latency(self.backend, "set"):
                document = await self._load()
                document.update(values)
                try:
                    await asyncio.to_thread(self._write, document)
                except OSError as e:
                    logger.error("record_store_write_failed", path=str(self._path), error=str(e))
                    raise RecordStoreException(f"Could not write {self._path}: {e}") from e

        logger.debug("record_store_written", path=str(self._path), keys=sorted(values))

    async def _load(self) -> Dict[str, object]:
        try:
            return await asyncio.to_thread(self._read)
        except (OSError, ValueError) as e:
            logger.error("record_store_read_failed", path=str(self._path), error=str(e))
            raise RecordStoreException(f"Could not read {self._path}: {e}") from e

    def _read(self) -> Dict[str, object]:
        if not self._path.exists():
            return {}
        text = self._path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        document = json.loads(text)
        if not isinstance(document, dict):
            raise ValueError("record document is not a JSON object")
        return document

    def _write(self, document: Dict[str, object]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        tmp_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        os.replace(tmp_path, self._path)
