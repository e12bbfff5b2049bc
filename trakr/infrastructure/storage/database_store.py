"""SQL database implementation of RecordStore."""

from datetime import datetime, timezone
from typing import Dict, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError

from trakr.core.metrics import track_store_latency
from trakr.domain.exceptions import RecordStoreException
from trakr.domain.interfaces import RecordStore
from trakr.infrastructure.database import DatabaseSessionManager, RecordModel, db_manager

logger = structlog.get_logger(__name__)


class DatabaseRecordStore(RecordStore):
    """
    Record store backed by a key/value table.

    Every call runs in its own session; set_many writes all keys in one
    database transaction, so a failure rolls every key back.
    """

    backend = "database"

    def __init__(self, session_manager: DatabaseSessionManager | None = None):
        self._sessions = session_manager or db_manager

    async def get(self, key: str) -> Optional[str]:
        try:
            with track_store_latency(self.backend, "get"):
                async with self._sessions.session() as session:
                    model = await session.get(RecordModel, key)
                    return model.value if model is not None else None
        except SQLAlchemyError as e:
            logger.error("record_store_read_failed", key=key, error=str(e))
            raise RecordStoreException(f"Could not read {key}", key=key) from e

    async def set(self, key: str, value: str) -> None:
        await self.set_many({key: value})

    async def set_many(self, values: Dict[str, str]) -> None:
        now = datetime.now(timezone.utc)
        try:
            with track_store_latency(self.backend, "set"):
                async with self._sessions.session() as session:
                    for key, value in values.items():
                        await session.merge(RecordModel(key=key, value=value, updated_at=now))
        except SQLAlchemyError as e:
            logger.error("record_store_write_failed", keys=sorted(values), error=str(e))
            raise RecordStoreException("Could not write records") from e

        logger.debug("record_store_written", keys=sorted(values))
