"""Record store implementations."""

from trakr.core.config import Settings, settings as app_settings
from trakr.domain.interfaces import RecordStore

from .database_store import DatabaseRecordStore
from .json_store import JsonFileRecordStore
from .remote_store import RemoteRecordStore


def create_record_store(config: Settings | None = None) -> RecordStore:
    """Build the record store selected by storage_backend."""
    config = config or app_settings
    if config.storage_backend == "database":
        return DatabaseRecordStore()
    if config.storage_backend == "remote":
        return RemoteRecordStore(
            base_url=config.remote_store_url,
            auth_token=config.remote_store_auth_token,
            timeout=config.remote_store_timeout,
            max_retries=config.remote_store_max_retries,
        )
    return JsonFileRecordStore(config.storage_path)


__all__ = [
    "DatabaseRecordStore",
    "JsonFileRecordStore",
    "RemoteRecordStore",
    "create_record_store",
]
