"""Record store domain exceptions."""

from .base import TrakrException


class RecordStoreException(TrakrException):
    """Raised when the record store cannot read or write."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(
            message=message,
            code="RECORD_STORE_ERROR",
        )
        self.key = key


class RemoteStoreException(RecordStoreException):
    """Raised when the remote record store returns an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message=message)
        self.code = "REMOTE_STORE_ERROR"
        self.status_code = status_code


class RemoteStoreTimeoutException(RemoteStoreException):
    """Raised when the remote record store times out."""

    def __init__(self):
        super().__init__(
            message="Remote record store request timed out",
            status_code=None,
        )
        self.code = "REMOTE_STORE_TIMEOUT"
