"""Transaction-related domain exceptions."""

from .base import TrakrException


class TransactionNotFoundException(TrakrException):
    """Raised when a transaction cannot be found."""

    def __init__(self, transaction_id: str):
        super().__init__(
            message=f"Transaction not found: {transaction_id}",
            code="TRANSACTION_NOT_FOUND",
        )
        self.transaction_id = transaction_id


class InvalidTransactionException(TrakrException):
    """Raised when a transaction violates an entry rule."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_TRANSACTION",
        )
