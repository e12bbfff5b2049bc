"""Domain Exceptions - Business rule violations and domain errors."""

from .base import TrakrException
from .budget import BudgetNotFoundException, InvalidBudgetException
from .category import CategoryNotFoundException
from .storage import (
    RecordStoreException,
    RemoteStoreException,
    RemoteStoreTimeoutException,
)
from .report import InvalidTimeRangeException
from .streak import InvalidStreakException, StreakNotFoundException
from .transaction import InvalidTransactionException, TransactionNotFoundException
from .wallet import InvalidWalletException, WalletNotFoundException

__all__ = [
    "TrakrException",
    "BudgetNotFoundException",
    "InvalidBudgetException",
    "CategoryNotFoundException",
    "RecordStoreException",
    "RemoteStoreException",
    "RemoteStoreTimeoutException",
    "InvalidTimeRangeException",
    "InvalidStreakException",
    "StreakNotFoundException",
    "InvalidTransactionException",
    "TransactionNotFoundException",
    "InvalidWalletException",
    "WalletNotFoundException",
]
