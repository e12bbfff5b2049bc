"""Repository implementations."""

from .base import RecordCollection
from .store_repositories import (
    BUDGETS_KEY,
    STREAKS_KEY,
    TRANSACTIONS_KEY,
    WALLETS_KEY,
    StoreBudgetRepository,
    StoreLedgerRepository,
    StoreStreakRepository,
    StoreTransactionRepository,
    StoreWalletRepository,
)

__all__ = [
    "RecordCollection",
    "BUDGETS_KEY",
    "STREAKS_KEY",
    "TRANSACTIONS_KEY",
    "WALLETS_KEY",
    "StoreBudgetRepository",
    "StoreLedgerRepository",
    "StoreStreakRepository",
    "StoreTransactionRepository",
    "StoreWalletRepository",
]
