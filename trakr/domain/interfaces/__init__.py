"""
Domain Interfaces (Ports)
"""

from .repositories import (
    BudgetRepository,
    LedgerRepository,
    StreakRepository,
    TransactionRepository,
    WalletRepository,
)
from .storage import RecordStore

__all__ = [
    "BudgetRepository",
    "LedgerRepository",
    "StreakRepository",
    "TransactionRepository",
    "WalletRepository",
    "RecordStore",
]
