"""Application services (use cases)."""

from .budget_service import BudgetService
from .category_service import CategoryService
from .streak_service import StreakService
from .summary_service import SummaryService
from .transaction_service import TransactionService
from .wallet_service import WalletService

__all__ = [
    "BudgetService",
    "CategoryService",
    "StreakService",
    "SummaryService",
    "TransactionService",
    "WalletService",
]
