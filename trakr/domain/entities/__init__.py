"""Domain Entities - Core business objects."""

from .budget import Budget, BudgetPeriod, period_end
from .category import (
    DEFAULT_CATEGORIES,
    Category,
    category_display_name,
    find_category,
)
from .streak import Streak
from .transaction import Transaction, TransactionType, generate_id
from .wallet import Wallet

__all__ = [
    "Budget",
    "BudgetPeriod",
    "period_end",
    "DEFAULT_CATEGORIES",
    "Category",
    "category_display_name",
    "find_category",
    "Streak",
    "Transaction",
    "TransactionType",
    "generate_id",
    "Wallet",
]
