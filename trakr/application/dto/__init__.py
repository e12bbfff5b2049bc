"""Data Transfer Objects for application layer."""

from .budget import BudgetProgressDTO, BudgetRequest, BudgetResponse
from .streak import CheckInResponse, StreakRequest, StreakResponse
from .summary import SummaryResponse
from .transaction import CreateTransactionRequest, TransactionQuery, TransactionResponse
from .wallet import WalletListResponse, WalletRequest, WalletResponse

__all__ = [
    "BudgetProgressDTO",
    "BudgetRequest",
    "BudgetResponse",
    "CheckInResponse",
    "StreakRequest",
    "StreakResponse",
    "SummaryResponse",
    "CreateTransactionRequest",
    "TransactionQuery",
    "TransactionResponse",
    "WalletListResponse",
    "WalletRequest",
    "WalletResponse",
]
