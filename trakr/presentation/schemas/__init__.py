"""Pydantic schemas for API request/response validation."""

from .budget import BudgetProgressSchema, BudgetRequestSchema, BudgetSchema
from .category import CategorySchema
from .error import ErrorResponseSchema
from .streak import CheckInSchema, StreakCreateSchema, StreakSchema
from .summary import (
    CategoryAmountSchema,
    CategorySpendingSchema,
    PaymentMethodSpendingSchema,
    ReportSchema,
    ReportStatisticsSchema,
    SummarySchema,
    TimeBucketSchema,
)
from .transaction import TransactionCreateSchema, TransactionSchema
from .wallet import WalletListSchema, WalletRequestSchema, WalletSchema

__all__ = [
    "BudgetProgressSchema",
    "BudgetRequestSchema",
    "BudgetSchema",
    "CategorySchema",
    "ErrorResponseSchema",
    "CheckInSchema",
    "StreakCreateSchema",
    "StreakSchema",
    "CategoryAmountSchema",
    "CategorySpendingSchema",
    "PaymentMethodSpendingSchema",
    "ReportSchema",
    "ReportStatisticsSchema",
    "SummarySchema",
    "TimeBucketSchema",
    "TransactionCreateSchema",
    "TransactionSchema",
    "WalletListSchema",
    "WalletRequestSchema",
    "WalletSchema",
]
