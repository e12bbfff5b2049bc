"""Data transfer objects for summaries and reports."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Optional

from trakr.service.aggregation import CategoryAmount, SummaryStats


@dataclass(frozen=True)
class SummaryResponse:
    """Summary statistics over the transactions in an optional date range."""

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    category_totals: Dict[str, Decimal]
    most_spent_category: CategoryAmount
    transaction_count: int
    start: Optional[date] = None
    end: Optional[date] = None

    @classmethod
    def from_stats(
        cls,
        stats: SummaryStats,
        transaction_count: int,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> "SummaryResponse":
        return cls(
            total_income=stats.total_income,
            total_expense=stats.total_expense,
            balance=stats.balance,
            category_totals=dict(stats.category_totals),
            most_spent_category=stats.most_spent_category,
            transaction_count=transaction_count,
            start=start,
            end=end,
        )

