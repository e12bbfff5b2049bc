"""
Data models for the aggregation engine.

These are derived values: recomputed from the transaction set on every
read and never persisted.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional

from trakr.domain.entities import Streak


ZERO = Decimal(0)


@dataclass(frozen=True)
class CategoryAmount:
    """A category display name paired with an amount."""
    name: str
    amount: Decimal


NO_CATEGORY = CategoryAmount(name="None", amount=ZERO)


@dataclass(frozen=True)
class SummaryStats:
    """
    Totals over a set of transactions.

    Attributes:
        total_income: Sum of income amounts
        total_expense: Sum of expense amounts
        balance: total_income - total_expense
        category_totals: Category id -> summed expense amount (income excluded)
        most_spent_category: Category with the largest expense total,
            {"None", 0} when there is no positive expense
    """
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    category_totals: Dict[str, Decimal]
    most_spent_category: CategoryAmount


@dataclass(frozen=True)
class BudgetProgress:
    """
    Spending against one budget.

    Attributes:
        total_spent: Sum of matching expenses within the budget dates
        percentage: Rounded share of the budget spent, clamped for display
        remaining: Budget left, never negative
        over_budget: True when total_spent exceeds the budget amount
    """
    total_spent: Decimal
    percentage: int
    remaining: Decimal
    over_budget: bool


@dataclass(frozen=True)
class CategorySpending:
    """Expense total for one category, ready for a chart."""
    category: str
    name: str
    color: str
    amount: Decimal


@dataclass(frozen=True)
class PaymentMethodSpending:
    name: str
    amount: Decimal


class TimeGrouping(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class TimeBucket:
    """Income and expense totals for one day, week or month."""
    label: str
    start: date
    income: Decimal = ZERO
    expense: Decimal = ZERO


@dataclass(frozen=True)
class ReportStatistics:
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    average_daily_spending: Decimal
    most_expensive_category: CategoryAmount


@dataclass(frozen=True)
class Report:
    """Everything the reports view needs for one time range."""
    time_range: str
    start_date: date
    end_date: date
    statistics: ReportStatistics
    spending_by_category: List[CategorySpending] = field(default_factory=list)
    spending_by_payment_method: List[PaymentMethodSpending] = field(default_factory=list)
    grouping: TimeGrouping = TimeGrouping.DAY
    spending_over_time: List[TimeBucket] = field(default_factory=list)


class CheckInOutcome(str, Enum):
    """What a streak check-in did."""
    ALREADY_CHECKED_IN = "already_checked_in"
    CONTINUED = "continued"
    RESET = "reset"


@dataclass(frozen=True)
class CheckInResult:
    """
    Result of a streak check-in.

    Attributes:
        streak: The streak after the check-in (unchanged when already checked in)
        outcome: Whether the streak continued, reset or was already checked
        target_reached: True on the check-in that lands exactly on target_days
        gap_days: Whole days since the previous check-in (None when unchanged)
    """
    streak: Streak
    outcome: CheckInOutcome
    target_reached: bool = False
    gap_days: Optional[int] = None
