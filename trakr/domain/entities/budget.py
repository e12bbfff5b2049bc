"""Budget entity representing a spending cap for one category."""

import calendar
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from decimal import Decimal
from enum import Enum
from typing import Optional

from trakr.domain.exceptions import InvalidBudgetException

from .transaction import generate_id


class BudgetPeriod(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


def period_end(start: date, period: BudgetPeriod) -> date:
    """
    Last day (inclusive) of a budget period beginning on start.

    Weekly periods cover seven days, monthly periods end on the last day
    of the start month, yearly periods end the day before the anniversary.
    """
    if period == BudgetPeriod.WEEKLY:
        return start + timedelta(days=6)
    if period == BudgetPeriod.MONTHLY:
        _, last_day = calendar.monthrange(start.year, start.month)
        return start.replace(day=last_day)
    try:
        anniversary = start.replace(year=start.year + 1)
    except ValueError:
        # Feb 29 start
        anniversary = start.replace(year=start.year + 1, day=28) + timedelta(days=1)
    return anniversary - timedelta(days=1)


@dataclass(frozen=True)
class Budget:
    """
    A spending cap for a single category over a date range.

    Progress is computed over expenses dated within
    [start_date, end_date]; an absent end_date leaves the range open.
    """

    category: str
    amount: Decimal
    period: BudgetPeriod
    start_date: date
    end_date: Optional[date] = None
    id: str = field(default_factory=generate_id)

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise InvalidBudgetException(
                f"Budget amount must be positive, got {self.amount}"
            )
        if self.end_date is not None and self.end_date < self.start_date:
            raise InvalidBudgetException("Budget end_date is before start_date")

    @classmethod
    def for_current_period(
        cls,
        category: str,
        amount: Decimal,
        period: BudgetPeriod,
        today: date,
    ) -> "Budget":
        """Create a budget starting on the first day of today's month."""
        start = today.replace(day=1)
        return cls(
            category=category,
            amount=amount,
            period=period,
            start_date=start,
            end_date=period_end(start, period),
        )

    def edited(
        self,
        category: str,
        amount: Decimal,
        period: BudgetPeriod,
    ) -> "Budget":
        """
        Return a replacement budget with new category, amount and period.

        The start date is kept. The end date is recomputed only when the
        period changes.
        """
        end_date = self.end_date
        if period != self.period:
            end_date = period_end(self.start_date, period)
        return replace(
            self,
            category=category,
            amount=amount,
            period=period,
            end_date=end_date,
        )
