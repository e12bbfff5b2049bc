"""Data transfer objects for budget operations."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional

from trakr.domain.entities import Budget, BudgetPeriod, category_display_name
from trakr.service.aggregation import BudgetProgress


@dataclass(frozen=True)
class BudgetRequest:
    """
    Input data for creating or editing a budget.

    Without a start_date a new budget covers the current period, starting
    on the first day of this month. Edits ignore the dates.
    """
    category: str
    amount: Decimal
    period: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def validate(self) -> List[str]:
        errors = []

        if not self.category or not self.category.strip():
            errors.append("category is required")

        if self.amount <= 0:
            errors.append("amount must be positive")

        if self.period not in {p.value for p in BudgetPeriod}:
            errors.append("period must be weekly, monthly or yearly")

        if self.end_date is not None and self.start_date is None:
            errors.append("end_date requires start_date")

        return errors


@dataclass(frozen=True)
class BudgetProgressDTO:
    total_spent: Decimal
    percentage: int
    remaining: Decimal
    over_budget: bool


@dataclass(frozen=True)
class BudgetResponse:
    """Response data for a budget with its current progress."""

    id: str
    category: str
    category_name: str
    amount: Decimal
    period: str
    start_date: date
    end_date: Optional[date]
    progress: BudgetProgressDTO

    @classmethod
    def from_entity(cls, budget: Budget, progress: BudgetProgress) -> "BudgetResponse":
        return cls(
            id=budget.id,
            category=budget.category,
            category_name=category_display_name(budget.category),
            amount=budget.amount,
            period=budget.period.value,
            start_date=budget.start_date,
            end_date=budget.end_date,
            progress=BudgetProgressDTO(
                total_spent=progress.total_spent,
                percentage=progress.percentage,
                remaining=progress.remaining,
                over_budget=progress.over_budget,
            ),
        )
