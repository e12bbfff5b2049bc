"""
Budget Progress for the Trakr Aggregation Engine.

Each budget is evaluated on its own pass over the transactions, so the
cost is O(transactions x budgets). That is fine at personal-ledger scale.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List

from trakr.domain.entities import Budget, Transaction, TransactionType

from .models import ZERO, BudgetProgress
from .settings import ReportSettings, report_settings


def budget_transactions(
    budget: Budget,
    transactions: Iterable[Transaction],
) -> List[Transaction]:
    """
    Expenses that count against a budget.

    A transaction counts when its category matches, it is an expense, and
    its day is on or after start_date and, if the budget has an end_date,
    on or before it.
    """
    return [
        tx
        for tx in transactions
        if tx.category == budget.category
        and tx.type == TransactionType.EXPENSE
        and tx.day >= budget.start_date
        and (budget.end_date is None or tx.day <= budget.end_date)
    ]


def spent_percentage(
    total_spent: Decimal,
    budget_amount: Decimal,
    settings: ReportSettings = report_settings,
) -> int:
    """
    Share of the budget spent, rounded half-up and clamped to the cap.

    Budget amounts are always positive (Budget rejects anything else), so
    the division is safe.
    """
    raw = (total_spent / budget_amount * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return min(int(raw), settings.percentage_cap)


def compute_budget_progress(
    budget: Budget,
    transactions: Iterable[Transaction],
    settings: ReportSettings = report_settings,
) -> BudgetProgress:
    """
    Compute spending progress for one budget.

    Algorithm:
        1. Keep matching expenses within the budget dates
        2. total_spent = sum of their amounts
        3. percentage = min(round(total_spent / amount * 100), cap)
        4. remaining = max(amount - total_spent, 0)
        5. over_budget = total_spent > amount

    The percentage stays at the cap once a budget is exceeded; the
    over_budget flag carries the overage.

    Args:
        budget: Budget to evaluate
        transactions: Full transaction set
        settings: Report settings (uses defaults if not provided)

    Returns:
        BudgetProgress. No side effects.
    """
    total_spent = sum(
        (tx.amount for tx in budget_transactions(budget, transactions)),
        ZERO,
    )

    return BudgetProgress(
        total_spent=total_spent,
        percentage=spent_percentage(total_spent, budget.amount, settings),
        remaining=max(budget.amount - total_spent, ZERO),
        over_budget=total_spent > budget.amount,
    )
