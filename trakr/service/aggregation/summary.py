"""
Summary Statistics for the Trakr Aggregation Engine.

Computes income/expense totals, the per-category expense breakdown and
the top spending category from a transaction set. The input order has no
effect on the totals; it only breaks ties for the top category.
"""

from decimal import Decimal
from typing import Dict, Iterable

from trakr.domain.entities import Transaction, TransactionType, category_display_name

from .models import NO_CATEGORY, ZERO, CategoryAmount, SummaryStats


def sum_category_totals(transactions: Iterable[Transaction]) -> Dict[str, Decimal]:
    """Sum expense amounts per category id, in first-seen order."""
    totals: Dict[str, Decimal] = {}
    for tx in transactions:
        if tx.type == TransactionType.INCOME:
            continue
        totals[tx.category] = totals.get(tx.category, ZERO) + tx.amount
    return totals


def find_most_spent_category(category_totals: Dict[str, Decimal]) -> CategoryAmount:
    """
    Pick the category with the largest expense total.

    Algorithm:
        Scan the totals in iteration order, keeping the running maximum.
        The comparison is strict, so the first category reaching the
        maximum wins ties and a zero total never replaces "None".

    Args:
        category_totals: Category id -> summed expense

    Returns:
        Display name and amount of the top category, or {"None", 0}
    """
    best = NO_CATEGORY
    for category_id, amount in category_totals.items():
        if amount > best.amount:
            best = CategoryAmount(name=category_display_name(category_id), amount=amount)
    return best


def compute_summary(transactions: Iterable[Transaction]) -> SummaryStats:
    """
    Compute summary statistics over a transaction set.

    Algorithm:
        1. Income amounts go to total_income
        2. Every other transaction goes to total_expense and to its
           category bucket (created at zero on first sight)
        3. balance = total_income - total_expense
        4. The top category is the strict maximum over the buckets

    Amounts are summed as given; validation is the entry point's job.
    Date filtering is the caller's job too.

    Args:
        transactions: Transactions to summarize (may be empty)

    Returns:
        SummaryStats. No side effects.
    """
    transactions = list(transactions)
    total_income = sum(
        (tx.amount for tx in transactions if tx.type == TransactionType.INCOME),
        ZERO,
    )
    category_totals = sum_category_totals(transactions)
    total_expense = sum(category_totals.values(), ZERO)

    return SummaryStats(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
        category_totals=category_totals,
        most_spent_category=find_most_spent_category(category_totals),
    )
