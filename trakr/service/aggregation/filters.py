"""
Transaction filters.

Each filter is a pure predicate over the transaction sequence and returns
a new list; the input is never mutated. Filters commute, so report views
can narrow by date first and then re-run the aggregation on the subset.
"""

from datetime import date
from typing import Iterable, List, Optional

from trakr.domain.entities import Transaction, TransactionType


def filter_by_date_range(
    transactions: Iterable[Transaction],
    start: date,
    end: date,
) -> List[Transaction]:
    """Transactions whose calendar day falls in [start, end], both inclusive."""
    return [tx for tx in transactions if start <= tx.day <= end]


def filter_since(transactions: Iterable[Transaction], start: date) -> List[Transaction]:
    """Transactions on or after start."""
    return [tx for tx in transactions if tx.day >= start]


def filter_by_type(
    transactions: Iterable[Transaction],
    transaction_type: TransactionType,
) -> List[Transaction]:
    return [tx for tx in transactions if tx.type == transaction_type]


def filter_by_category(
    transactions: Iterable[Transaction],
    category_id: str,
) -> List[Transaction]:
    return [tx for tx in transactions if tx.category == category_id]


def filter_by_wallet(
    transactions: Iterable[Transaction],
    wallet_id: str,
) -> List[Transaction]:
    return [tx for tx in transactions if tx.wallet_id == wallet_id]


def apply_filters(
    transactions: Iterable[Transaction],
    start: Optional[date] = None,
    end: Optional[date] = None,
    transaction_type: Optional[TransactionType] = None,
    category_id: Optional[str] = None,
    wallet_id: Optional[str] = None,
) -> List[Transaction]:
    """
    Apply any combination of the filters above.

    A missing start or end leaves that side of the date range open.

    Args:
        transactions: Transactions to filter
        start: Keep transactions on or after this day
        end: Keep transactions on or before this day
        transaction_type: Keep only income or only expense
        category_id: Keep one category
        wallet_id: Keep one wallet

    Returns:
        A new list in the original order
    """
    result = list(transactions)

    if start is not None and end is not None:
        result = filter_by_date_range(result, start, end)
    elif start is not None:
        result = filter_since(result, start)
    elif end is not None:
        result = [tx for tx in result if tx.day <= end]

    if transaction_type is not None:
        result = filter_by_type(result, transaction_type)
    if category_id is not None:
        result = filter_by_category(result, category_id)
    if wallet_id is not None:
        result = filter_by_wallet(result, wallet_id)

    return result
