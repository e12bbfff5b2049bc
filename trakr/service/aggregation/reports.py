"""
Report Views for the Trakr Aggregation Engine.

Builds the data behind the reports page for a time range:
- Report statistics (totals, average daily spending, top category)
- Spending by category and by payment method
- Income and expense over time, bucketed by day, week or month
"""

import math
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from trakr.domain.entities import Transaction, TransactionType, find_category

from .filters import filter_by_type, filter_since
from .models import (
    ZERO,
    CategorySpending,
    PaymentMethodSpending,
    Report,
    ReportStatistics,
    TimeBucket,
    TimeGrouping,
)
from .settings import ReportSettings, report_settings
from .summary import find_most_spent_category, sum_category_totals


def resolve_time_range(
    time_range: str,
    today: date,
    settings: ReportSettings = report_settings,
) -> date:
    """
    First day covered by a named time range.

    Raises:
        ValueError: If the range name is not configured
    """
    ranges = settings.time_ranges
    if time_range not in ranges:
        raise ValueError(
            f"Unknown time range: {time_range}. Expected one of {sorted(ranges)}"
        )
    return today - timedelta(days=ranges[time_range])


def spending_by_category(
    transactions: Iterable[Transaction],
    settings: ReportSettings = report_settings,
) -> List[CategorySpending]:
    """Expense totals per category, largest first."""
    totals = sum_category_totals(filter_by_type(transactions, TransactionType.EXPENSE))

    rows = []
    for category_id, amount in totals.items():
        category = find_category(category_id)
        rows.append(
            CategorySpending(
                category=category_id,
                name=category.name if category else category_id,
                color=category.color if category else settings.fallback_category_color,
                amount=amount,
            )
        )
    # sorted() is stable, ties keep first-seen order
    return sorted(rows, key=lambda row: row.amount, reverse=True)


def spending_by_payment_method(
    transactions: Iterable[Transaction],
) -> List[PaymentMethodSpending]:
    """Expense totals per payment method, largest first."""
    totals: Dict[str, Decimal] = {}
    for tx in filter_by_type(transactions, TransactionType.EXPENSE):
        totals[tx.payment_method] = totals.get(tx.payment_method, ZERO) + tx.amount

    rows = [PaymentMethodSpending(name=name, amount=amount) for name, amount in totals.items()]
    return sorted(rows, key=lambda row: row.amount, reverse=True)


def choose_grouping(
    span_days: int,
    settings: ReportSettings = report_settings,
) -> TimeGrouping:
    """
    Bucket size for a span of days.

    Short spans are shown per day, medium spans per week of the month,
    and long spans per month.
    """
    if span_days > settings.week_grouping_max_days:
        return TimeGrouping.MONTH
    if span_days > settings.day_grouping_max_days:
        return TimeGrouping.WEEK
    return TimeGrouping.DAY


def _bucket_for(day: date, grouping: TimeGrouping) -> Tuple[str, date]:
    """Label and first day of the bucket containing day."""
    if grouping == TimeGrouping.DAY:
        return day.isoformat(), day
    if grouping == TimeGrouping.WEEK:
        week = math.ceil(day.day / 7)
        return f"{day.strftime('%b')} W{week}", day.replace(day=(week - 1) * 7 + 1)
    return day.strftime("%b %Y"), day.replace(day=1)


def spending_over_time(
    transactions: Iterable[Transaction],
    today: date,
    settings: ReportSettings = report_settings,
) -> Tuple[TimeGrouping, List[TimeBucket]]:
    """
    Income and expense totals per time bucket, in chronological order.

    The bucket size follows the span from the earliest transaction to
    today; with no transactions the default report range is assumed.

    Args:
        transactions: Transactions already narrowed to the report range
        today: The report's end day
        settings: Report settings (uses defaults if not provided)

    Returns:
        Tuple of (grouping, buckets)
    """
    transactions = list(transactions)
    if transactions:
        span_days = (today - min(tx.day for tx in transactions)).days
    else:
        span_days = settings.time_ranges.get(settings.default_time_range, 30)
    grouping = choose_grouping(span_days, settings)

    buckets: Dict[date, TimeBucket] = {}
    for tx in transactions:
        label, start = _bucket_for(tx.day, grouping)
        bucket = buckets.get(start, TimeBucket(label=label, start=start))
        if tx.type == TransactionType.EXPENSE:
            bucket = TimeBucket(label, start, bucket.income, bucket.expense + tx.amount)
        else:
            bucket = TimeBucket(label, start, bucket.income + tx.amount, bucket.expense)
        buckets[start] = bucket

    return grouping, [buckets[start] for start in sorted(buckets)]


def report_statistics(transactions: Iterable[Transaction]) -> ReportStatistics:
    """
    Headline statistics for a report.

    Average daily spending divides the expense total by the number of
    distinct days that had an expense (0 when there were none).
    """
    transactions = list(transactions)
    expenses = filter_by_type(transactions, TransactionType.EXPENSE)

    total_income = sum(
        (tx.amount for tx in filter_by_type(transactions, TransactionType.INCOME)),
        ZERO,
    )
    total_expense = sum((tx.amount for tx in expenses), ZERO)

    expense_days = {tx.day for tx in expenses}
    average = total_expense / len(expense_days) if expense_days else ZERO

    return ReportStatistics(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
        average_daily_spending=average.quantize(Decimal("0.01")),
        most_expensive_category=find_most_spent_category(sum_category_totals(expenses)),
    )


def build_report(
    transactions: Iterable[Transaction],
    today: date,
    time_range: Optional[str] = None,
    settings: ReportSettings = report_settings,
) -> Report:
    """
    Build every report view for a time range ending today.

    Raises:
        ValueError: If the time range name is not configured
    """
    time_range = time_range or settings.default_time_range
    start = resolve_time_range(time_range, today, settings)
    in_range = filter_since(transactions, start)
    grouping, buckets = spending_over_time(in_range, today, settings)

    return Report(
        time_range=time_range,
        start_date=start,
        end_date=today,
        statistics=report_statistics(in_range),
        spending_by_category=spending_by_category(in_range, settings),
        spending_by_payment_method=spending_by_payment_method(in_range),
        grouping=grouping,
        spending_over_time=buckets,
    )
