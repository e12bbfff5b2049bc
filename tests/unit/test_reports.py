"""
Unit Tests for report views.

These tests verify:
1. Time range resolution
2. Spending by category and by payment method
3. Grouping choice and bucket labels for spending over time
4. Report statistics and the assembled report
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from trakr.domain.entities import Transaction, TransactionType
from trakr.service.aggregation import (
    NO_CATEGORY,
    TimeGrouping,
    build_report,
    choose_grouping,
    report_statistics,
    resolve_time_range,
    spending_by_category,
    spending_by_payment_method,
    spending_over_time,
)


def make_transaction(
    amount: str,
    when: datetime,
    category: str = "food",
    txn_type: TransactionType = TransactionType.EXPENSE,
    payment_method: str = "Cash",
) -> Transaction:
    return Transaction(
        amount=Decimal(amount),
        date=when,
        category=category,
        type=txn_type,
        payment_method=payment_method,
    )


class TestResolveTimeRange:

    @pytest.mark.parametrize(
        "time_range,expected",
        [
            ("7days", date(2024, 3, 24)),
            ("30days", date(2024, 3, 1)),
            ("90days", date(2023, 12, 31)),
            ("year", date(2023, 4, 1)),
        ],
    )
    def test_known_ranges(self, time_range, expected):
        assert resolve_time_range(time_range, date(2024, 3, 31)) == expected

    def test_unknown_range_raises(self):
        with pytest.raises(ValueError):
            resolve_time_range("decade", date(2024, 3, 31))


class TestSpendingBreakdowns:

    def test_by_category_sorted_descending_with_display_data(self):
        transactions = [
            make_transaction("20", datetime(2024, 3, 1)),
            make_transaction("90", datetime(2024, 3, 2), category="shopping"),
            make_transaction("15", datetime(2024, 3, 3)),
            make_transaction("500", datetime(2024, 3, 3), "salary", TransactionType.INCOME),
        ]

        rows = spending_by_category(transactions)

        assert [(row.category, row.amount) for row in rows] == [
            ("shopping", Decimal("90")),
            ("food", Decimal("35")),
        ]
        assert rows[1].name == "Food & Dining"
        assert rows[1].color == "#38B2AC"

    def test_unknown_category_uses_fallback_color(self):
        rows = spending_by_category([make_transaction("5", datetime(2024, 3, 1), "pets")])

        assert rows[0].name == "pets"
        assert rows[0].color == "#CBD5E0"

    def test_by_payment_method(self):
        transactions = [
            make_transaction("20", datetime(2024, 3, 1), payment_method="Cash"),
            make_transaction("70", datetime(2024, 3, 2), payment_method="Credit Card"),
            make_transaction("30", datetime(2024, 3, 2), payment_method="Cash"),
            make_transaction("900", datetime(2024, 3, 2), "salary", TransactionType.INCOME,
                             payment_method="Bank Transfer"),
        ]

        rows = spending_by_payment_method(transactions)

        assert [(row.name, row.amount) for row in rows] == [
            ("Credit Card", Decimal("70")),
            ("Cash", Decimal("50")),
        ]


class TestSpendingOverTime:

    @pytest.mark.parametrize(
        "span,expected",
        [
            (0, TimeGrouping.DAY),
            (14, TimeGrouping.DAY),
            (15, TimeGrouping.WEEK),
            (60, TimeGrouping.WEEK),
            (61, TimeGrouping.MONTH),
            (365, TimeGrouping.MONTH),
        ],
    )
    def test_choose_grouping(self, span, expected):
        assert choose_grouping(span) == expected

    def test_daily_buckets_in_chronological_order(self):
        transactions = [
            make_transaction("10", datetime(2024, 3, 30)),
            make_transaction("200", datetime(2024, 3, 28), "salary", TransactionType.INCOME),
            make_transaction("5", datetime(2024, 3, 30, 21, 0)),
        ]

        grouping, buckets = spending_over_time(transactions, today=date(2024, 3, 31))

        assert grouping == TimeGrouping.DAY
        assert [b.label for b in buckets] == ["2024-03-28", "2024-03-30"]
        assert buckets[0].income == Decimal("200")
        assert buckets[0].expense == 0
        assert buckets[1].expense == Decimal("15")

    def test_weekly_buckets_use_week_of_month(self):
        transactions = [
            make_transaction("10", datetime(2024, 3, 10)),
            make_transaction("20", datetime(2024, 3, 8)),
            make_transaction("40", datetime(2024, 3, 2)),
        ]

        grouping, buckets = spending_over_time(transactions, today=date(2024, 3, 31))

        assert grouping == TimeGrouping.WEEK
        assert [b.label for b in buckets] == ["Mar W1", "Mar W2"]
        assert buckets[0].start == date(2024, 3, 1)
        assert buckets[1].start == date(2024, 3, 8)
        assert buckets[1].expense == Decimal("30")

    def test_monthly_buckets(self):
        transactions = [
            make_transaction("10", datetime(2024, 1, 20)),
            make_transaction("20", datetime(2023, 12, 5)),
        ]

        grouping, buckets = spending_over_time(transactions, today=date(2024, 3, 31))

        assert grouping == TimeGrouping.MONTH
        assert [b.label for b in buckets] == ["Dec 2023", "Jan 2024"]

    def test_no_transactions(self):
        grouping, buckets = spending_over_time([], today=date(2024, 3, 31))

        assert grouping == TimeGrouping.WEEK
        assert buckets == []


class TestReportStatistics:

    def test_average_daily_spending_uses_days_with_expenses(self):
        transactions = [
            make_transaction("100", datetime(2024, 3, 1, 9)),
            make_transaction("50", datetime(2024, 3, 1, 18)),
            make_transaction("30", datetime(2024, 3, 4)),
            make_transaction("1000", datetime(2024, 3, 2), "salary", TransactionType.INCOME),
        ]

        stats = report_statistics(transactions)

        assert stats.total_expense == Decimal("180")
        assert stats.total_income == Decimal("1000")
        assert stats.balance == Decimal("820")
        assert stats.average_daily_spending == Decimal("90.00")
        assert stats.most_expensive_category.name == "Food & Dining"

    def test_no_expenses(self):
        stats = report_statistics([])

        assert stats.average_daily_spending == 0
        assert stats.most_expensive_category == NO_CATEGORY


class TestBuildReport:

    def test_only_transactions_in_range_are_reported(self):
        transactions = [
            make_transaction("70", datetime(2024, 3, 20)),
            make_transaction("25", datetime(2024, 3, 25), category="shopping"),
        ]

        report = build_report(transactions, today=date(2024, 3, 31), time_range="7days")

        assert report.start_date == date(2024, 3, 24)
        assert report.end_date == date(2024, 3, 31)
        assert report.statistics.total_expense == Decimal("25")
        assert [row.category for row in report.spending_by_category] == ["shopping"]
        assert report.grouping == TimeGrouping.DAY

    def test_default_range(self):
        report = build_report([], today=date(2024, 3, 31))

        assert report.time_range == "30days"
        assert report.start_date == date(2024, 3, 1)
