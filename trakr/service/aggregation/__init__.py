"""
Aggregation Engine for Trakr
"""

from .settings import ReportSettings, report_settings
from .models import (
    ZERO,
    NO_CATEGORY,
    CategoryAmount,
    SummaryStats,
    BudgetProgress,
    CategorySpending,
    PaymentMethodSpending,
    TimeGrouping,
    TimeBucket,
    ReportStatistics,
    Report,
    CheckInOutcome,
    CheckInResult,
)
from .filters import (
    filter_by_date_range,
    filter_since,
    filter_by_type,
    filter_by_category,
    filter_by_wallet,
    apply_filters,
)
from .summary import sum_category_totals, find_most_spent_category, compute_summary
from .budget_progress import budget_transactions, spent_percentage, compute_budget_progress
from .reports import (
    resolve_time_range,
    spending_by_category,
    spending_by_payment_method,
    choose_grouping,
    spending_over_time,
    report_statistics,
    build_report,
)
from .streaks import check_in

__all__ = [
    # Settings
    "ReportSettings",
    "report_settings",
    # Models
    "ZERO",
    "NO_CATEGORY",
    "CategoryAmount",
    "SummaryStats",
    "BudgetProgress",
    "CategorySpending",
    "PaymentMethodSpending",
    "TimeGrouping",
    "TimeBucket",
    "ReportStatistics",
    "Report",
    "CheckInOutcome",
    "CheckInResult",
    # Filters
    "filter_by_date_range",
    "filter_since",
    "filter_by_type",
    "filter_by_category",
    "filter_by_wallet",
    "apply_filters",
    # Summary
    "sum_category_totals",
    "find_most_spent_category",
    "compute_summary",
    # Budget Progress
    "budget_transactions",
    "spent_percentage",
    "compute_budget_progress",
    # Reports
    "resolve_time_range",
    "spending_by_category",
    "spending_by_payment_method",
    "choose_grouping",
    "spending_over_time",
    "report_statistics",
    "build_report",
    # Streaks
    "check_in",
]
