"""Summary service - summary statistics and report views."""

from datetime import date
from typing import Callable, Optional

import structlog

from trakr.application.dto import SummaryResponse
from trakr.domain.exceptions import InvalidTimeRangeException
from trakr.domain.interfaces import TransactionRepository
from trakr.service.aggregation import (
    Report,
    ReportSettings,
    apply_filters,
    build_report,
    compute_summary,
    report_settings,
)

logger = structlog.get_logger(__name__)


class SummaryService:
    """Application service for the dashboard summary and the reports view."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        settings: ReportSettings = report_settings,
        today: Callable[[], date] = date.today,
    ):
        self._transaction_repo = transaction_repository
        self._settings = settings
        self._today = today

    async def get_summary(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> SummaryResponse:
        """
        Summarize transactions, optionally limited to [start, end].

        Args:
            start: First day included (open when None)
            end: Last day included (open when None)

        Returns:
            SummaryResponse with totals and the top spending category
        """
        transactions = apply_filters(await self._transaction_repo.get_all(), start=start, end=end)
        stats = compute_summary(transactions)

        logger.debug(
            "summary_computed",
            transaction_count=len(transactions),
            most_spent_category=stats.most_spent_category.name,
        )
        return SummaryResponse.from_stats(stats, len(transactions), start=start, end=end)

    async def get_report(self, time_range: Optional[str] = None) -> Report:
        """
        Build the report views for a named time range ending today.

        Raises:
            InvalidTimeRangeException: If the time range is not configured
        """
        time_range = time_range or self._settings.default_time_range
        if time_range not in self._settings.time_ranges:
            raise InvalidTimeRangeException(time_range, list(self._settings.time_ranges))

        report = build_report(
            await self._transaction_repo.get_all(),
            today=self._today(),
            time_range=time_range,
            settings=self._settings,
        )

        logger.info(
            "report_built",
            time_range=time_range,
            grouping=report.grouping.value,
            buckets=len(report.spending_over_time),
        )
        return report
