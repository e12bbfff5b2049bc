"""Budget service - budget CRUD with spending progress."""

import asyncio
from datetime import date
from typing import Callable, List

import structlog

from trakr.application.dto import BudgetRequest, BudgetResponse
from trakr.core.metrics import record_budget_evaluation
from trakr.domain.entities import Budget, BudgetPeriod, period_end
from trakr.domain.exceptions import BudgetNotFoundException, InvalidBudgetException
from trakr.domain.interfaces import BudgetRepository, TransactionRepository
from trakr.service.aggregation import ReportSettings, compute_budget_progress, report_settings

logger = structlog.get_logger(__name__)


class BudgetService:
    """Application service for budget use cases."""

    def __init__(
        self,
        budget_repository: BudgetRepository,
        transaction_repository: TransactionRepository,
        settings: ReportSettings = report_settings,
        today: Callable[[], date] = date.today,
        lock: asyncio.Lock | None = None,
    ):
        self._budget_repo = budget_repository
        self._transaction_repo = transaction_repository
        self._settings = settings
        self._today = today
        self._lock = lock if lock is not None else asyncio.Lock()

    async def list_budgets(self) -> List[BudgetResponse]:
        """List every budget with its progress against all transactions."""
        budgets = await self._budget_repo.get_all()
        transactions = await self._transaction_repo.get_all()
        return [self._with_progress(budget, transactions) for budget in budgets]

    async def get_budget(self, budget_id: str) -> BudgetResponse:
        """
        Retrieve one budget with its progress.

        Raises:
            BudgetNotFoundException: If budget not found
        """
        budget = await self._budget_repo.get_by_id(budget_id)
        if budget is None:
            raise BudgetNotFoundException(budget_id)
        return self._with_progress(budget, await self._transaction_repo.get_all())

    async def create_budget(self, request: BudgetRequest) -> BudgetResponse:
        """
        Create a budget.

        Without explicit dates the budget covers the current period from
        the first of this month. An explicit start_date without end_date
        runs for one period.

        Raises:
            InvalidBudgetException: If request validation fails
        """
        self._validate(request)
        period = BudgetPeriod(request.period)
        category = request.category.strip()

        if request.start_date is None:
            budget = Budget.for_current_period(category, request.amount, period, self._today())
        else:
            budget = Budget(
                category=category,
                amount=request.amount,
                period=period,
                start_date=request.start_date,
                end_date=request.end_date or period_end(request.start_date, period),
            )

        async with self._lock:
            budgets = await self._budget_repo.get_all()
            await self._budget_repo.save_all([*budgets, budget])

        logger.info(
            "budget_created",
            budget_id=budget.id,
            category=budget.category,
            period=budget.period.value,
        )
        return self._with_progress(budget, await self._transaction_repo.get_all())

    async def update_budget(self, budget_id: str, request: BudgetRequest) -> BudgetResponse:
        """
        Replace a budget's category, amount and period.

        Raises:
            BudgetNotFoundException: If budget not found
            InvalidBudgetException: If request validation fails
        """
        self._validate(request)
        async with self._lock:
            budgets = await self._budget_repo.get_all()
            current = next((b for b in budgets if b.id == budget_id), None)
            if current is None:
                raise BudgetNotFoundException(budget_id)

            updated = current.edited(
                category=request.category.strip(),
                amount=request.amount,
                period=BudgetPeriod(request.period),
            )
            await self._budget_repo.save_all([updated if b.id == budget_id else b for b in budgets])

        logger.info("budget_updated", budget_id=budget_id, period=updated.period.value)
        return self._with_progress(updated, await self._transaction_repo.get_all())

    async def delete_budget(self, budget_id: str) -> None:
        """
        Delete a budget.

        Raises:
            BudgetNotFoundException: If budget not found
        """
        async with self._lock:
            budgets = await self._budget_repo.get_all()
            remaining = [b for b in budgets if b.id != budget_id]
            if len(remaining) == len(budgets):
                raise BudgetNotFoundException(budget_id)
            await self._budget_repo.save_all(remaining)

        logger.info("budget_deleted", budget_id=budget_id)

    def _with_progress(self, budget: Budget, transactions) -> BudgetResponse:
        progress = compute_budget_progress(budget, transactions, self._settings)
        record_budget_evaluation(progress.over_budget)
        if progress.over_budget:
            logger.info(
                "budget_exceeded",
                budget_id=budget.id,
                category=budget.category,
                total_spent=str(progress.total_spent),
            )
        return BudgetResponse.from_entity(budget, progress)

    @staticmethod
    def _validate(request: BudgetRequest) -> None:
        errors = request.validate()
        if errors:
            raise InvalidBudgetException("; ".join(errors))
