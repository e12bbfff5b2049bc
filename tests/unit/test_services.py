"""
Unit Tests for the application services.

These tests verify:
1. Transactions move wallet balances and commit atomically
2. Wallet default rules
3. Budget creation, editing and validation
4. Streak check-ins through the service
5. Summary and report entry points
"""

import json
from datetime import date, datetime
from decimal import Decimal

import pytest

from trakr.application.dto import (
    BudgetRequest,
    CreateTransactionRequest,
    StreakRequest,
    TransactionQuery,
    WalletRequest,
)
from trakr.application.services import (
    BudgetService,
    CategoryService,
    StreakService,
    SummaryService,
    TransactionService,
    WalletService,
)
from trakr.domain.exceptions import (
    BudgetNotFoundException,
    CategoryNotFoundException,
    InvalidBudgetException,
    InvalidStreakException,
    InvalidTimeRangeException,
    InvalidTransactionException,
    RecordStoreException,
    StreakNotFoundException,
    TransactionNotFoundException,
    WalletNotFoundException,
)
from trakr.infrastructure.repositories import (
    StoreBudgetRepository,
    StoreLedgerRepository,
    StoreStreakRepository,
    StoreTransactionRepository,
    StoreWalletRepository,
)



def transaction_service(store) -> TransactionService:
    return TransactionService(
        transaction_repository=StoreTransactionRepository(store, seed_sample_data=False),
        wallet_repository=StoreWalletRepository(store),
        ledger_repository=StoreLedgerRepository(store),
    )


def expense(amount: str, /, **overrides) -> CreateTransactionRequest:
    fields = dict(
        amount=Decimal(amount),
        date=datetime(2024, 3, 10, 9, 0),
        category="food",
        type="expense",
        wallet_id="cash",
    )
    fields.update(overrides)
    return CreateTransactionRequest(**fields)


async def balance_of(store, wallet_id: str) -> Decimal:
    wallet = await StoreWalletRepository(store).get_by_id(wallet_id)
    return wallet.balance


class TestTransactionService:

    @pytest.mark.asyncio
    async def test_add_and_delete_moves_wallet_balance(self, store):
        service = transaction_service(store)

        created = await service.add_transaction(expense("50"))
        assert await balance_of(store, "cash") == Decimal("450")

        await service.delete_transaction(created.id)
        assert await balance_of(store, "cash") == Decimal("500")
        assert await service.list_transactions() == []

    @pytest.mark.asyncio
    async def test_income_raises_balance(self, store):
        service = transaction_service(store)

        await service.add_transaction(expense("1200", type="income", category="salary", wallet_id="bank"))

        assert await balance_of(store, "bank") == Decimal("3700")

    @pytest.mark.asyncio
    async def test_unknown_wallet_is_kept_without_moving_balances(self, store):
        service = transaction_service(store)

        created = await service.add_transaction(expense("50", wallet_id="nowhere"))

        assert created.wallet_id == "nowhere"
        assert await balance_of(store, "cash") == Decimal("500")
        assert await balance_of(store, "bank") == Decimal("2500")

    @pytest.mark.asyncio
    async def test_new_transactions_listed_first(self, store):
        service = transaction_service(store)

        first = await service.add_transaction(expense("10"))
        second = await service.add_transaction(expense("20"))

        listed = await service.list_transactions()
        assert [tx.id for tx in listed] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_list_filters(self, store):
        service = transaction_service(store)
        await service.add_transaction(expense("10"))
        await service.add_transaction(expense("20", category="shopping", date=datetime(2024, 2, 1)))
        await service.add_transaction(expense("30", type="income", category="salary"))

        by_category = await service.list_transactions(TransactionQuery(category="shopping"))
        by_type = await service.list_transactions(TransactionQuery(type="income"))
        by_date = await service.list_transactions(TransactionQuery(start=date(2024, 3, 1)))

        assert [tx.amount for tx in by_category] == [Decimal("20")]
        assert [tx.amount for tx in by_type] == [Decimal("30")]
        assert sorted(tx.amount for tx in by_date) == [Decimal("10"), Decimal("30")]

    @pytest.mark.asyncio
    async def test_unknown_type_filter_rejected(self, store):
        with pytest.raises(InvalidTransactionException):
            await transaction_service(store).list_transactions(TransactionQuery(type="refund"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "request_fields",
        [
            {"amount": Decimal("0")},
            {"amount": Decimal("-5")},
            {"category": "  "},
            {"type": "refund"},
        ],
    )
    async def test_invalid_request_rejected(self, store, request_fields):
        service = transaction_service(store)

        with pytest.raises(InvalidTransactionException):
            await service.add_transaction(expense("10", **request_fields))

        assert "transactions" not in store.data

    @pytest.mark.asyncio
    async def test_failed_commit_leaves_store_unchanged(self, store):
        service = transaction_service(store)
        await service.add_transaction(expense("50"))
        before = dict(store.data)

        store.fail_writes = True
        with pytest.raises(RecordStoreException):
            await service.add_transaction(expense("25"))

        assert store.data == before
        assert await balance_of(store, "cash") == Decimal("450")

    @pytest.mark.asyncio
    async def test_delete_unknown_transaction(self, store):
        with pytest.raises(TransactionNotFoundException):
            await transaction_service(store).delete_transaction("missing")

    @pytest.mark.asyncio
    async def test_get_transaction(self, store):
        service = transaction_service(store)
        created = await service.add_transaction(expense("50"))

        fetched = await service.get_transaction(created.id)

        assert fetched.category_name == "Food & Dining"
        with pytest.raises(TransactionNotFoundException):
            await service.get_transaction("missing")


class TestWalletService:

    @pytest.mark.asyncio
    async def test_default_wallets(self, store):
        listing = await WalletService(StoreWalletRepository(store)).list_wallets()

        assert listing.total_balance == Decimal("13000")
        assert [w.is_default for w in listing.wallets] == [True, False, False]

    @pytest.mark.asyncio
    async def test_first_wallet_becomes_default(self, store):
        store.data.update({"wallets": "[]"})
        service = WalletService(StoreWalletRepository(store))

        first = await service.create_wallet(WalletRequest(name="Travel", balance=Decimal("100")))
        second = await service.create_wallet(WalletRequest(name="Gifts"))

        assert first.is_default is True
        assert second.is_default is False

    @pytest.mark.asyncio
    async def test_set_default_clears_others(self, store):
        service = WalletService(StoreWalletRepository(store))

        await service.set_default_wallet("savings")

        listing = await service.list_wallets()
        assert [w.id for w in listing.wallets if w.is_default] == ["savings"]

    @pytest.mark.asyncio
    async def test_deleting_default_promotes_first_remaining(self, store):
        service = WalletService(StoreWalletRepository(store))

        await service.delete_wallet("cash")

        listing = await service.list_wallets()
        assert [w.id for w in listing.wallets] == ["bank", "savings"]
        assert listing.wallets[0].is_default is True

    @pytest.mark.asyncio
    async def test_update_keeps_default_flag(self, store):
        service = WalletService(StoreWalletRepository(store))

        updated = await service.update_wallet(
            "cash", WalletRequest(name="Pocket", balance=Decimal("20"), currency="EUR")
        )

        assert updated.name == "Pocket"
        assert updated.balance == Decimal("20")
        assert updated.is_default is True

    @pytest.mark.asyncio
    async def test_unknown_wallet(self, store):
        service = WalletService(StoreWalletRepository(store))

        with pytest.raises(WalletNotFoundException):
            await service.get_wallet("missing")
        with pytest.raises(WalletNotFoundException):
            await service.delete_wallet("missing")


class TestBudgetService:

    def service(self, store, today) -> BudgetService:
        return BudgetService(
            budget_repository=StoreBudgetRepository(store, seed_sample_data=False),
            transaction_repository=StoreTransactionRepository(store, seed_sample_data=False),
            today=today,
        )

    @pytest.mark.asyncio
    async def test_create_defaults_to_current_period(self, store, today):
        budget = await self.service(store, today).create_budget(
            BudgetRequest(category="food", amount=Decimal("300"), period="monthly")
        )

        assert budget.start_date == date(2024, 3, 1)
        assert budget.end_date == date(2024, 3, 31)
        assert budget.category_name == "Food & Dining"
        assert budget.progress.percentage == 0

    @pytest.mark.asyncio
    async def test_explicit_start_runs_one_period(self, store, today):
        budget = await self.service(store, today).create_budget(
            BudgetRequest(
                category="food",
                amount=Decimal("100"),
                period="weekly",
                start_date=date(2024, 3, 4),
            )
        )

        assert budget.end_date == date(2024, 3, 10)

    @pytest.mark.asyncio
    async def test_progress_counts_matching_expenses(self, store, today):
        await transaction_service(store).add_transaction(expense("250"))
        await transaction_service(store).add_transaction(expense("100", category="shopping"))

        budget = await self.service(store, today).create_budget(
            BudgetRequest(category="food", amount=Decimal("200"), period="monthly")
        )

        assert budget.progress.total_spent == Decimal("250")
        assert budget.progress.percentage == 100
        assert budget.progress.remaining == Decimal("0")
        assert budget.progress.over_budget is True

    @pytest.mark.asyncio
    async def test_edit_recomputes_end_only_on_period_change(self, store, today):
        service = self.service(store, today)
        created = await service.create_budget(
            BudgetRequest(category="food", amount=Decimal("300"), period="monthly")
        )

        same_period = await service.update_budget(
            created.id, BudgetRequest(category="food", amount=Decimal("400"), period="monthly")
        )
        new_period = await service.update_budget(
            created.id, BudgetRequest(category="food", amount=Decimal("400"), period="weekly")
        )

        assert same_period.amount == Decimal("400")
        assert same_period.end_date == date(2024, 3, 31)
        assert new_period.start_date == date(2024, 3, 1)
        assert new_period.end_date == date(2024, 3, 7)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "request_",
        [
            BudgetRequest(category="food", amount=Decimal("0"), period="monthly"),
            BudgetRequest(category="", amount=Decimal("10"), period="monthly"),
            BudgetRequest(category="food", amount=Decimal("10"), period="daily"),
            BudgetRequest(category="food", amount=Decimal("10"), period="monthly",
                          end_date=date(2024, 3, 31)),
            BudgetRequest(category="food", amount=Decimal("10"), period="monthly",
                          start_date=date(2024, 3, 31), end_date=date(2024, 3, 1)),
        ],
    )
    async def test_invalid_budget_rejected(self, store, today, request_):
        with pytest.raises(InvalidBudgetException):
            await self.service(store, today).create_budget(request_)

    @pytest.mark.asyncio
    async def test_delete(self, store, today):
        service = self.service(store, today)
        created = await service.create_budget(
            BudgetRequest(category="food", amount=Decimal("300"), period="monthly")
        )

        await service.delete_budget(created.id)

        assert await service.list_budgets() == []
        with pytest.raises(BudgetNotFoundException):
            await service.delete_budget(created.id)


class TestStreakService:

    @pytest.mark.asyncio
    async def test_create_and_check_in(self, store):
        days = iter([date(2024, 3, 1), date(2024, 3, 2), date(2024, 3, 2), date(2024, 3, 5)])
        service = StreakService(
            StoreStreakRepository(store, seed_sample_data=False),
            today=lambda: next(days),
        )

        streak = await service.create_streak(StreakRequest(name="No takeout", target_days=2))
        continued = await service.check_in(streak.id)
        repeated = await service.check_in(streak.id)
        reset = await service.check_in(streak.id)

        assert continued.outcome == "continued"
        assert continued.target_reached is True
        assert repeated.outcome == "already_checked_in"
        assert repeated.streak.current_streak == 2
        assert reset.outcome == "reset"
        assert reset.gap_days == 3
        assert reset.streak.current_streak == 1
        assert reset.streak.history == [date(2024, 3, 1), date(2024, 3, 2), date(2024, 3, 5)]

    @pytest.mark.asyncio
    async def test_same_day_check_in_is_not_written(self, store, today):
        service = StreakService(StoreStreakRepository(store, seed_sample_data=False), today=today)
        streak = await service.create_streak(StreakRequest(name="Walk", target_days=5))
        writes = store.write_count

        await service.check_in(streak.id)

        assert store.write_count == writes

    @pytest.mark.asyncio
    async def test_invalid_and_unknown(self, store, today):
        service = StreakService(StoreStreakRepository(store, seed_sample_data=False), today=today)

        with pytest.raises(InvalidStreakException):
            await service.create_streak(StreakRequest(name="Walk", target_days=0))
        with pytest.raises(StreakNotFoundException):
            await service.check_in("missing")
        with pytest.raises(StreakNotFoundException):
            await service.delete_streak("missing")


class TestSummaryService:

    @pytest.mark.asyncio
    async def test_summary_with_date_range(self, store, today):
        transactions = transaction_service(store)
        await transactions.add_transaction(expense("40", date=datetime(2024, 3, 10)))
        await transactions.add_transaction(expense("60", category="shopping", date=datetime(2024, 3, 11)))
        await transactions.add_transaction(
            expense("500", type="income", category="salary", date=datetime(2024, 2, 1))
        )
        service = SummaryService(StoreTransactionRepository(store, seed_sample_data=False), today=today)

        everything = await service.get_summary()
        march = await service.get_summary(start=date(2024, 3, 1), end=date(2024, 3, 31))

        assert everything.balance == Decimal("400")
        assert everything.transaction_count == 3
        assert march.total_income == Decimal("0")
        assert march.total_expense == Decimal("100")
        assert march.most_spent_category.name == "Shopping"
        assert march.start == date(2024, 3, 1)

    @pytest.mark.asyncio
    async def test_report_for_named_range(self, store, today):
        await transaction_service(store).add_transaction(expense("40", date=datetime(2024, 3, 10)))
        service = SummaryService(StoreTransactionRepository(store, seed_sample_data=False), today=today)

        report = await service.get_report("7days")

        assert report.start_date == date(2024, 3, 8)
        assert report.statistics.total_expense == Decimal("40")
        assert report.grouping.value == "day"

    @pytest.mark.asyncio
    async def test_unknown_report_range(self, store, today):
        service = SummaryService(StoreTransactionRepository(store, seed_sample_data=False), today=today)

        with pytest.raises(InvalidTimeRangeException):
            await service.get_report("fortnight")


class TestDegradedStore:

    @pytest.mark.asyncio
    async def test_malformed_transactions_read_as_empty(self, store, today):
        store.data.update({"transactions": "[{broken"})
        service = SummaryService(StoreTransactionRepository(store, seed_sample_data=True), today=today)

        summary = await service.get_summary()

        assert summary.transaction_count == 0
        assert summary.most_spent_category.name == "None"

    @pytest.mark.asyncio
    async def test_malformed_wallet_record_skipped(self, store):
        store.data.update({
            "wallets": json.dumps([
                {"id": "cash", "name": "Cash", "balance": "12.5"},
                {"id": "broken", "name": "Broken", "balance": "n/a"},
            ])
        })

        listing = await WalletService(StoreWalletRepository(store)).list_wallets()

        assert [w.id for w in listing.wallets] == ["cash"]
        assert listing.total_balance == Decimal("12.5")


class TestCategoryService:

    def test_filter_by_type(self):
        service = CategoryService()

        income = service.list_categories("income")
        expense_ = service.list_categories("expense")

        assert {c.id for c in income} >= {"salary", "freelance"}
        assert "salary" not in {c.id for c in expense_}
        assert "food" in {c.id for c in expense_}

    def test_unknown_category(self):
        with pytest.raises(CategoryNotFoundException):
            CategoryService().get_category("nope")
