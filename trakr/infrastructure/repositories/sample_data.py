"""Collections written on first read of a missing key."""

from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import List

from trakr.domain.entities import (
    Budget,
    BudgetPeriod,
    Streak,
    Transaction,
    TransactionType,
    Wallet,
)


def default_wallets() -> List[Wallet]:
    return [
        Wallet(id="cash", name="Cash", balance=Decimal("500"), color="#38A169", is_default=True),
        Wallet(id="bank", name="Bank Account", balance=Decimal("2500"), color="#3182CE"),
        Wallet(id="savings", name="Savings", balance=Decimal("10000"), color="#805AD5"),
    ]


def sample_transactions(today: date) -> List[Transaction]:
    """A month of example activity, dated within today's month."""

    def on(day: int) -> datetime:
        return datetime(today.year, today.month, day)

    expense, income = TransactionType.EXPENSE, TransactionType.INCOME
    return [
        Transaction(id="1", amount=Decimal("1000"), date=on(5), category="food",
                    type=expense, payment_method="Credit Card", tags=["essential"],
                    wallet_id="bank", description="Weekly groceries"),
        Transaction(id="2", amount=Decimal("50"), date=on(8), category="transportation",
                    type=expense, payment_method="Debit Card", wallet_id="bank",
                    description="Gas"),
        Transaction(id="3", amount=Decimal("3500"), date=on(1), category="salary",
                    type=income, payment_method="Bank Transfer", tags=["work"],
                    wallet_id="bank", description="Monthly salary"),
        Transaction(id="4", amount=Decimal("200"), date=on(12), category="entertainment",
                    type=expense, payment_method="Cash", wallet_id="cash",
                    description="Movie night"),
        Transaction(id="5", amount=Decimal("150"), date=on(15), category="utilities",
                    type=expense, payment_method="Bank Transfer", tags=["bills", "home"],
                    wallet_id="bank", description="Electricity bill"),
        Transaction(id="6", amount=Decimal("500"), date=on(10), category="freelance",
                    type=income, payment_method="Bank Transfer", tags=["work", "freelance"],
                    wallet_id="bank", description="Website project"),
        Transaction(id="7", amount=Decimal("800"), date=on(20), category="shopping",
                    type=expense, payment_method="Credit Card", wallet_id="bank",
                    description="New clothes"),
    ]


def sample_budgets(today: date) -> List[Budget]:
    start = today.replace(day=1)
    return [
        Budget(id="1", category="food", amount=Decimal("1500"),
               period=BudgetPeriod.MONTHLY, start_date=start),
        Budget(id="2", category="entertainment", amount=Decimal("500"),
               period=BudgetPeriod.MONTHLY, start_date=start),
        Budget(id="3", category="transportation", amount=Decimal("300"),
               period=BudgetPeriod.MONTHLY, start_date=start),
    ]


def sample_streaks(today: date) -> List[Streak]:
    def last_days(count: int) -> List[date]:
        return [today - timedelta(days=offset) for offset in range(count - 1, -1, -1)]

    return [
        Streak(id="1", name="No Impulse Spending", current_streak=5,
               last_checked_date=today, target_days=7, history=last_days(5)),
        Streak(id="2", name="Daily Budget Check", current_streak=12,
               last_checked_date=today, target_days=14, history=last_days(12)),
    ]
