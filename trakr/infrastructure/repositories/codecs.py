"""
Record codecs.

Entities are persisted as JSON objects with the camelCase field names the
stored collections have always used. Dates are ISO strings, amounts are
decimal strings; numeric amounts are accepted on read.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from trakr.domain.entities import (
    Budget,
    BudgetPeriod,
    Streak,
    Transaction,
    TransactionType,
    Wallet,
)


def parse_datetime(value: str) -> datetime:
    # fromisoformat only learned the "Z" suffix in 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def parse_date(value: str) -> date:
    """Calendar day of a date or date-time ISO string."""
    if len(value) == 10:
        return date.fromisoformat(value)
    return parse_datetime(value).date()


def parse_decimal(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise TypeError("amount must be a number")
    return Decimal(str(value))


def _optional_date(value: Optional[str]) -> Optional[date]:
    return parse_date(value) if value else None


def encode_transaction(tx: Transaction) -> Dict[str, Any]:
    return {
        "id": tx.id,
        "amount": str(tx.amount),
        "date": tx.date.isoformat(),
        "category": tx.category,
        "type": tx.type.value,
        "paymentMethod": tx.payment_method,
        "tags": list(tx.tags),
        "walletId": tx.wallet_id,
        "description": tx.description,
        "location": tx.location,
    }


def decode_transaction(data: Dict[str, Any]) -> Transaction:
    return Transaction(
        id=str(data["id"]),
        amount=parse_decimal(data["amount"]),
        date=parse_datetime(data["date"]),
        category=data["category"],
        type=TransactionType(data["type"]),
        payment_method=data.get("paymentMethod") or "Other",
        tags=list(data.get("tags") or []),
        wallet_id=data.get("walletId"),
        description=data.get("description"),
        location=data.get("location"),
    )


def encode_budget(budget: Budget) -> Dict[str, Any]:
    return {
        "id": budget.id,
        "category": budget.category,
        "amount": str(budget.amount),
        "period": budget.period.value,
        "startDate": budget.start_date.isoformat(),
        "endDate": budget.end_date.isoformat() if budget.end_date else None,
    }


def decode_budget(data: Dict[str, Any]) -> Budget:
    return Budget(
        id=str(data["id"]),
        category=data["category"],
        amount=parse_decimal(data["amount"]),
        period=BudgetPeriod(data["period"]),
        start_date=parse_date(data["startDate"]),
        end_date=_optional_date(data.get("endDate")),
    )


def encode_wallet(wallet: Wallet) -> Dict[str, Any]:
    return {
        "id": wallet.id,
        "name": wallet.name,
        "balance": str(wallet.balance),
        "currency": wallet.currency,
        "color": wallet.color,
        "isDefault": wallet.is_default,
        "icon": wallet.icon,
        "createdAt": wallet.created_at.isoformat(),
    }


def decode_wallet(data: Dict[str, Any]) -> Wallet:
    extra: Dict[str, Any] = {}
    if data.get("createdAt"):
        extra["created_at"] = parse_datetime(data["createdAt"])
    return Wallet(
        id=str(data["id"]),
        name=data["name"],
        balance=parse_decimal(data["balance"]),
        currency=data.get("currency") or "USD",
        color=data.get("color") or "#3182CE",
        is_default=bool(data.get("isDefault", False)),
        icon=data.get("icon"),
        **extra,
    )


def encode_streak(streak: Streak) -> Dict[str, Any]:
    return {
        "id": streak.id,
        "name": streak.name,
        "currentStreak": streak.current_streak,
        "lastCheckedDate": streak.last_checked_date.isoformat(),
        "targetDays": streak.target_days,
        "history": [day.isoformat() for day in streak.history],
    }


def decode_streak(data: Dict[str, Any]) -> Streak:
    return Streak(
        id=str(data["id"]),
        name=data["name"],
        current_streak=int(data["currentStreak"]),
        last_checked_date=parse_date(data["lastCheckedDate"]),
        target_days=int(data["targetDays"]),
        history=[parse_date(day) for day in data.get("history") or []],
    )
