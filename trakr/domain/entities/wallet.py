"""Wallet entity representing a named balance bucket."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from .transaction import Transaction, generate_id


@dataclass(frozen=True)
class Wallet:
    """A named balance moved by the transactions that reference it."""

    name: str
    balance: Decimal
    currency: str = "USD"
    color: str = "#3182CE"
    is_default: bool = False
    icon: Optional[str] = None
    id: str = field(default_factory=generate_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def apply(self, transaction: Transaction) -> "Wallet":
        """Return this wallet with the transaction's effect added."""
        return replace(self, balance=self.balance + transaction.signed_amount)

    def revert(self, transaction: Transaction) -> "Wallet":
        """Return this wallet with the transaction's effect removed."""
        return replace(self, balance=self.balance - transaction.signed_amount)
