"""Transaction entity representing an income or expense event."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from uuid import uuid4


class TransactionType(str, Enum):
    """Aggregation bucket of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


def generate_id() -> str:
    """Generate a new opaque record identifier."""
    return uuid4().hex


@dataclass(frozen=True)
class Transaction:
    """
    Immutable representation of a ledger transaction.

    Transactions are never edited in place; an edit replaces the whole
    record. The amount is positive, the type decides its sign.

    Attributes:
        amount: Positive amount in currency units
        date: When the transaction happened
        category: Category id, unknown ids are tolerated
        type: Income or expense
        payment_method: Free-form payment label
        tags: Ordered free-form tags
        wallet_id: Wallet whose balance this transaction moves
    """

    amount: Decimal
    date: datetime
    category: str
    type: TransactionType
    payment_method: str = "Other"
    tags: List[str] = field(default_factory=list)
    wallet_id: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    id: str = field(default_factory=generate_id)

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def day(self) -> date:
        """Calendar day of the transaction."""
        return self.date.date()

    @property
    def signed_amount(self) -> Decimal:
        """Effect on a wallet balance: +amount for income, -amount for expense."""
        return self.amount if self.is_income else -self.amount
