"""Data transfer objects for transaction operations."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from trakr.domain.entities import Transaction, TransactionType, category_display_name


@dataclass(frozen=True)
class CreateTransactionRequest:
    """Input data for recording a transaction."""
    amount: Decimal
    date: datetime
    category: str
    type: str
    payment_method: str = "Other"
    tags: List[str] = field(default_factory=list)
    wallet_id: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []

        if self.amount <= 0:
            errors.append("amount must be positive")

        if not self.category or not self.category.strip():
            errors.append("category is required")

        if self.type not in {t.value for t in TransactionType}:
            errors.append("type must be income or expense")

        return errors

    def to_entity(self) -> Transaction:
        return Transaction(
            amount=self.amount,
            date=self.date,
            category=self.category.strip(),
            type=TransactionType(self.type),
            payment_method=self.payment_method or "Other",
            tags=list(self.tags),
            wallet_id=self.wallet_id,
            description=self.description,
            location=self.location,
        )


@dataclass(frozen=True)
class TransactionQuery:
    """Optional filters for listing transactions."""
    start: Optional[date] = None
    end: Optional[date] = None
    type: Optional[str] = None
    category: Optional[str] = None
    wallet_id: Optional[str] = None


@dataclass(frozen=True)
class TransactionResponse:
    """Response data for a transaction."""

    id: str
    amount: Decimal
    date: datetime
    category: str
    category_name: str
    type: str
    payment_method: str
    tags: List[str]
    wallet_id: Optional[str]
    description: Optional[str]
    location: Optional[str]

    @classmethod
    def from_entity(cls, tx: Transaction) -> "TransactionResponse":
        return cls(
            id=tx.id,
            amount=tx.amount,
            date=tx.date,
            category=tx.category,
            category_name=category_display_name(tx.category),
            type=tx.type.value,
            payment_method=tx.payment_method,
            tags=list(tx.tags),
            wallet_id=tx.wallet_id,
            description=tx.description,
            location=tx.location,
        )
