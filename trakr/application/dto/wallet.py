"""Data transfer objects for wallet operations."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from trakr.domain.entities import Wallet


@dataclass(frozen=True)
class WalletRequest:
    """Input data for creating or editing a wallet."""
    name: str
    balance: Decimal = Decimal(0)
    currency: str = "USD"
    color: str = "#3182CE"
    icon: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []

        if not self.name or not self.name.strip():
            errors.append("name is required")

        if not self.currency or not self.currency.strip():
            errors.append("currency is required")

        return errors


@dataclass(frozen=True)
class WalletResponse:
    """Response data for a wallet."""

    id: str
    name: str
    balance: Decimal
    currency: str
    color: str
    is_default: bool
    icon: Optional[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, wallet: Wallet) -> "WalletResponse":
        return cls(
            id=wallet.id,
            name=wallet.name,
            balance=wallet.balance,
            currency=wallet.currency,
            color=wallet.color,
            is_default=wallet.is_default,
            icon=wallet.icon,
            created_at=wallet.created_at,
        )


@dataclass(frozen=True)
class WalletListResponse:
    """All wallets and the sum of their balances."""

    wallets: List[WalletResponse]
    total_balance: Decimal

    @classmethod
    def from_entities(cls, wallets: List[Wallet]) -> "WalletListResponse":
        return cls(
            wallets=[WalletResponse.from_entity(w) for w in wallets],
            total_balance=sum((w.balance for w in wallets), Decimal(0)),
        )
