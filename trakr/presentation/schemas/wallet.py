"""Wallet-related Pydantic schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WalletRequestSchema(BaseModel):
    """Schema for POST and PUT /v1/wallets request bodies."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Wallet name",
        examples=["Travel Fund"],
    )
    balance: Decimal = Field(
        Decimal(0),
        description="Current balance; may be negative",
        examples=[250],
    )
    currency: str = Field("USD", min_length=1, max_length=10, examples=["USD"])
    color: str = Field("#3182CE", max_length=20, examples=["#3182CE"])
    icon: Optional[str] = Field(None, max_length=50)


class WalletSchema(BaseModel):
    """Schema for a wallet in responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    balance: Decimal
    currency: str
    color: str
    is_default: bool
    icon: Optional[str] = None
    created_at: datetime


class WalletListSchema(BaseModel):
    """Schema for GET /v1/wallets response."""

    model_config = ConfigDict(from_attributes=True)

    wallets: list[WalletSchema]
    total_balance: Decimal = Field(..., description="Sum of all wallet balances")
