"""Transaction-related Pydantic schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionCreateSchema(BaseModel):
    """Schema for POST /v1/transactions request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "amount": 42.5,
                    "date": "2024-01-15T12:30:00",
                    "category": "food",
                    "type": "expense",
                    "payment_method": "Credit Card",
                    "tags": ["essential"],
                    "wallet_id": "bank",
                    "description": "Weekly groceries",
                }
            ]
        }
    )
    amount: Decimal = Field(
        ...,
        gt=0,
        description="Positive amount in currency units",
        examples=[42.5],
    )
    date: datetime = Field(
        ...,
        description="When the transaction happened (ISO 8601)",
    )
    category: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Category id; unknown ids are kept as given",
        examples=["food"],
    )
    type: Literal["income", "expense"] = Field(
        ...,
        description="Whether the amount is income or an expense",
    )
    payment_method: str = Field(
        "Other",
        max_length=100,
        description="Payment method label",
        examples=["Credit Card"],
    )
    tags: list[str] = Field(default_factory=list, description="Free-form tags")
    wallet_id: Optional[str] = Field(
        None,
        description="Wallet whose balance the transaction moves",
        examples=["bank"],
    )
    description: Optional[str] = Field(None, max_length=500)
    location: Optional[str] = Field(None, max_length=255)

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: str) -> str:
        """Ensure category is not just whitespace."""
        if not v.strip():
            raise ValueError("category cannot be empty or whitespace")
        return v.strip()


class TransactionSchema(BaseModel):
    """Schema for a transaction in responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Transaction id")
    amount: Decimal = Field(..., description="Amount in currency units")
    date: datetime
    category: str
    category_name: str = Field(
        ...,
        description="Display name of the category, or the raw id when unknown",
    )
    type: str = Field(..., examples=["expense"])
    payment_method: str
    tags: list[str]
    wallet_id: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
