"""Budget-related Pydantic schemas."""

from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class BudgetRequestSchema(BaseModel):
    """Schema for POST and PUT /v1/budgets request bodies."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"category": "food", "amount": 1500, "period": "monthly"},
            ]
        }
    )
    category: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Category id the budget caps",
        examples=["food"],
    )
    amount: Decimal = Field(
        ...,
        gt=0,
        description="Spending cap for the period",
        examples=[1500],
    )
    period: Literal["weekly", "monthly", "yearly"] = Field(
        "monthly",
        description="Budget period",
    )
    start_date: Optional[date] = Field(
        None,
        description="First day covered; defaults to the first of this month. Ignored on edit.",
    )
    end_date: Optional[date] = Field(
        None,
        description="Last day covered; defaults to the end of the first period. Ignored on edit.",
    )


class BudgetProgressSchema(BaseModel):
    """Spending against a budget."""

    model_config = ConfigDict(from_attributes=True)

    total_spent: Decimal
    percentage: int = Field(
        ...,
        description="Share of the budget spent, clamped to 100",
        examples=[67],
    )
    remaining: Decimal = Field(..., description="Budget left, never negative")
    over_budget: bool


class BudgetSchema(BaseModel):
    """Schema for a budget in responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    category: str
    category_name: str
    amount: Decimal
    period: str
    start_date: date
    end_date: Optional[date] = None
    progress: BudgetProgressSchema
