"""Summary and report Pydantic schemas."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from trakr.service.aggregation import TimeGrouping


class CategoryAmountSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str = Field(..., examples=["Food & Dining"])
    amount: Decimal


class SummarySchema(BaseModel):
    """Schema for GET /v1/summary response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "examples": [
                {
                    "total_income": "50.00",
                    "total_expense": "100.00",
                    "balance": "-50.00",
                    "category_totals": {"food": "100.00"},
                    "most_spent_category": {"name": "Food & Dining", "amount": "100.00"},
                    "transaction_count": 2,
                    "start": None,
                    "end": None,
                }
            ]
        },
    )

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal = Field(..., description="total_income - total_expense")
    category_totals: dict[str, Decimal] = Field(
        ...,
        description="Expense total per category id",
    )
    most_spent_category: CategoryAmountSchema
    transaction_count: int = Field(..., ge=0)
    start: Optional[date] = None
    end: Optional[date] = None


class CategorySpendingSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: str
    name: str
    color: str
    amount: Decimal


class PaymentMethodSpendingSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    amount: Decimal


class TimeBucketSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    label: str = Field(..., examples=["Jan W2"])
    start: date
    income: Decimal
    expense: Decimal


class ReportStatisticsSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    average_daily_spending: Decimal = Field(
        ...,
        description="Expense total divided by the number of days with an expense",
    )
    most_expensive_category: CategoryAmountSchema


class ReportSchema(BaseModel):
    """Schema for GET /v1/reports response."""

    model_config = ConfigDict(from_attributes=True)

    time_range: str = Field(..., examples=["30days"])
    start_date: date
    end_date: date
    statistics: ReportStatisticsSchema
    spending_by_category: list[CategorySpendingSchema]
    spending_by_payment_method: list[PaymentMethodSpendingSchema]
    grouping: TimeGrouping = Field(..., description="Bucket size of spending_over_time")
    spending_over_time: list[TimeBucketSchema]
