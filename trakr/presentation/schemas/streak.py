"""Streak-related Pydantic schemas."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StreakCreateSchema(BaseModel):
    """Schema for POST /v1/streaks request body."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        examples=["No Impulse Spending"],
    )
    target_days: int = Field(
        7,
        ge=1,
        le=365,
        description="Days in a row that count as reaching the goal",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v.strip()


class StreakSchema(BaseModel):
    """Schema for a streak in responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    current_streak: int
    last_checked_date: date
    target_days: int
    history: list[date]
    target_reached: bool = Field(
        ...,
        description="True while current_streak is at or past target_days",
    )


class CheckInSchema(BaseModel):
    """Schema for POST /v1/streaks/{id}/check-in response."""

    model_config = ConfigDict(from_attributes=True)

    streak: StreakSchema
    outcome: str = Field(
        ...,
        description="continued, reset or already_checked_in",
        examples=["continued"],
    )
    target_reached: bool = Field(
        ...,
        description="True only on the check-in that lands on target_days",
    )
    gap_days: Optional[int] = Field(
        None,
        description="Days since the previous check-in",
    )
