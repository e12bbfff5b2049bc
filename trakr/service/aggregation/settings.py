"""
Report Settings for the Trakr Aggregation Engine.

Tunables for budget progress display and the report views. They can be
adjusted via environment variables with the REPORT_ prefix:
    REPORT_PERCENTAGE_CAP=100
    REPORT_DAY_GROUPING_MAX_DAYS=14
    REPORT_TIME_RANGES_JSON='{"7days": 7, "30days": 30}'

Usage:
    from trakr.service.aggregation.settings import report_settings

    cap = report_settings.percentage_cap

    # Or create custom settings for testing
    custom = ReportSettings(week_grouping_max_days=30)
"""

import json
from functools import lru_cache
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReportSettings(BaseSettings):
    """
    Configurable parameters for the aggregation engine.

    All settings can be overridden via environment variables with REPORT_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="REPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Budget Progress ===
    percentage_cap: int = Field(
        default=100,
        ge=1,
        description="Budget progress percentage is clamped to this value for display",
    )

    # === Spending Over Time ===
    day_grouping_max_days: int = Field(
        default=14,
        ge=1,
        description="Spans up to this many days are grouped by day",
    )
    week_grouping_max_days: int = Field(
        default=60,
        ge=1,
        description="Spans up to this many days are grouped by week of month",
    )

    # === Display ===
    fallback_category_color: str = Field(
        default="#CBD5E0",
        description="Chart color for categories missing from the lookup",
    )
    default_time_range: str = Field(
        default="30days",
        description="Report time range used when none is requested",
    )

    # === Time Ranges ===
    time_ranges_json: str = Field(
        default='{"7days": 7, "30days": 30, "90days": 90, "year": 365}',
        description="Report time ranges as a JSON object: {name: days_back}",
    )

    @field_validator("time_ranges_json")
    @classmethod
    def validate_time_ranges_json(cls, v: str) -> str:
        """Validate that the time ranges JSON maps names to positive day counts."""
        try:
            ranges = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")
        if not isinstance(ranges, dict) or not ranges:
            raise ValueError("Time ranges must be a non-empty object")
        for name, days in ranges.items():
            if not isinstance(days, int) or days <= 0:
                raise ValueError(f"Time range {name} must be a positive integer")
        return v

    @property
    def time_ranges(self) -> Dict[str, int]:
        """Report time range names mapped to the number of days looked back."""
        return json.loads(self.time_ranges_json)


@lru_cache
def get_report_settings() -> ReportSettings:
    """Get cached report settings instance."""
    return ReportSettings()


report_settings = get_report_settings()
