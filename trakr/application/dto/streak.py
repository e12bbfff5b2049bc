"""Data transfer objects for streak operations."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from trakr.domain.entities import Streak
from trakr.service.aggregation import CheckInResult

MAX_TARGET_DAYS = 365


@dataclass(frozen=True)
class StreakRequest:
    """Input data for starting a streak."""
    name: str
    target_days: int

    def validate(self) -> List[str]:
        errors = []

        if not self.name or not self.name.strip():
            errors.append("name is required")

        if not 1 <= self.target_days <= MAX_TARGET_DAYS:
            errors.append(f"target_days must be between 1 and {MAX_TARGET_DAYS}")

        return errors


@dataclass(frozen=True)
class StreakResponse:
    id: str
    name: str
    current_streak: int
    last_checked_date: date
    target_days: int
    history: List[date]
    target_reached: bool

    @classmethod
    def from_entity(cls, streak: Streak) -> "StreakResponse":
        return cls(
            id=streak.id,
            name=streak.name,
            current_streak=streak.current_streak,
            last_checked_date=streak.last_checked_date,
            target_days=streak.target_days,
            history=list(streak.history),
            target_reached=streak.target_reached,
        )


@dataclass(frozen=True)
class CheckInResponse:
    """
    Result of a check-in.

    target_reached is true only on the check-in that hits target_days,
    unlike StreakResponse.target_reached which stays true afterwards.
    """

    streak: StreakResponse
    outcome: str
    target_reached: bool
    gap_days: Optional[int]

    @classmethod
    def from_result(cls, result: CheckInResult) -> "CheckInResponse":
        return cls(
            streak=StreakResponse.from_entity(result.streak),
            outcome=result.outcome.value,
            target_reached=result.target_reached,
            gap_days=result.gap_days,
        )
