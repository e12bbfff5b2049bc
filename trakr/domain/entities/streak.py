"""Streak entity for consecutive-day behavioral check-ins."""

from dataclasses import dataclass, field
from datetime import date
from typing import List

from .transaction import generate_id


@dataclass(frozen=True)
class Streak:
    """
    A consecutive-day check-in counter.

    history is append-only; current_streak may climb past target_days.
    """

    name: str
    current_streak: int
    last_checked_date: date
    target_days: int
    history: List[date] = field(default_factory=list)
    id: str = field(default_factory=generate_id)

    @classmethod
    def start(cls, name: str, target_days: int, today: date) -> "Streak":
        """A new streak counts today as its first day."""
        return cls(
            name=name,
            current_streak=1,
            last_checked_date=today,
            target_days=target_days,
            history=[today],
        )

    @property
    def target_reached(self) -> bool:
        return self.current_streak >= self.target_days
