"""Streak-related domain exceptions."""

from .base import TrakrException


class StreakNotFoundException(TrakrException):
    """Raised when a streak cannot be found."""

    def __init__(self, streak_id: str):
        super().__init__(
            message=f"Streak not found: {streak_id}",
            code="STREAK_NOT_FOUND",
        )
        self.streak_id = streak_id


class InvalidStreakException(TrakrException):
    """Raised when a streak is created with an empty name or bad target."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_STREAK",
        )
