"""
Streak check-in state machine.

A check-in for today either does nothing (already checked in), continues
the streak (gap of at most one day) or resets it to 1 (a day was missed).
"""

from dataclasses import replace
from datetime import date

from trakr.domain.entities import Streak

from .models import CheckInOutcome, CheckInResult


def check_in(streak: Streak, today: date) -> CheckInResult:
    """
    Record a check-in for today.

    Algorithm:
        1. If last_checked_date == today, return the streak unchanged
        2. gap_days = today - last_checked_date in whole days
        3. gap_days > 1 resets current_streak to 1, otherwise it increments
        4. Append today to history and move last_checked_date to today
        5. target_reached fires only when current_streak == target_days,
           so it is signalled once per climb; the counter is not capped

    Args:
        streak: Streak before the check-in
        today: Day being checked in

    Returns:
        CheckInResult carrying the new streak
    """
    if streak.last_checked_date == today:
        return CheckInResult(streak=streak, outcome=CheckInOutcome.ALREADY_CHECKED_IN)

    gap_days = (today - streak.last_checked_date).days
    if gap_days > 1:
        outcome = CheckInOutcome.RESET
        current = 1
    else:
        outcome = CheckInOutcome.CONTINUED
        current = streak.current_streak + 1

    updated = replace(
        streak,
        current_streak=current,
        last_checked_date=today,
        history=[*streak.history, today],
    )

    return CheckInResult(
        streak=updated,
        outcome=outcome,
        target_reached=updated.current_streak == updated.target_days,
        gap_days=gap_days,
    )
