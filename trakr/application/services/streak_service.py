"""Streak service - behavioral streaks and daily check-ins."""

import asyncio
from datetime import date
from typing import Callable, List

import structlog

from trakr.application.dto import CheckInResponse, StreakRequest, StreakResponse
from trakr.core.metrics import record_streak_checkin
from trakr.domain.entities import Streak
from trakr.domain.exceptions import InvalidStreakException, StreakNotFoundException
from trakr.domain.interfaces import StreakRepository
from trakr.service.aggregation import CheckInOutcome, check_in

logger = structlog.get_logger(__name__)


class StreakService:
    """Application service for streak use cases."""

    def __init__(
        self,
        streak_repository: StreakRepository,
        today: Callable[[], date] = date.today,
        lock: asyncio.Lock | None = None,
    ):
        self._streak_repo = streak_repository
        self._today = today
        self._lock = lock if lock is not None else asyncio.Lock()

    async def list_streaks(self) -> List[StreakResponse]:
        return [StreakResponse.from_entity(s) for s in await self._streak_repo.get_all()]

    async def create_streak(self, request: StreakRequest) -> StreakResponse:
        """
        Start a streak; today counts as its first day.

        Raises:
            InvalidStreakException: If request validation fails
        """
        errors = request.validate()
        if errors:
            raise InvalidStreakException("; ".join(errors))

        streak = Streak.start(request.name.strip(), request.target_days, self._today())
        async with self._lock:
            streaks = await self._streak_repo.get_all()
            await self._streak_repo.save_all([*streaks, streak])

        logger.info("streak_created", streak_id=streak.id, target_days=streak.target_days)
        return StreakResponse.from_entity(streak)

    async def check_in(self, streak_id: str) -> CheckInResponse:
        """
        Check in today on a streak.

        A repeat check-in on the same day changes nothing and is not
        written back.

        Raises:
            StreakNotFoundException: If streak not found
        """
        async with self._lock:
            streaks = await self._streak_repo.get_all()
            streak = next((s for s in streaks if s.id == streak_id), None)
            if streak is None:
                raise StreakNotFoundException(streak_id)

            result = check_in(streak, self._today())
            if result.outcome != CheckInOutcome.ALREADY_CHECKED_IN:
                await self._streak_repo.save_all(
                    [result.streak if s.id == streak_id else s for s in streaks]
                )

        record_streak_checkin(result.outcome.value)
        log = logger.bind(streak_id=streak_id, outcome=result.outcome.value)
        if result.outcome == CheckInOutcome.ALREADY_CHECKED_IN:
            log.info("streak_already_checked_in")
            return CheckInResponse.from_result(result)

        log.info(
            "streak_checked_in",
            current_streak=result.streak.current_streak,
            gap_days=result.gap_days,
        )
        if result.target_reached:
            log.info("streak_target_reached", target_days=result.streak.target_days)

        return CheckInResponse.from_result(result)

    async def delete_streak(self, streak_id: str) -> None:
        """
        Delete a streak.

        Raises:
            StreakNotFoundException: If streak not found
        """
        async with self._lock:
            streaks = await self._streak_repo.get_all()
            remaining = [s for s in streaks if s.id != streak_id]
            if len(remaining) == len(streaks):
                raise StreakNotFoundException(streak_id)
            await self._streak_repo.save_all(remaining)

        logger.info("streak_deleted", streak_id=streak_id)
