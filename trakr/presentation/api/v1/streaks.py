"""Behavioral streak API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response

from trakr.application.dto import StreakRequest
from trakr.application.services import StreakService
from trakr.core.dependencies import get_streak_service
from trakr.presentation.schemas import (
    CheckInSchema,
    ErrorResponseSchema,
    StreakCreateSchema,
    StreakSchema,
)

streak_router = APIRouter(
    prefix="/streaks",
    responses={
        503: {"model": ErrorResponseSchema, "description": "Record store unavailable"},
    },
)

StreakServiceDep = Annotated[StreakService, Depends(get_streak_service)]
StreakId = Annotated[str, Path(description="Streak id")]


@streak_router.get("", response_model=list[StreakSchema], summary="List Streaks")
async def list_streaks(streak_service: StreakServiceDep) -> list[StreakSchema]:
    return [StreakSchema.model_validate(s) for s in await streak_service.list_streaks()]


@streak_router.post(
    "",
    response_model=StreakSchema,
    status_code=201,
    summary="Start Streak",
    description="Start a streak. Today counts as the first day.",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid streak"},
    },
)
async def create_streak(request: StreakCreateSchema, streak_service: StreakServiceDep) -> StreakSchema:
    dto = StreakRequest(name=request.name, target_days=request.target_days)
    return StreakSchema.model_validate(await streak_service.create_streak(dto))


@streak_router.post(
    "/{streak_id}/check-in",
    response_model=CheckInSchema,
    summary="Check In",
    description="""
    Check in today. Checking in the day after the previous check-in
    continues the streak; missing a day resets it to 1. A second check-in
    on the same day changes nothing.
    """,
    responses={
        404: {"model": ErrorResponseSchema, "description": "Streak not found"},
    },
)
async def check_in(streak_id: StreakId, streak_service: StreakServiceDep) -> CheckInSchema:
    return CheckInSchema.model_validate(await streak_service.check_in(streak_id))


@streak_router.delete(
    "/{streak_id}",
    status_code=204,
    summary="Delete Streak",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Streak not found"},
    },
)
async def delete_streak(streak_id: StreakId, streak_service: StreakServiceDep) -> Response:
    await streak_service.delete_streak(streak_id)
    return Response(status_code=204)
