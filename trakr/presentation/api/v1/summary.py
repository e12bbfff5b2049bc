"""Summary and report API endpoints."""

from datetime import date
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from trakr.application.services import SummaryService
from trakr.core.dependencies import get_summary_service
from trakr.presentation.schemas import ErrorResponseSchema, ReportSchema, SummarySchema

summary_router = APIRouter(
    responses={
        503: {"model": ErrorResponseSchema, "description": "Record store unavailable"},
    },
)

SummaryServiceDep = Annotated[SummaryService, Depends(get_summary_service)]


@summary_router.get(
    "/summary",
    response_model=SummarySchema,
    summary="Get Summary",
    description="""
    Income, expense and balance totals with the per-category expense
    breakdown and the top spending category.

    Without start/end every transaction is included.
    """,
)
async def get_summary(
    summary_service: SummaryServiceDep,
    start: Annotated[Optional[date], Query(description="First day included")] = None,
    end: Annotated[Optional[date], Query(description="Last day included")] = None,
) -> SummarySchema:
    return SummarySchema.model_validate(await summary_service.get_summary(start=start, end=end))


@summary_router.get(
    "/reports",
    response_model=ReportSchema,
    summary="Get Report",
    description="""
    Report views for a time range ending today: statistics, spending by
    category and by payment method, and income/expense over time.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Unknown time range"},
    },
)
async def get_report(
    summary_service: SummaryServiceDep,
    time_range: Annotated[
        Optional[str],
        Query(alias="range", description="7days, 30days, 90days or year"),
    ] = None,
) -> ReportSchema:
    return ReportSchema.model_validate(await summary_service.get_report(time_range))
