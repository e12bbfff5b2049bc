"""Budget API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response

from trakr.application.dto import BudgetRequest
from trakr.application.services import BudgetService
from trakr.core.dependencies import get_budget_service
from trakr.presentation.schemas import BudgetRequestSchema, BudgetSchema, ErrorResponseSchema

budget_router = APIRouter(
    prefix="/budgets",
    responses={
        503: {"model": ErrorResponseSchema, "description": "Record store unavailable"},
    },
)

BudgetServiceDep = Annotated[BudgetService, Depends(get_budget_service)]
BudgetId = Annotated[str, Path(description="Budget id")]


def _to_dto(request: BudgetRequestSchema) -> BudgetRequest:
    return BudgetRequest(
        category=request.category,
        amount=request.amount,
        period=request.period,
        start_date=request.start_date,
        end_date=request.end_date,
    )


@budget_router.get(
    "",
    response_model=list[BudgetSchema],
    summary="List Budgets",
    description="List budgets with spending progress computed from all transactions.",
)
async def list_budgets(budget_service: BudgetServiceDep) -> list[BudgetSchema]:
    return [BudgetSchema.model_validate(b) for b in await budget_service.list_budgets()]


@budget_router.post(
    "",
    response_model=BudgetSchema,
    status_code=201,
    summary="Create Budget",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid budget"},
    },
)
async def create_budget(
    request: BudgetRequestSchema,
    budget_service: BudgetServiceDep,
) -> BudgetSchema:
    return BudgetSchema.model_validate(await budget_service.create_budget(_to_dto(request)))


@budget_router.get(
    "/{budget_id}",
    response_model=BudgetSchema,
    summary="Get Budget",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Budget not found"},
    },
)
async def get_budget(budget_id: BudgetId, budget_service: BudgetServiceDep) -> BudgetSchema:
    return BudgetSchema.model_validate(await budget_service.get_budget(budget_id))


@budget_router.put(
    "/{budget_id}",
    response_model=BudgetSchema,
    summary="Edit Budget",
    description="""
    Replace a budget's category, amount and period.

    The start date is kept; the end date is recomputed only when the
    period changes.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid budget"},
        404: {"model": ErrorResponseSchema, "description": "Budget not found"},
    },
)
async def update_budget(
    budget_id: BudgetId,
    request: BudgetRequestSchema,
    budget_service: BudgetServiceDep,
) -> BudgetSchema:
    response = await budget_service.update_budget(budget_id, _to_dto(request))
    return BudgetSchema.model_validate(response)


@budget_router.delete(
    "/{budget_id}",
    status_code=204,
    summary="Delete Budget",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Budget not found"},
    },
)
async def delete_budget(budget_id: BudgetId, budget_service: BudgetServiceDep) -> Response:
    await budget_service.delete_budget(budget_id)
    return Response(status_code=204)
