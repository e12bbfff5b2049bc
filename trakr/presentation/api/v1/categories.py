"""Category lookup API endpoints."""

from typing import Annotated, Literal, Optional

from fastapi import APIRouter, Depends, Path, Query

from trakr.application.services import CategoryService
from trakr.core.dependencies import get_category_service
from trakr.presentation.schemas import CategorySchema, ErrorResponseSchema

category_router = APIRouter(prefix="/categories")

CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]


@category_router.get("", response_model=list[CategorySchema], summary="List Categories")
async def list_categories(
    category_service: CategoryServiceDep,
    type: Annotated[
        Optional[Literal["income", "expense"]],
        Query(description="Only categories of this type"),
    ] = None,
) -> list[CategorySchema]:
    return [CategorySchema.model_validate(c) for c in category_service.list_categories(type)]


@category_router.get(
    "/{category_id}",
    response_model=CategorySchema,
    summary="Get Category",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Category not found"},
    },
)
async def get_category(
    category_id: Annotated[str, Path(description="Category id")],
    category_service: CategoryServiceDep,
) -> CategorySchema:
    return CategorySchema.model_validate(category_service.get_category(category_id))
