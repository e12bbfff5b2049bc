"""Wallet API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response

from trakr.application.dto import WalletRequest
from trakr.application.services import WalletService
from trakr.core.dependencies import get_wallet_service
from trakr.presentation.schemas import (
    ErrorResponseSchema,
    WalletListSchema,
    WalletRequestSchema,
    WalletSchema,
)

wallet_router = APIRouter(
    prefix="/wallets",
    responses={
        503: {"model": ErrorResponseSchema, "description": "Record store unavailable"},
    },
)

WalletServiceDep = Annotated[WalletService, Depends(get_wallet_service)]
WalletId = Annotated[str, Path(description="Wallet id")]
NOT_FOUND = {404: {"model": ErrorResponseSchema, "description": "Wallet not found"}}


def _to_dto(request: WalletRequestSchema) -> WalletRequest:
    return WalletRequest(
        name=request.name,
        balance=request.balance,
        currency=request.currency,
        color=request.color,
        icon=request.icon,
    )


@wallet_router.get(
    "",
    response_model=WalletListSchema,
    summary="List Wallets",
    description="List wallets with the total balance across all of them.",
)
async def list_wallets(wallet_service: WalletServiceDep) -> WalletListSchema:
    return WalletListSchema.model_validate(await wallet_service.list_wallets())


@wallet_router.post(
    "",
    response_model=WalletSchema,
    status_code=201,
    summary="Create Wallet",
    description="Create a wallet. The first wallet becomes the default.",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid wallet"},
    },
)
async def create_wallet(
    request: WalletRequestSchema,
    wallet_service: WalletServiceDep,
) -> WalletSchema:
    return WalletSchema.model_validate(await wallet_service.create_wallet(_to_dto(request)))


@wallet_router.get("/{wallet_id}", response_model=WalletSchema, summary="Get Wallet", responses=NOT_FOUND)
async def get_wallet(wallet_id: WalletId, wallet_service: WalletServiceDep) -> WalletSchema:
    return WalletSchema.model_validate(await wallet_service.get_wallet(wallet_id))


@wallet_router.put("/{wallet_id}", response_model=WalletSchema, summary="Edit Wallet", responses=NOT_FOUND)
async def update_wallet(
    wallet_id: WalletId,
    request: WalletRequestSchema,
    wallet_service: WalletServiceDep,
) -> WalletSchema:
    response = await wallet_service.update_wallet(wallet_id, _to_dto(request))
    return WalletSchema.model_validate(response)


@wallet_router.delete(
    "/{wallet_id}",
    status_code=204,
    summary="Delete Wallet",
    description="Delete a wallet. If it was the default, the first remaining wallet takes over.",
    responses=NOT_FOUND,
)
async def delete_wallet(wallet_id: WalletId, wallet_service: WalletServiceDep) -> Response:
    await wallet_service.delete_wallet(wallet_id)
    return Response(status_code=204)


@wallet_router.post(
    "/{wallet_id}/default",
    response_model=WalletSchema,
    summary="Set Default Wallet",
    responses=NOT_FOUND,
)
async def set_default_wallet(wallet_id: WalletId, wallet_service: WalletServiceDep) -> WalletSchema:
    return WalletSchema.model_validate(await wallet_service.set_default_wallet(wallet_id))
