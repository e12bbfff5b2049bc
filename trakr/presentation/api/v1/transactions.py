"""Transaction API endpoints."""

from datetime import date
from typing import Annotated, Literal, Optional

from fastapi import APIRouter, Depends, Path, Query, Response

from trakr.application.dto import CreateTransactionRequest, TransactionQuery
from trakr.application.services import TransactionService
from trakr.core.dependencies import get_transaction_service
from trakr.presentation.schemas import (
    ErrorResponseSchema,
    TransactionCreateSchema,
    TransactionSchema,
)

transaction_router = APIRouter(
    prefix="/transactions",
    responses={
        503: {"model": ErrorResponseSchema, "description": "Record store unavailable"},
    },
)

TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]


@transaction_router.get(
    "",
    response_model=list[TransactionSchema],
    summary="List Transactions",
    description="""
    List transactions, most recently added first.

    All filters are optional and combine; start and end are inclusive days.
    """,
)
async def list_transactions(
    transaction_service: TransactionServiceDep,
    start: Annotated[Optional[date], Query(description="First day included")] = None,
    end: Annotated[Optional[date], Query(description="Last day included")] = None,
    type: Annotated[
        Optional[Literal["income", "expense"]],
        Query(description="Only income or only expenses"),
    ] = None,
    category: Annotated[Optional[str], Query(description="Category id")] = None,
    wallet_id: Annotated[Optional[str], Query(description="Wallet id")] = None,
) -> list[TransactionSchema]:
    transactions = await transaction_service.list_transactions(
        TransactionQuery(start=start, end=end, type=type, category=category, wallet_id=wallet_id)
    )
    return [TransactionSchema.model_validate(tx) for tx in transactions]


@transaction_router.post(
    "",
    response_model=TransactionSchema,
    status_code=201,
    summary="Add Transaction",
    description="""
    Record an income or expense.

    When wallet_id names a wallet, its balance moves by +amount for income
    and -amount for an expense, in the same write as the transaction.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid transaction"},
    },
)
async def add_transaction(
    request: TransactionCreateSchema,
    transaction_service: TransactionServiceDep,
) -> TransactionSchema:
    dto = CreateTransactionRequest(
        amount=request.amount,
        date=request.date,
        category=request.category,
        type=request.type,
        payment_method=request.payment_method,
        tags=request.tags,
        wallet_id=request.wallet_id,
        description=request.description,
        location=request.location,
    )
    response = await transaction_service.add_transaction(dto)
    return TransactionSchema.model_validate(response)


@transaction_router.get(
    "/{transaction_id}",
    response_model=TransactionSchema,
    summary="Get Transaction",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Transaction not found"},
    },
)
async def get_transaction(
    transaction_id: Annotated[str, Path(description="Transaction id")],
    transaction_service: TransactionServiceDep,
) -> TransactionSchema:
    response = await transaction_service.get_transaction(transaction_id)
    return TransactionSchema.model_validate(response)


@transaction_router.delete(
    "/{transaction_id}",
    status_code=204,
    summary="Delete Transaction",
    description="Delete a transaction and reverse its effect on its wallet.",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Transaction not found"},
    },
)
async def delete_transaction(
    transaction_id: Annotated[str, Path(description="Transaction id")],
    transaction_service: TransactionServiceDep,
) -> Response:
    await transaction_service.delete_transaction(transaction_id)
    return Response(status_code=204)
