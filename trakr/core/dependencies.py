"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from trakr.application.services import (
    BudgetService,
    CategoryService,
    StreakService,
    SummaryService,
    TransactionService,
    WalletService,
)
from trakr.domain.interfaces import RecordStore
from trakr.infrastructure.repositories import (
    StoreBudgetRepository,
    StoreLedgerRepository,
    StoreStreakRepository,
    StoreTransactionRepository,
    StoreWalletRepository,
)
from trakr.infrastructure.storage import create_record_store


# Record store dependency
@lru_cache
def get_record_store() -> RecordStore:
    """Get the process-wide record store selected by settings."""
    return create_record_store()


StoreDep = Annotated[RecordStore, Depends(get_record_store)]


# Repository dependencies
async def get_transaction_repository(store: StoreDep) -> StoreTransactionRepository:
    """Get a TransactionRepository instance."""
    return StoreTransactionRepository(store)


async def get_budget_repository(store: StoreDep) -> StoreBudgetRepository:
    """Get a BudgetRepository instance."""
    return StoreBudgetRepository(store)


async def get_wallet_repository(store: StoreDep) -> StoreWalletRepository:
    """Get a WalletRepository instance."""
    return StoreWalletRepository(store)


async def get_streak_repository(store: StoreDep) -> StoreStreakRepository:
    """Get a StreakRepository instance."""
    return StoreStreakRepository(store)


async def get_ledger_repository(store: StoreDep) -> StoreLedgerRepository:
    """Get a LedgerRepository instance."""
    return StoreLedgerRepository(store)


# Service dependencies
async def get_transaction_service(
    store: StoreDep,
    transaction_repo: Annotated[StoreTransactionRepository, Depends(get_transaction_repository)],
    wallet_repo: Annotated[StoreWalletRepository, Depends(get_wallet_repository)],
    ledger_repo: Annotated[StoreLedgerRepository, Depends(get_ledger_repository)],
) -> TransactionService:
    """Get a TransactionService instance with all dependencies."""
    return TransactionService(
        transaction_repository=transaction_repo,
        wallet_repository=wallet_repo,
        ledger_repository=ledger_repo,
        lock=store.mutation_lock,
    )


async def get_budget_service(
    store: StoreDep,
    budget_repo: Annotated[StoreBudgetRepository, Depends(get_budget_repository)],
    transaction_repo: Annotated[StoreTransactionRepository, Depends(get_transaction_repository)],
) -> BudgetService:
    """Get a BudgetService instance."""
    return BudgetService(
        budget_repository=budget_repo,
        transaction_repository=transaction_repo,
        lock=store.mutation_lock,
    )


async def get_wallet_service(
    store: StoreDep,
    wallet_repo: Annotated[StoreWalletRepository, Depends(get_wallet_repository)],
) -> WalletService:
    """Get a WalletService instance."""
    return WalletService(wallet_repository=wallet_repo, lock=store.mutation_lock)


async def get_summary_service(
    transaction_repo: Annotated[StoreTransactionRepository, Depends(get_transaction_repository)],
) -> SummaryService:
    """Get a SummaryService instance."""
    return SummaryService(transaction_repository=transaction_repo)


async def get_streak_service(
    store: StoreDep,
    streak_repo: Annotated[StoreStreakRepository, Depends(get_streak_repository)],
) -> StreakService:
    """Get a StreakService instance."""
    return StreakService(streak_repository=streak_repo, lock=store.mutation_lock)


def get_category_service() -> CategoryService:
    """Get a CategoryService instance."""
    return CategoryService()
