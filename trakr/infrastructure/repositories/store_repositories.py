"""RecordStore implementations of the repository interfaces."""

from datetime import date
from typing import Callable, Generic, List, Optional, TypeVar

import structlog

from trakr.core.config import settings
from trakr.domain.entities import Budget, Streak, Transaction, Wallet
from trakr.domain.interfaces import (
    BudgetRepository,
    LedgerRepository,
    RecordStore,
    StreakRepository,
    TransactionRepository,
    WalletRepository,
)

from .base import RecordCollection
from .codecs import (
    decode_budget,
    decode_streak,
    decode_transaction,
    decode_wallet,
    encode_budget,
    encode_streak,
    encode_transaction,
    encode_wallet,
)
from .sample_data import (
    default_wallets,
    sample_budgets,
    sample_streaks,
    sample_transactions,
)

logger = structlog.get_logger(__name__)

TRANSACTIONS_KEY = "transactions"
BUDGETS_KEY = "budgets"
WALLETS_KEY = "wallets"
STREAKS_KEY = "behavioralStreaks"

T = TypeVar("T")


def _sample(
    enabled: bool,
    factory: Callable[[date], List[T]],
) -> Optional[Callable[[], List[T]]]:
    if not enabled:
        return None
    return lambda: factory(date.today())


class _StoreRepository(Generic[T]):
    """get_all/get_by_id/save_all over one RecordCollection."""

    def __init__(self, records: RecordCollection[T]):
        self._records = records

    async def get_all(self) -> List[T]:
        return await self._records.load()

    async def get_by_id(self, record_id: str) -> Optional[T]:
        for item in await self._records.load():
            if item.id == record_id:
                return item
        return None

    async def save_all(self, items: List[T]) -> None:
        await self._records.save(items)


class StoreTransactionRepository(_StoreRepository[Transaction], TransactionRepository):
    def __init__(self, store: RecordStore, seed_sample_data: bool | None = None):
        if seed_sample_data is None:
            seed_sample_data = settings.seed_sample_data
        super().__init__(
            RecordCollection(
                store,
                TRANSACTIONS_KEY,
                encode_transaction,
                decode_transaction,
                seed=_sample(seed_sample_data, sample_transactions),
            )
        )


class StoreBudgetRepository(_StoreRepository[Budget], BudgetRepository):
    def __init__(self, store: RecordStore, seed_sample_data: bool | None = None):
        if seed_sample_data is None:
            seed_sample_data = settings.seed_sample_data
        super().__init__(
            RecordCollection(
                store,
                BUDGETS_KEY,
                encode_budget,
                decode_budget,
                seed=_sample(seed_sample_data, sample_budgets),
            )
        )


class StoreWalletRepository(_StoreRepository[Wallet], WalletRepository):
    """Wallets are always seeded with the default cash, bank and savings wallets."""

    def __init__(self, store: RecordStore):
        super().__init__(
            RecordCollection(
                store,
                WALLETS_KEY,
                encode_wallet,
                decode_wallet,
                seed=default_wallets,
            )
        )


class StoreStreakRepository(_StoreRepository[Streak], StreakRepository):
    def __init__(self, store: RecordStore, seed_sample_data: bool | None = None):
        if seed_sample_data is None:
            seed_sample_data = settings.seed_sample_data
        super().__init__(
            RecordCollection(
                store,
                STREAKS_KEY,
                encode_streak,
                decode_streak,
                seed=_sample(seed_sample_data, sample_streaks),
            )
        )


class StoreLedgerRepository(LedgerRepository):
    """
    Writes transactions and wallets with one set_many call.

    The store applies both keys or neither, so a balance can never be
    persisted without the transaction that moved it.
    """

    def __init__(self, store: RecordStore):
        self._store = store
        self._transactions = RecordCollection(
            store, TRANSACTIONS_KEY, encode_transaction, decode_transaction
        )
        self._wallets = RecordCollection(store, WALLETS_KEY, encode_wallet, decode_wallet)

    async def commit(
        self,
        transactions: List[Transaction],
        wallets: List[Wallet],
    ) -> None:
        await self._store.set_many(
            {
                TRANSACTIONS_KEY: self._transactions.dumps(transactions),
                WALLETS_KEY: self._wallets.dumps(wallets),
            }
        )
        logger.debug(
            "ledger_committed",
            transactions=len(transactions),
            wallets=len(wallets),
        )
