"""Transaction service - records, lists and deletes transactions."""

import asyncio
from typing import List

import structlog

from trakr.application.dto import (
    CreateTransactionRequest,
    TransactionQuery,
    TransactionResponse,
)
from trakr.core.metrics import record_transaction_applied
from trakr.domain.entities import Transaction, TransactionType, Wallet
from trakr.domain.exceptions import InvalidTransactionException, TransactionNotFoundException
from trakr.domain.interfaces import (
    LedgerRepository,
    TransactionRepository,
    WalletRepository,
)
from trakr.service.aggregation import apply_filters

logger = structlog.get_logger(__name__)


class TransactionService:
    """
    Application service for transaction use cases.

    Adding or deleting a transaction moves the balance of the wallet it
    references. The transaction list and the wallet list are written in
    one ledger commit, so either both change or neither does. The load
    and the commit run under one lock shared by every service on the
    same store, so overlapping requests cannot drop each other's writes.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        wallet_repository: WalletRepository,
        ledger_repository: LedgerRepository,
        lock: asyncio.Lock | None = None,
    ):
        self._transaction_repo = transaction_repository
        self._wallet_repo = wallet_repository
        self._ledger_repo = ledger_repository
        self._lock = lock if lock is not None else asyncio.Lock()

    async def list_transactions(
        self,
        query: TransactionQuery | None = None,
    ) -> List[TransactionResponse]:
        """
        List transactions in stored order (newest entries first), optionally filtered.

        Raises:
            InvalidTransactionException: If the type filter is unknown
        """
        query = query or TransactionQuery()
        transaction_type = None
        if query.type is not None:
            try:
                transaction_type = TransactionType(query.type)
            except ValueError:
                raise InvalidTransactionException("type must be income or expense") from None

        transactions = apply_filters(
            await self._transaction_repo.get_all(),
            start=query.start,
            end=query.end,
            transaction_type=transaction_type,
            category_id=query.category,
            wallet_id=query.wallet_id,
        )
        return [TransactionResponse.from_entity(tx) for tx in transactions]

    async def get_transaction(self, transaction_id: str) -> TransactionResponse:
        """
        Retrieve a transaction by ID.

        Raises:
            TransactionNotFoundException: If transaction not found
        """
        transaction = await self._transaction_repo.get_by_id(transaction_id)
        if transaction is None:
            raise TransactionNotFoundException(transaction_id)
        return TransactionResponse.from_entity(transaction)

    async def add_transaction(self, request: CreateTransactionRequest) -> TransactionResponse:
        """
        Record a transaction and apply it to its wallet.

        A wallet_id that matches no wallet is kept on the transaction but
        moves no balance.

        Args:
            request: The transaction to record

        Returns:
            TransactionResponse for the stored transaction

        Raises:
            InvalidTransactionException: If request validation fails
            RecordStoreException: If the ledger commit fails
        """
        errors = request.validate()
        if errors:
            raise InvalidTransactionException("; ".join(errors))

        transaction = request.to_entity()
        log = logger.bind(
            transaction_id=transaction.id,
            type=transaction.type.value,
            wallet_id=transaction.wallet_id,
        )

        async with self._lock:
            transactions = await self._transaction_repo.get_all()
            wallets = await self._wallet_repo.get_all()
            wallets = self._move_balance(wallets, transaction, Wallet.apply, log)
            await self._ledger_repo.commit([transaction, *transactions], wallets)

        record_transaction_applied("added", transaction.type.value)

        log.info("transaction_added", amount=str(transaction.amount), category=transaction.category)
        return TransactionResponse.from_entity(transaction)

    async def delete_transaction(self, transaction_id: str) -> None:
        """
        Delete a transaction and revert its wallet effect.

        Raises:
            TransactionNotFoundException: If transaction not found
            RecordStoreException: If the ledger commit fails
        """
        async with self._lock:
            transactions = await self._transaction_repo.get_all()
            transaction = next((tx for tx in transactions if tx.id == transaction_id), None)
            if transaction is None:
                logger.warning("transaction_not_found", transaction_id=transaction_id)
                raise TransactionNotFoundException(transaction_id)

            log = logger.bind(
                transaction_id=transaction.id,
                type=transaction.type.value,
                wallet_id=transaction.wallet_id,
            )

            wallets = await self._wallet_repo.get_all()
            wallets = self._move_balance(wallets, transaction, Wallet.revert, log)
            remaining = [tx for tx in transactions if tx.id != transaction_id]
            await self._ledger_repo.commit(remaining, wallets)

        record_transaction_applied("deleted", transaction.type.value)

        log.info("transaction_deleted")

    @staticmethod
    def _move_balance(wallets: List[Wallet], transaction: Transaction, move, log) -> List[Wallet]:
        """Return the wallet list with move() applied to the referenced wallet."""
        if transaction.wallet_id is None:
            return wallets

        if not any(w.id == transaction.wallet_id for w in wallets):
            log.warning("transaction_wallet_not_found")
            return wallets

        return [
            move(w, transaction) if w.id == transaction.wallet_id else w
            for w in wallets
        ]
