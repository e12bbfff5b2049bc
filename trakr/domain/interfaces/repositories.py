"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional

from trakr.domain.entities import Budget, Streak, Transaction, Wallet


class TransactionRepository(ABC):
    """
    Abstract repository for Transaction persistence.

    The whole collection is read and written at once.
    """

    @abstractmethod
    async def get_all(self) -> List[Transaction]:
        """
        Load every stored transaction.

        Returns:
            All transactions in stored order. Malformed data degrades
            to an empty list rather than raising.
        """
        ...

    @abstractmethod
    async def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """
        Retrieve a transaction by ID.

        Returns:
            The transaction if found, None otherwise
        """
        ...

    @abstractmethod
    async def save_all(self, transactions: List[Transaction]) -> None:
        """Replace the stored collection."""
        ...


class BudgetRepository(ABC):
    """Abstract repository for Budget persistence."""

    @abstractmethod
    async def get_all(self) -> List[Budget]:
        ...

    @abstractmethod
    async def get_by_id(self, budget_id: str) -> Optional[Budget]:
        ...

    @abstractmethod
    async def save_all(self, budgets: List[Budget]) -> None:
        ...


class WalletRepository(ABC):
    """Abstract repository for Wallet persistence."""

    @abstractmethod
    async def get_all(self) -> List[Wallet]:
        ...

    @abstractmethod
    async def get_by_id(self, wallet_id: str) -> Optional[Wallet]:
        ...

    @abstractmethod
    async def save_all(self, wallets: List[Wallet]) -> None:
        ...


class StreakRepository(ABC):
    """Abstract repository for behavioral Streak persistence."""

    @abstractmethod
    async def get_all(self) -> List[Streak]:
        ...

    @abstractmethod
    async def get_by_id(self, streak_id: str) -> Optional[Streak]:
        ...

    @abstractmethod
    async def save_all(self, streaks: List[Streak]) -> None:
        ...


class LedgerRepository(ABC):
    """
    Abstract repository that applies a transaction and its wallet effect.

    Transactions and wallets live under separate keys; this port writes
    both together so a failure cannot leave a balance out of step with
    the transaction list.
    """

    @abstractmethod
    async def commit(
        self,
        transactions: List[Transaction],
        wallets: List[Wallet],
    ) -> None:
        """
        Persist both collections atomically.

        Raises:
            RecordStoreException: If the write fails. Neither collection
                is changed in that case.
        """
        ...
