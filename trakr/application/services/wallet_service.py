"""Wallet service - wallet management and default wallet rules."""

import asyncio
from dataclasses import replace
from typing import List

import structlog

from trakr.application.dto import WalletListResponse, WalletRequest, WalletResponse
from trakr.domain.entities import Wallet
from trakr.domain.exceptions import InvalidWalletException, WalletNotFoundException
from trakr.domain.interfaces import WalletRepository

logger = structlog.get_logger(__name__)


class WalletService:
    """
    Application service for wallet use cases.

    At most one wallet is the default. The first wallet created becomes
    the default, and deleting the default promotes the first remaining
    wallet.
    """

    def __init__(self, wallet_repository: WalletRepository, lock: asyncio.Lock | None = None):
        self._wallet_repo = wallet_repository
        self._lock = lock if lock is not None else asyncio.Lock()

    async def list_wallets(self) -> WalletListResponse:
        return WalletListResponse.from_entities(await self._wallet_repo.get_all())

    async def get_wallet(self, wallet_id: str) -> WalletResponse:
        """
        Retrieve a wallet by ID.

        Raises:
            WalletNotFoundException: If wallet not found
        """
        wallet = await self._wallet_repo.get_by_id(wallet_id)
        if wallet is None:
            raise WalletNotFoundException(wallet_id)
        return WalletResponse.from_entity(wallet)

    async def create_wallet(self, request: WalletRequest) -> WalletResponse:
        """
        Create a wallet.

        Raises:
            InvalidWalletException: If request validation fails
        """
        self._validate(request)
        async with self._lock:
            wallets = await self._wallet_repo.get_all()
            wallet = Wallet(
                name=request.name.strip(),
                balance=request.balance,
                currency=request.currency,
                color=request.color,
                icon=request.icon,
                is_default=not wallets,
            )
            await self._wallet_repo.save_all([*wallets, wallet])

        logger.info("wallet_created", wallet_id=wallet.id, is_default=wallet.is_default)
        return WalletResponse.from_entity(wallet)

    async def update_wallet(self, wallet_id: str, request: WalletRequest) -> WalletResponse:
        """
        Edit a wallet's name, balance, currency, color and icon.

        Raises:
            WalletNotFoundException: If wallet not found
            InvalidWalletException: If request validation fails
        """
        self._validate(request)
        async with self._lock:
            wallets = await self._wallet_repo.get_all()
            updated = replace(
                self._find(wallets, wallet_id),
                name=request.name.strip(),
                balance=request.balance,
                currency=request.currency,
                color=request.color,
                icon=request.icon,
            )
            await self._wallet_repo.save_all([updated if w.id == wallet_id else w for w in wallets])

        logger.info("wallet_updated", wallet_id=wallet_id)
        return WalletResponse.from_entity(updated)

    async def delete_wallet(self, wallet_id: str) -> None:
        """
        Delete a wallet. Transactions that reference it are kept.

        Raises:
            WalletNotFoundException: If wallet not found
        """
        async with self._lock:
            wallets = await self._wallet_repo.get_all()
            removed = self._find(wallets, wallet_id)
            remaining = [w for w in wallets if w.id != wallet_id]

            if removed.is_default and remaining:
                remaining[0] = replace(remaining[0], is_default=True)
                logger.info("default_wallet_promoted", wallet_id=remaining[0].id)

            await self._wallet_repo.save_all(remaining)

        logger.info("wallet_deleted", wallet_id=wallet_id)

    async def set_default_wallet(self, wallet_id: str) -> WalletResponse:
        """
        Make one wallet the default and clear the flag on the others.

        Raises:
            WalletNotFoundException: If wallet not found
        """
        async with self._lock:
            wallets = await self._wallet_repo.get_all()
            self._find(wallets, wallet_id)
            updated = [replace(w, is_default=w.id == wallet_id) for w in wallets]
            await self._wallet_repo.save_all(updated)

        logger.info("default_wallet_set", wallet_id=wallet_id)
        return WalletResponse.from_entity(self._find(updated, wallet_id))

    @staticmethod
    def _find(wallets: List[Wallet], wallet_id: str) -> Wallet:
        for wallet in wallets:
            if wallet.id == wallet_id:
                return wallet
        raise WalletNotFoundException(wallet_id)

    @staticmethod
    def _validate(request: WalletRequest) -> None:
        errors = request.validate()
        if errors:
            raise InvalidWalletException("; ".join(errors))
