"""Wallet-related domain exceptions."""

from .base import TrakrException


class WalletNotFoundException(TrakrException):
    """Raised when a wallet cannot be found."""

    def __init__(self, wallet_id: str):
        super().__init__(
            message=f"Wallet not found: {wallet_id}",
            code="WALLET_NOT_FOUND",
        )
        self.wallet_id = wallet_id


class InvalidWalletException(TrakrException):
    """Raised when a wallet is created or edited with invalid fields."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_WALLET",
        )
