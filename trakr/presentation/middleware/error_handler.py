"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from trakr.domain.exceptions import (
    BudgetNotFoundException,
    CategoryNotFoundException,
    RecordStoreException,
    RemoteStoreException,
    RemoteStoreTimeoutException,
    StreakNotFoundException,
    TrakrException,
    TransactionNotFoundException,
    WalletNotFoundException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

NOT_FOUND_EXCEPTIONS = (
    TransactionNotFoundException,
    BudgetNotFoundException,
    WalletNotFoundException,
    StreakNotFoundException,
    CategoryNotFoundException,
)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": code, "message": message, "request_id": get_request_id()},
    )


def _domain_response(status_code: int, exc: TrakrException) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={**exc.to_dict(), "request_id": get_request_id()},
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses. Handlers are
    matched on the most specific exception class.
    """

    async def not_found_handler(request: Request, exc: TrakrException) -> JSONResponse:
        """Handle missing transactions, budgets, wallets, streaks and categories."""
        return _domain_response(404, exc)

    for exc_class in NOT_FOUND_EXCEPTIONS:
        app.add_exception_handler(exc_class, not_found_handler)

    @app.exception_handler(RemoteStoreTimeoutException)
    async def remote_store_timeout_handler(
        request: Request,
        exc: RemoteStoreTimeoutException,
    ) -> JSONResponse:
        """Handle remote record store timeouts."""
        logger.error("remote_store_timeout", request_id=get_request_id())
        return _error_response(
            503,
            exc.code,
            "Service temporarily unavailable. Please try again.",
        )

    @app.exception_handler(RemoteStoreException)
    async def remote_store_error_handler(
        request: Request,
        exc: RemoteStoreException,
    ) -> JSONResponse:
        """Handle remote record store errors."""
        logger.error(
            "remote_store_error",
            request_id=get_request_id(),
            message=exc.message,
            status_code=exc.status_code,
        )
        return _error_response(
            503,
            exc.code,
            "Unable to reach storage. Please try again later.",
        )

    @app.exception_handler(RecordStoreException)
    async def record_store_error_handler(
        request: Request,
        exc: RecordStoreException,
    ) -> JSONResponse:
        """Handle local record store failures."""
        logger.error(
            "record_store_error",
            request_id=get_request_id(),
            message=exc.message,
            key=exc.key,
        )
        return _error_response(503, exc.code, "Storage is unavailable. Please try again later.")

    @app.exception_handler(TrakrException)
    async def domain_exception_handler(
        request: Request,
        exc: TrakrException,
    ) -> JSONResponse:
        """Handle validation and other domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _domain_response(400, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
