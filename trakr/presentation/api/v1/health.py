"""Liveness and storage reachability."""

import structlog
from fastapi import APIRouter
from pydantic import BaseModel, Field

from trakr import __version__
from trakr.core.dependencies import StoreDep
from trakr.domain.exceptions import RecordStoreException
from trakr.infrastructure.repositories import WALLETS_KEY

logger = structlog.get_logger(__name__)

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = Field(..., description="healthy, or degraded when storage is unreachable")
    version: str
    storage_backend: str
    storage_reachable: bool


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Reports the service version and whether the record store answers a read.",
)
async def health_check(store: StoreDep) -> HealthResponse:
    try:
        await store.get(WALLETS_KEY)
        reachable = True
    except RecordStoreException as e:
        logger.warning("health_storage_unreachable", error=e.message)
        reachable = False

    return HealthResponse(
        status="healthy" if reachable else "degraded",
        version=__version__,
        storage_backend=store.backend,
        storage_reachable=reachable,
    )
