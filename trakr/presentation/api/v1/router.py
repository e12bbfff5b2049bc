from fastapi import APIRouter

from .budgets import budget_router
from .categories import category_router
from .health import health_router
from .streaks import streak_router
from .summary import summary_router
from .transactions import transaction_router
from .wallets import wallet_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(transaction_router, tags=["Transactions"])
router.include_router(budget_router, tags=["Budgets"])
router.include_router(wallet_router, tags=["Wallets"])
router.include_router(summary_router, tags=["Summary"])
router.include_router(streak_router, tags=["Streaks"])
router.include_router(category_router, tags=["Categories"])
