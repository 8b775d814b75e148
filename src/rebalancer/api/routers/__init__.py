"""API routers package."""

from rebalancer.api.routers.portfolio import router as portfolio_router
from rebalancer.api.routers.rebalance import router as rebalance_router

__all__ = [
    "portfolio_router",
    "rebalance_router",
]
