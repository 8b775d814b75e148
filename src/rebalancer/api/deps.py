"""Dependency injection for FastAPI."""

from fastapi import Depends

from rebalancer.config.settings import Settings, get_settings
from rebalancer.services import RebalanceEngine, RebalanceService


def get_app_settings() -> Settings:
    """Provide the current Settings instance."""
    return get_settings()


def get_rebalance_engine() -> RebalanceEngine:
    """Provide RebalanceEngine instance."""
    return RebalanceEngine()


def get_rebalance_service(
    settings: Settings = Depends(get_app_settings),
    engine: RebalanceEngine = Depends(get_rebalance_engine),
) -> RebalanceService:
    """Provide a RebalanceService reading the configured files for this request."""
    return RebalanceService(settings=settings, engine=engine)
