"""Service layer - rebalancing logic and orchestration."""

from rebalancer.services.rebalance_engine import RebalanceEngine, solve, apply_plan
from rebalancer.services.projection import (
    DISPLAY_HEADERS,
    HOLDING_HEADERS,
    TARGET_HEADERS,
    to_display_rows,
    to_snapshot_rows,
    portfolio_snapshot_rows,
    target_rows,
    holding_rows,
)
from rebalancer.services.rebalance_service import RebalanceService

__all__ = [
    "RebalanceEngine",
    "solve",
    "apply_plan",
    "DISPLAY_HEADERS",
    "HOLDING_HEADERS",
    "TARGET_HEADERS",
    "to_display_rows",
    "to_snapshot_rows",
    "portfolio_snapshot_rows",
    "target_rows",
    "holding_rows",
    "RebalanceService",
]
