"""Domain layer - pure business models with no external dependencies."""

from rebalancer.domain.models import Asset, Portfolio, total_value
from rebalancer.domain.views import (
    AssetPlan,
    RebalancePlan,
    PlanRow,
    SnapshotRow,
    TargetRow,
    HoldingRow,
)

__all__ = [
    "Asset",
    "Portfolio",
    "total_value",
    "AssetPlan",
    "RebalancePlan",
    "PlanRow",
    "SnapshotRow",
    "TargetRow",
    "HoldingRow",
]
