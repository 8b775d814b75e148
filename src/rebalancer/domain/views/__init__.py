"""View models for service outputs."""

from rebalancer.domain.views.plan import (
    AssetPlan,
    RebalancePlan,
    PlanRow,
    SnapshotRow,
    TargetRow,
    HoldingRow,
)

__all__ = [
    "AssetPlan",
    "RebalancePlan",
    "PlanRow",
    "SnapshotRow",
    "TargetRow",
    "HoldingRow",
]
