"""Pydantic schemas for API request/response."""

from rebalancer.api.schemas.portfolio import (
    TargetRowResponse,
    HoldingRowResponse,
    PortfolioResponse,
    AssetValueUpdate,
)
from rebalancer.api.schemas.rebalance import (
    RebalanceRequest,
    PreviewAssetRequest,
    PreviewRequest,
    PlanRowResponse,
    SnapshotRowResponse,
    RebalanceResponse,
)

__all__ = [
    "TargetRowResponse",
    "HoldingRowResponse",
    "PortfolioResponse",
    "AssetValueUpdate",
    "RebalanceRequest",
    "PreviewAssetRequest",
    "PreviewRequest",
    "PlanRowResponse",
    "SnapshotRowResponse",
    "RebalanceResponse",
]
