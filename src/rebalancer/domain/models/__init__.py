"""Domain models package."""

from rebalancer.domain.models.asset import Asset
from rebalancer.domain.models.portfolio import Portfolio, total_value

__all__ = [
    "Asset",
    "Portfolio",
    "total_value",
]
