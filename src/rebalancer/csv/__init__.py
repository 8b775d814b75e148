"""CSV import/export utilities."""

from rebalancer.csv.importer import TargetsLoader, HoldingsLoader, load_portfolio
from rebalancer.csv.exporter import SnapshotWriter

__all__ = [
    "TargetsLoader",
    "HoldingsLoader",
    "load_portfolio",
    "SnapshotWriter",
]
