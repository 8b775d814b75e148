"""
Pytest configuration and fixtures for rebalancer tests.

This module provides:
- Portfolio factory helpers and the reference scenarios
- Temporary data directory with targets/portfolio CSV files
- Settings, service and FastAPI client fixtures
"""

import csv
from fractions import Fraction
from pathlib import Path
from typing import Iterable

import pytest
from fastapi.testclient import TestClient

from rebalancer.api.deps import get_app_settings
from rebalancer.config.settings import Settings, reset_settings
from rebalancer.domain.models import Asset, Portfolio
from rebalancer.main import app
from rebalancer.services import RebalanceEngine, RebalanceService


# =============================================================================
# PORTFOLIO HELPERS
# =============================================================================


def make_portfolio(*rows: tuple[str, str, str]) -> Portfolio:
    """Build a portfolio from (name, target_fraction, value) string triples."""
    return Portfolio(Asset.new(name, target, value) for name, target, value in rows)


def write_csv(path: Path, rows: Iterable[Iterable[str]]) -> Path:
    """Write header-less CSV rows to path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        for row in rows:
            writer.writerow(list(row))
    return path


def read_csv(path: Path) -> list[list[str]]:
    """Read header-less CSV rows from path."""
    with open(path, newline="", encoding="utf-8") as f:
        return [row for row in csv.reader(f)]


# =============================================================================
# SCENARIO FIXTURES
# =============================================================================


@pytest.fixture
def covered_portfolio() -> Portfolio:
    """Scenario A: 60/40 targets, holdings exactly on target."""
    return make_portfolio(("A", "0.6", "600"), ("B", "0.4", "400"))


@pytest.fixture
def constrained_portfolio() -> Portfolio:
    """Scenario B: 50/50 targets, A overweight at 700, B underweight at 300."""
    return make_portfolio(("A", "0.5", "700"), ("B", "0.5", "300"))


@pytest.fixture
def leftover_portfolio() -> Portfolio:
    """Scenario C: a single asset targeting 30% of the portfolio."""
    return make_portfolio(("A", "0.3", "200"))


@pytest.fixture
def engine() -> RebalanceEngine:
    """Provide RebalanceEngine."""
    return RebalanceEngine()


# =============================================================================
# FILE / SETTINGS FIXTURES
# =============================================================================


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """
    Temporary data directory holding:
    - targets.csv: VTI 60, BND 30, VXUS 10, CASH 0 (dropped)
    - portfolio.csv: VTI $600.00, BND $400.00, GLD $50.00 (untracked)
    """
    write_csv(tmp_path / "targets.csv", [
        ["VTI", "60"],
        ["BND", "30"],
        ["VXUS", "10"],
        ["CASH", "0"],
    ])
    write_csv(tmp_path / "portfolio.csv", [
        ["VTI", "$600.00"],
        ["BND", "$400.00"],
        ["GLD", "$50.00"],
    ])
    return tmp_path


@pytest.fixture
def settings(data_dir: Path) -> Settings:
    """Settings pointing at the temporary data directory."""
    reset_settings()
    return Settings(data_dir=data_dir, log_level="DEBUG")


@pytest.fixture
def rebalance_service(settings: Settings) -> RebalanceService:
    """Provide RebalanceService bound to the temporary files."""
    return RebalanceService(settings=settings)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    """Provide FastAPI test client reading the temporary files."""
    app.dependency_overrides[get_app_settings] = lambda: settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def assert_conserved(plan, contribution) -> None:
    """Assert the plan spends exactly the contribution."""
    assert plan.total_buy == Fraction(contribution)
