"""Projection of solver output into display and persistence rows."""

from rebalancer.core.numeric import format_money, format_percent
from rebalancer.domain.models import Portfolio
from rebalancer.domain.views import (
    HoldingRow,
    PlanRow,
    RebalancePlan,
    SnapshotRow,
    TargetRow,
)

DISPLAY_HEADERS = [
    "Ticker Symbol",
    "Holdings %",
    "New Holdings %",
    "Target Value",
    "$ to buy/sell",
]
TARGET_HEADERS = ["Ticker Symbol", "Allocation"]
HOLDING_HEADERS = ["Ticker Symbol", "Amount (USD)"]


def to_display_rows(plan: RebalancePlan) -> list[PlanRow]:
    """Format each asset plan as a five-column display row, rounded to cents."""
    return [
        PlanRow(
            ticker=item.name,
            holdings_percent=format_percent(item.current_fraction),
            new_holdings_percent=format_percent(item.new_fraction),
            target_value=format_money(item.target_value),
            buy_amount=format_money(item.buy_amount),
        )
        for item in plan.assets
    ]


def to_snapshot_rows(plan: RebalancePlan) -> list[SnapshotRow]:
    """Rows for rewriting the holdings file after the plan is applied."""
    return [
        SnapshotRow(ticker=item.name, value=format_money(item.new_value))
        for item in plan.assets
    ]


def portfolio_snapshot_rows(portfolio: Portfolio) -> list[SnapshotRow]:
    """Rows for writing the holdings file from a portfolio as it stands."""
    return [
        SnapshotRow(ticker=asset.name, value=format_money(asset.value))
        for asset in portfolio
    ]


def target_rows(portfolio: Portfolio) -> list[TargetRow]:
    """Target allocation table: ticker and percentage."""
    return [
        TargetRow(ticker=asset.name, allocation=format_percent(asset.target_fraction))
        for asset in portfolio
    ]


def holding_rows(portfolio: Portfolio) -> list[HoldingRow]:
    """Holdings table: ticker and dollar amount."""
    return [
        HoldingRow(ticker=asset.name, amount=format_money(asset.value))
        for asset in portfolio
    ]
