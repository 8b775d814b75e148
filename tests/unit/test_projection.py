"""
Unit tests for result projection.

Tests cover:
- Five-column display rows
- Snapshot rows for persistence
- Target and holdings tables
"""

from rebalancer.domain.models import Portfolio
from rebalancer.domain.views import PlanRow, SnapshotRow
from rebalancer.services import (
    DISPLAY_HEADERS,
    holding_rows,
    portfolio_snapshot_rows,
    solve,
    target_rows,
    to_display_rows,
    to_snapshot_rows,
)

from tests.conftest import make_portfolio


class TestDisplayRows:
    """Tests for to_display_rows."""

    def test_fully_covered_rows(self, covered_portfolio: Portfolio):
        """
        GIVEN scenario A solved with $100.00
        WHEN I project the plan for display
        THEN each row shows holdings %, new %, target $ and buy $
        """
        rows = to_display_rows(solve("100.00", covered_portfolio))

        assert rows == [
            PlanRow("A", "60.00%", "60.00%", "$660.00", "$60.00"),
            PlanRow("B", "40.00%", "40.00%", "$440.00", "$40.00"),
        ]

    def test_constrained_rows(self, constrained_portfolio: Portfolio):
        rows = to_display_rows(solve("200.00", constrained_portfolio))

        assert rows[0].as_list() == ["A", "70.00%", "58.33%", "$600.00", "$0.00"]
        assert rows[1].as_list() == ["B", "30.00%", "41.67%", "$600.00", "$200.00"]

    def test_rounding_happens_only_at_format(self):
        """
        GIVEN three equal deficits and a contribution that does not split in cents
        WHEN I project the plan
        THEN each buy shows the rounded third
        """
        portfolio = make_portfolio(
            ("X", "0.2", "0"), ("Y", "0.2", "0"), ("Z", "0.2", "0"), ("W", "0.4", "1000"),
        )
        plan = solve("100.00", portfolio)
        rows = to_display_rows(plan)

        assert [row.buy_amount for row in rows] == ["$33.33", "$33.33", "$33.33", "$0.00"]
        assert plan.total_buy == 100

    def test_headers(self):
        assert DISPLAY_HEADERS == [
            "Ticker Symbol",
            "Holdings %",
            "New Holdings %",
            "Target Value",
            "$ to buy/sell",
        ]
        assert len(DISPLAY_HEADERS) == len(PlanRow("A", "", "", "", "").as_list())


class TestSnapshotRows:
    """Tests for snapshot projections."""

    def test_snapshot_after_plan(self, leftover_portfolio: Portfolio):
        rows = to_snapshot_rows(solve("500.00", leftover_portfolio))
        assert rows == [SnapshotRow("A", "$700.00")]

    def test_snapshot_rounds_to_cents(self):
        portfolio = make_portfolio(("X", "0.5", "0"), ("Y", "0.25", "0"), ("Z", "0.25", "1000"))
        rows = to_snapshot_rows(solve("100.00", portfolio))
        assert [row.value for row in rows] == ["$66.67", "$33.33", "$1000.00"]

    def test_portfolio_snapshot(self, covered_portfolio: Portfolio):
        rows = portfolio_snapshot_rows(covered_portfolio)
        assert [row.as_list() for row in rows] == [["A", "$600.00"], ["B", "$400.00"]]


class TestTables:
    """Tests for target and holdings tables."""

    def test_target_rows(self, covered_portfolio: Portfolio):
        rows = target_rows(covered_portfolio)
        assert [(r.ticker, r.allocation) for r in rows] == [("A", "60.00%"), ("B", "40.00%")]

    def test_holding_rows(self, constrained_portfolio: Portfolio):
        rows = holding_rows(constrained_portfolio)
        assert [(r.ticker, r.amount) for r in rows] == [("A", "$700.00"), ("B", "$300.00")]
