"""Rebalance service: load, edit, solve, apply and save a portfolio session."""

import logging
import threading
from typing import Optional

from rebalancer.config.settings import Settings
from rebalancer.core.numeric import format_money, validate_dollar_amount
from rebalancer.csv import HoldingsLoader, SnapshotWriter, TargetsLoader
from rebalancer.domain.models import Asset, Portfolio
from rebalancer.domain.views import RebalancePlan
from rebalancer.services.projection import portfolio_snapshot_rows
from rebalancer.services.rebalance_engine import RebalanceEngine

logger = logging.getLogger(__name__)

# Shared by every service in the process: one writer of the holdings file at a time
_file_lock = threading.RLock()


class RebalanceService:
    """
    Service orchestrating a rebalancing session.

    Holds one caller-owned Portfolio loaded from the configured targets and
    holdings files. The portfolio only changes through edit_value() or an
    applied rebalance, and is replaced wholesale by load().

    Changes reload the files, modify the portfolio and save it under a
    process-wide lock, so sessions serving concurrent requests never
    overwrite each other's updates.
    """

    def __init__(
        self,
        settings: Settings,
        targets_loader: Optional[TargetsLoader] = None,
        holdings_loader: Optional[HoldingsLoader] = None,
        snapshot_writer: Optional[SnapshotWriter] = None,
        engine: Optional[RebalanceEngine] = None,
    ):
        self._settings = settings
        self._targets_loader = targets_loader or TargetsLoader()
        self._holdings_loader = holdings_loader or HoldingsLoader(
            value_index=settings.portfolio_value_index
        )
        self._snapshot_writer = snapshot_writer or SnapshotWriter(
            value_index=settings.portfolio_value_index
        )
        self._engine = engine or RebalanceEngine()
        self._portfolio: Optional[Portfolio] = None
        self._holdings_rows: dict[str, list[str]] = {}

    @property
    def portfolio(self) -> Portfolio:
        """Current portfolio, loaded from disk on first access."""
        if self._portfolio is None:
            return self.load()
        return self._portfolio

    def load(self) -> Portfolio:
        """(Re)load the portfolio from the targets and holdings files."""
        with _file_lock:
            targets = self._targets_loader.load(self._settings.get_targets_path())
            holdings_path = self._settings.get_portfolio_path()
            if holdings_path.exists():
                holdings, self._holdings_rows = self._holdings_loader.load_with_rows(
                    holdings_path
                )
            else:
                logger.info(f"No holdings file at {holdings_path}; starting from zero values")
                holdings, self._holdings_rows = {}, {}
            self._portfolio = Portfolio.from_sources(targets, holdings)
        return self._portfolio

    def save(self) -> None:
        """Write the current portfolio to the holdings file, keeping its column layout."""
        with _file_lock:
            self._snapshot_writer.write(
                self._settings.get_portfolio_path(),
                portfolio_snapshot_rows(self.portfolio),
                layout=self._holdings_rows,
            )

    def edit_value(self, name: str, amount_text: str) -> Asset:
        """
        Set an asset's dollar value from user-entered text, then save.

        The files are reloaded first so changes saved by other sessions are kept.

        Raises:
            InvalidInputError: text is not a dollar amount like 1000.00
            NotFoundError: asset is not part of the portfolio
        """
        amount = validate_dollar_amount(amount_text)
        with _file_lock:
            asset = self.load().update_value(name, amount)
            self.save()
        logger.info(f"Updated {name} to {format_money(amount)}")
        return asset

    def preview(self, contribution_text: str) -> RebalancePlan:
        """Solve for a contribution without changing the portfolio."""
        contribution = validate_dollar_amount(contribution_text)
        return self._engine.solve(contribution, self.portfolio)

    def rebalance(self, contribution_text: str, apply: bool = True) -> RebalancePlan:
        """
        Solve for a contribution and, if apply is set, add the buys to the
        portfolio and save the snapshot.
        """
        if not apply:
            return self.preview(contribution_text)

        contribution = validate_dollar_amount(contribution_text)
        with _file_lock:
            portfolio = self.load()
            plan = self._engine.solve(contribution, portfolio)
            self._portfolio = self._engine.apply(portfolio, plan)
            self.save()
        return plan
