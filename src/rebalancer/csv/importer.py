"""CSV import functionality for target allocations and holdings."""

import csv
import logging
from fractions import Fraction
from pathlib import Path
from typing import Union

from rebalancer.core.exceptions import AppError, ValidationError
from rebalancer.core.numeric import HUNDRED, parse_dollar_amount, parse_rational
from rebalancer.domain.models import Portfolio

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _read_rows(path: PathLike) -> list[tuple[int, list[str]]]:
    """Read a header-less CSV file, returning (row_num, cells) for non-blank rows."""
    file_path = Path(path)
    if not file_path.exists():
        raise ValidationError(f"File not found: {path}")

    rows = []
    with open(file_path, newline="", encoding="utf-8") as csvfile:
        reader = csv.reader(csvfile)
        for row_num, row in enumerate(reader, start=1):
            cells = [cell.strip() for cell in row]
            if not any(cells):
                continue
            rows.append((row_num, cells))
    return rows


class TargetsLoader:
    """
    Loader for the target allocations file.

    Expected format (no header): ticker, percentage
    Rows with a percentage <= 0 are dropped; percentages become fractions (60 -> 0.6).
    """

    def load(self, path: PathLike) -> dict[str, Fraction]:
        targets: dict[str, Fraction] = {}

        for row_num, cells in _read_rows(path):
            if len(cells) < 2 or not cells[0]:
                raise ValidationError(f"Row {row_num}: expected ticker and percentage")
            ticker = cells[0]
            try:
                percentage = parse_rational(cells[1])
            except AppError as e:
                raise ValidationError(f"Row {row_num}: {e.message}")

            if percentage <= 0:
                logger.debug(f"Dropping {ticker}: non-positive allocation {cells[1]}")
                continue
            if ticker in targets:
                raise ValidationError(f"Row {row_num}: duplicate ticker {ticker}")

            targets[ticker] = percentage / HUNDRED

        logger.info(f"Loaded {len(targets)} target allocations from {path}")
        return targets


class HoldingsLoader:
    """
    Loader for the portfolio holdings snapshot.

    Expected format (no header): ticker, ..., $value, ...
    The value column is configurable; a leading "$" is stripped before parsing.
    """

    def __init__(self, value_index: int = 1):
        if value_index < 1:
            raise ValidationError(f"Value column must come after the ticker: {value_index}")
        self._value_index = value_index

    def load(self, path: PathLike) -> dict[str, Fraction]:
        holdings, _ = self.load_with_rows(path)
        return holdings

    def load_with_rows(
        self, path: PathLike
    ) -> tuple[dict[str, Fraction], dict[str, list[str]]]:
        """
        Load holdings along with each ticker's raw cells.

        The raw rows let SnapshotWriter rewrite the file in the layout it was read in.
        """
        holdings: dict[str, Fraction] = {}
        raw_rows: dict[str, list[str]] = {}

        for row_num, cells in _read_rows(path):
            if len(cells) <= self._value_index or not cells[0]:
                raise ValidationError(
                    f"Row {row_num}: expected a value in column {self._value_index + 1}"
                )
            ticker = cells[0]
            try:
                value = parse_dollar_amount(cells[self._value_index])
            except AppError as e:
                raise ValidationError(f"Row {row_num}: {e.message}")
            if ticker in holdings:
                raise ValidationError(f"Row {row_num}: duplicate ticker {ticker}")

            holdings[ticker] = value
            raw_rows[ticker] = cells

        logger.info(f"Loaded {len(holdings)} holdings from {path}")
        return holdings, raw_rows


def load_portfolio(
    targets_path: PathLike,
    holdings_path: PathLike,
    value_index: int = 1,
) -> Portfolio:
    """Load both files and join them into a Portfolio."""
    targets = TargetsLoader().load(targets_path)
    holdings = HoldingsLoader(value_index=value_index).load(holdings_path)
    return Portfolio.from_sources(targets, holdings)
