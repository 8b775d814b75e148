"""CSV export functionality for the holdings snapshot."""

import csv
import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence, Union

from rebalancer.core.exceptions import ValidationError
from rebalancer.domain.views import SnapshotRow

logger = logging.getLogger(__name__)


class SnapshotWriter:
    """
    Writer for the holdings snapshot file.

    Overwrites the file with header-less rows that HoldingsLoader reads back
    with the same value_index: the ticker first, the "$value" in column
    value_index. When the raw rows of the previous file are supplied, each
    ticker keeps its other cells and only the value cell is replaced.
    """

    def __init__(self, value_index: int = 1):
        if value_index < 1:
            raise ValidationError(f"Value column must come after the ticker: {value_index}")
        self._value_index = value_index

    def write(
        self,
        path: Union[str, Path],
        rows: Iterable[SnapshotRow],
        layout: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        """
        Write snapshot rows to a CSV file.

        Args:
            path: Output file path (parent directories are created)
            rows: Rows as produced by the projection functions
            layout: Raw cells per ticker from the file being replaced
        """
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        layout = layout or {}

        count = 0
        with open(file_path, "w", newline="", encoding="utf-8") as csvfile:
            writer = csv.writer(csvfile)
            for row in rows:
                writer.writerow(self._to_cells(row, layout.get(row.ticker)))
                count += 1

        logger.info(f"Wrote {count} holdings to {file_path}")

    def _to_cells(self, row: SnapshotRow, template: Optional[Sequence[str]]) -> list[str]:
        if template is None:
            cells = [row.ticker] + [""] * self._value_index
        else:
            cells = list(template)
            if len(cells) <= self._value_index:
                cells.extend([""] * (self._value_index + 1 - len(cells)))
        cells[0] = row.ticker
        cells[self._value_index] = row.value
        return cells
