"""Portfolio domain model."""

import logging
from fractions import Fraction
from typing import Iterable, Iterator, Mapping, Optional, Union

from rebalancer.core.exceptions import InvalidInputError, NotFoundError
from rebalancer.core.numeric import RationalLike
from rebalancer.domain.models.asset import Asset

logger = logging.getLogger(__name__)

TargetSource = Union[Mapping[str, RationalLike], Iterable[tuple[str, RationalLike]]]


class Portfolio:
    """
    Ordered collection of assets keyed by ticker.

    Insertion order is kept for display and for the degenerate-allocation
    fallback, but carries no other meaning. Names are unique.
    """

    def __init__(self, assets: Optional[Iterable[Asset]] = None):
        self._assets: list[Asset] = []
        self._index: dict[str, int] = {}
        for asset in assets or []:
            self.add(asset)

    @classmethod
    def from_sources(
        cls,
        targets: TargetSource,
        holdings: Mapping[str, RationalLike],
    ) -> "Portfolio":
        """
        Join target fractions with current holdings on ticker.

        - Ticker in targets but not holdings: included with value 0
        - Ticker in holdings but not targets: excluded (untracked by the policy)

        Order follows the targets source.
        """
        pairs = targets.items() if isinstance(targets, Mapping) else targets
        portfolio = cls()
        for name, target_fraction in pairs:
            value = holdings.get(name, 0)
            portfolio.add(Asset.new(name, target_fraction, value))

        for name in holdings:
            if name not in portfolio:
                logger.debug(f"Holding {name} has no target allocation; excluded")

        return portfolio

    def add(self, asset: Asset) -> None:
        """Append an asset. Raises InvalidInputError if the name is already present."""
        if asset.name in self._index:
            raise InvalidInputError(f"Duplicate asset in portfolio: {asset.name}")
        self._index[asset.name] = len(self._assets)
        self._assets.append(asset)

    def get(self, name: str) -> Asset:
        """Look up an asset by ticker."""
        position = self._index.get(name)
        if position is None:
            raise NotFoundError("Asset", name)
        return self._assets[position]

    def update_value(self, name: str, value: RationalLike) -> Asset:
        """Replace the dollar value held in an asset. Returns the updated asset."""
        position = self._index.get(name)
        if position is None:
            raise NotFoundError("Asset", name)
        updated = self._assets[position].with_value(value)
        self._assets[position] = updated
        return updated

    def total_value(self) -> Fraction:
        """Exact sum of all asset values."""
        return sum((asset.value for asset in self._assets), Fraction(0))

    def total_target_fraction(self) -> Fraction:
        """Exact sum of all target fractions (may be below 1)."""
        return sum((asset.target_fraction for asset in self._assets), Fraction(0))

    def copy(self) -> "Portfolio":
        """Return an independent portfolio with the same assets."""
        return Portfolio(self._assets)

    @property
    def names(self) -> list[str]:
        return [asset.name for asset in self._assets]

    @property
    def assets(self) -> list[Asset]:
        return list(self._assets)

    def __iter__(self) -> Iterator[Asset]:
        return iter(list(self._assets))

    def __len__(self) -> int:
        return len(self._assets)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Portfolio):
            return NotImplemented
        return self._assets == other._assets

    def __repr__(self) -> str:
        return f"Portfolio({self._assets!r})"


def total_value(portfolio: Portfolio) -> Fraction:
    """Exact sum of all asset values in a portfolio."""
    return portfolio.total_value()
