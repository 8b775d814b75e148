"""View models for rebalance outputs."""

from dataclasses import dataclass, field
from fractions import Fraction

from rebalancer.core.exceptions import NotFoundError


@dataclass(frozen=True)
class AssetPlan:
    """Solver result for a single asset. All amounts are exact."""

    name: str
    target_fraction: Fraction
    value: Fraction
    current_fraction: Fraction
    new_fraction: Fraction
    target_value: Fraction
    buy_amount: Fraction

    @property
    def new_value(self) -> Fraction:
        """Dollar value held after the buy is applied."""
        return self.value + self.buy_amount


@dataclass
class RebalancePlan:
    """
    Buy plan for a contribution.

    Assets appear in portfolio order. Invariant: sum of buy_amount == contribution.
    """

    contribution: Fraction
    old_total_value: Fraction
    new_total_value: Fraction
    assets: list[AssetPlan] = field(default_factory=list)
    leftover: Fraction = field(default_factory=lambda: Fraction(0))
    warnings: list[str] = field(default_factory=list)

    @property
    def total_buy(self) -> Fraction:
        return sum((item.buy_amount for item in self.assets), Fraction(0))

    def get(self, name: str) -> AssetPlan:
        for item in self.assets:
            if item.name == name:
                return item
        raise NotFoundError("Asset plan", name)


@dataclass(frozen=True)
class PlanRow:
    """Display row: ticker, holdings %, new holdings %, target value, amount to buy."""

    ticker: str
    holdings_percent: str
    new_holdings_percent: str
    target_value: str
    buy_amount: str

    def as_list(self) -> list[str]:
        return [
            self.ticker,
            self.holdings_percent,
            self.new_holdings_percent,
            self.target_value,
            self.buy_amount,
        ]


@dataclass(frozen=True)
class SnapshotRow:
    """Persistence row for the holdings file: ticker and "$"-prefixed value."""

    ticker: str
    value: str

    def as_list(self) -> list[str]:
        return [self.ticker, self.value]


@dataclass(frozen=True)
class TargetRow:
    """Target allocation display row."""

    ticker: str
    allocation: str


@dataclass(frozen=True)
class HoldingRow:
    """Current holdings display row."""

    ticker: str
    amount: str
