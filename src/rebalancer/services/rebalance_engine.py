"""Lazy rebalance solver: direct new cash toward target allocations without selling."""

import logging
import warnings
from fractions import Fraction
from typing import Optional

from rebalancer.core.exceptions import (
    DegenerateAllocationWarning,
    DivisionByZeroError,
    InvalidInputError,
)
from rebalancer.core.numeric import RationalLike, format_money, parse_rational, safe_divide
from rebalancer.domain.models import Asset, Portfolio
from rebalancer.domain.views import AssetPlan, RebalancePlan

logger = logging.getLogger(__name__)


def solve(contribution: RationalLike, portfolio: Portfolio) -> RebalancePlan:
    """
    Compute a buy-only plan for investing a contribution into a portfolio.

    Deficit water-filling:
    1. V' = V + contribution; target_value_i = f_i * V'; deficit_i = target_value_i - value_i
    2. S = sum of positive deficits
    3. If S >= contribution: buy_i = contribution * deficit_i / S for underweight assets
    4. Else: buy_i = deficit_i, then the leftover (contribution - S) is spread over
       all assets pro rata by f_i / T, where T = sum of f_i. If T == 0 the leftover
       goes to the first asset and a DegenerateAllocationWarning is emitted.

    Pure function: the portfolio is not mutated and sum(buy_i) == contribution exactly.

    Raises:
        InvalidInputError: contribution is negative or malformed
        DivisionByZeroError: total portfolio value is zero
    """
    contribution = parse_rational(contribution)
    if contribution < 0:
        raise InvalidInputError(f"Contribution must not be negative: {format_money(contribution)}")

    assets = portfolio.assets
    old_total = portfolio.total_value()
    if old_total == 0:
        raise DivisionByZeroError("current holding fraction of a zero-value portfolio")
    new_total = old_total + contribution

    target_values = [asset.target_fraction * new_total for asset in assets]
    deficits = [target - asset.value for target, asset in zip(target_values, assets)]
    shortfall = sum((d for d in deficits if d > 0), Fraction(0))

    buys = [Fraction(0)] * len(assets)
    leftover = Fraction(0)
    plan_warnings: list[str] = []

    if shortfall >= contribution:
        # Not enough cash to close every gap: split by relative need.
        if shortfall > 0:
            for i, deficit in enumerate(deficits):
                if deficit > 0:
                    buys[i] = contribution * deficit / shortfall
    else:
        for i, deficit in enumerate(deficits):
            if deficit > 0:
                buys[i] = deficit
        leftover = contribution - shortfall
        _distribute_leftover(
            assets, portfolio.total_target_fraction(), buys, leftover, plan_warnings
        )

    items = [
        AssetPlan(
            name=asset.name,
            target_fraction=asset.target_fraction,
            value=asset.value,
            current_fraction=safe_divide(asset.value, old_total, "current holding fraction"),
            new_fraction=safe_divide(asset.value + buy, new_total, "new holding fraction"),
            target_value=target,
            buy_amount=buy,
        )
        for asset, target, buy in zip(assets, target_values, buys)
    ]

    logger.debug(
        f"Solved contribution {format_money(contribution)} over {len(assets)} assets: "
        f"total {format_money(old_total)} -> {format_money(new_total)}, "
        f"shortfall {format_money(shortfall)}, leftover {format_money(leftover)}"
    )

    return RebalancePlan(
        contribution=contribution,
        old_total_value=old_total,
        new_total_value=new_total,
        assets=items,
        leftover=leftover,
        warnings=plan_warnings,
    )


def _distribute_leftover(
    assets: list[Asset],
    total_fraction: Fraction,
    buys: list[Fraction],
    leftover: Fraction,
    plan_warnings: list[str],
) -> None:
    """Spread cash left after all deficits are filled, pro rata by target fraction."""
    if total_fraction == 0:
        if not assets:
            return
        recipient = assets[0].name
        warning = DegenerateAllocationWarning(recipient, format_money(leftover))
        logger.warning(str(warning))
        warnings.warn(warning, stacklevel=3)
        plan_warnings.append(str(warning))
        buys[0] += leftover
        return

    for i, asset in enumerate(assets):
        buys[i] += leftover * asset.target_fraction / total_fraction


def apply_plan(portfolio: Portfolio, plan: RebalancePlan) -> Portfolio:
    """
    Return a new portfolio with each plan buy added to the asset's value.

    The input portfolio is left untouched. Raises NotFoundError if the plan
    names an asset the portfolio does not hold.
    """
    updated = portfolio.copy()
    for item in plan.assets:
        current = updated.get(item.name)
        updated.update_value(item.name, current.value + item.buy_amount)
    return updated


class RebalanceEngine:
    """
    Engine wrapping the lazy rebalance solver.

    Stateless: every call is independent; the caller owns the portfolio.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def solve(self, contribution: RationalLike, portfolio: Portfolio) -> RebalancePlan:
        """Compute the buy plan for a contribution."""
        plan = solve(contribution, portfolio)
        self.logger.info(
            f"Rebalance plan for {format_money(plan.contribution)}: "
            f"{sum(1 for item in plan.assets if item.buy_amount > 0)} of "
            f"{len(plan.assets)} assets receive cash"
        )
        return plan

    def apply(self, portfolio: Portfolio, plan: RebalancePlan) -> Portfolio:
        """Apply a plan's buys, returning the updated portfolio."""
        return apply_plan(portfolio, plan)
