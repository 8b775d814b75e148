"""Rebalance endpoints: solve a contribution against the stored or an inline portfolio."""

from fastapi import APIRouter, Depends

from rebalancer.api.deps import get_rebalance_engine, get_rebalance_service
from rebalancer.api.schemas import (
    PlanRowResponse,
    PreviewRequest,
    RebalanceRequest,
    RebalanceResponse,
    SnapshotRowResponse,
)
from rebalancer.core.numeric import (
    HUNDRED,
    format_money,
    parse_dollar_amount,
    parse_rational,
    validate_dollar_amount,
)
from rebalancer.core.timezone import now_eastern
from rebalancer.domain.models import Portfolio
from rebalancer.domain.views import RebalancePlan
from rebalancer.services import (
    DISPLAY_HEADERS,
    RebalanceEngine,
    RebalanceService,
    to_display_rows,
    to_snapshot_rows,
)

router = APIRouter(prefix="/rebalance", tags=["rebalance"])


def _plan_response(plan: RebalancePlan, applied: bool) -> RebalanceResponse:
    return RebalanceResponse(
        contribution=format_money(plan.contribution),
        old_total_value=format_money(plan.old_total_value),
        new_total_value=format_money(plan.new_total_value),
        applied=applied,
        headers=DISPLAY_HEADERS,
        rows=[PlanRowResponse.model_validate(row) for row in to_display_rows(plan)],
        snapshot=[SnapshotRowResponse.model_validate(row) for row in to_snapshot_rows(plan)],
        warnings=plan.warnings,
        as_of=now_eastern(),
    )


@router.post("", response_model=RebalanceResponse)
def rebalance(
    data: RebalanceRequest,
    service: RebalanceService = Depends(get_rebalance_service),
) -> RebalanceResponse:
    """
    Invest a contribution into the stored portfolio.

    With apply=true (default) the buys are added to holdings and the
    holdings file is rewritten.
    """
    plan = service.rebalance(data.contribution, apply=data.apply)
    return _plan_response(plan, applied=data.apply)


@router.post("/preview", response_model=RebalanceResponse)
def preview(
    data: PreviewRequest,
    engine: RebalanceEngine = Depends(get_rebalance_engine),
) -> RebalanceResponse:
    """
    Solve against assets supplied in the request; nothing is read or written.

    Assets with a target percent <= 0 are dropped, as when loading targets.csv.
    """
    contribution = validate_dollar_amount(data.contribution)

    targets = []
    holdings = {}
    for item in data.assets:
        percent = parse_rational(item.target_percent)
        if percent <= 0:
            continue
        targets.append((item.name, percent / HUNDRED))
        holdings[item.name] = parse_dollar_amount(item.value)

    plan = engine.solve(contribution, Portfolio.from_sources(targets, holdings))
    return _plan_response(plan, applied=False)
