"""Portfolio endpoints: view targets/holdings and edit asset values."""

from fastapi import APIRouter, Depends

from rebalancer.api.deps import get_rebalance_service
from rebalancer.api.schemas import (
    AssetValueUpdate,
    HoldingRowResponse,
    PortfolioResponse,
    TargetRowResponse,
)
from rebalancer.core.numeric import format_money
from rebalancer.core.timezone import now_eastern
from rebalancer.services import (
    HOLDING_HEADERS,
    TARGET_HEADERS,
    RebalanceService,
    holding_rows,
    target_rows,
)

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("", response_model=PortfolioResponse)
def get_portfolio(
    service: RebalanceService = Depends(get_rebalance_service),
) -> PortfolioResponse:
    """Return target allocations and current holdings."""
    portfolio = service.portfolio
    return PortfolioResponse(
        target_headers=TARGET_HEADERS,
        targets=[TargetRowResponse.model_validate(row) for row in target_rows(portfolio)],
        holding_headers=HOLDING_HEADERS,
        holdings=[HoldingRowResponse.model_validate(row) for row in holding_rows(portfolio)],
        total_value=format_money(portfolio.total_value()),
        as_of=now_eastern(),
    )


@router.put("/assets/{ticker}", response_model=HoldingRowResponse)
def update_asset_value(
    ticker: str,
    data: AssetValueUpdate,
    service: RebalanceService = Depends(get_rebalance_service),
) -> HoldingRowResponse:
    """Set the dollar value held in an asset and save the holdings file."""
    asset = service.edit_value(ticker, data.value)
    return HoldingRowResponse(ticker=asset.name, amount=format_money(asset.value))
