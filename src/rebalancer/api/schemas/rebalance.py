"""Pydantic schemas for rebalance endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class RebalanceRequest(BaseModel):
    """Request schema for rebalancing the stored portfolio."""

    contribution: str = Field(..., description="Amount to invest, e.g. 1000.00")
    apply: bool = Field(default=True, description="Add buys to holdings and save the snapshot")


class PreviewAssetRequest(BaseModel):
    """An asset supplied inline for a stateless preview."""

    name: str = Field(..., min_length=1, max_length=20, description="Ticker symbol")
    target_percent: str = Field(..., description="Target allocation in percent, e.g. 60")
    value: str = Field(default="0", description="Current dollar value, \"$\" optional")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        name = v.strip()
        if not name:
            raise ValueError("Ticker symbol must not be blank")
        return name


class PreviewRequest(BaseModel):
    """Request schema for a stateless rebalance preview."""

    contribution: str = Field(..., description="Amount to invest, e.g. 1000.00")
    assets: list[PreviewAssetRequest]


class PlanRowResponse(BaseModel):
    """One display row of a rebalance plan."""

    model_config = {"from_attributes": True}

    ticker: str
    holdings_percent: str
    new_holdings_percent: str
    target_value: str
    buy_amount: str


class SnapshotRowResponse(BaseModel):
    """One row of the holdings snapshot after applying a plan."""

    model_config = {"from_attributes": True}

    ticker: str
    value: str


class RebalanceResponse(BaseModel):
    """Response schema for a rebalance plan."""

    contribution: str
    old_total_value: str
    new_total_value: str
    applied: bool
    headers: list[str]
    rows: list[PlanRowResponse]
    snapshot: list[SnapshotRowResponse]
    warnings: list[str] = Field(default_factory=list)
    as_of: Optional[datetime] = None
