"""Pydantic schemas for portfolio endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TargetRowResponse(BaseModel):
    """Target allocation row, e.g. VTI / 60.00%."""

    model_config = {"from_attributes": True}

    ticker: str
    allocation: str


class HoldingRowResponse(BaseModel):
    """Current holding row, e.g. VTI / $600.00."""

    model_config = {"from_attributes": True}

    ticker: str
    amount: str


class PortfolioResponse(BaseModel):
    """Response schema for the current portfolio."""

    target_headers: list[str]
    targets: list[TargetRowResponse]
    holding_headers: list[str]
    holdings: list[HoldingRowResponse]
    total_value: str
    as_of: Optional[datetime] = None


class AssetValueUpdate(BaseModel):
    """Request schema for editing an asset's dollar value."""

    value: str = Field(..., description="Dollar amount, e.g. 1000.00")
