"""
Core Domain Entities.

This module defines the fundamental entity of the Equity Lookup domain:
a single validated equity record.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# Largest market capitalization representable as a signed 64-bit integer
MAX_MARKET_CAP = 2**63 - 1

MARKET_CAP_UNIT_MILLIONS = 1_000_000

# Display label for each supported market cap divisor
MARKET_CAP_UNIT_LABELS = {
    1: "USD",
    1_000: "Thousand",
    1_000_000: "Million",
    1_000_000_000: "Billion",
}


class Equity(BaseModel):
    """Represents the properties of a single equity."""

    symbol: str = Field(
        ...,
        min_length=1,
        max_length=6,
        pattern=r"^[A-Z0-9]+$",
        description="Equity name/symbol",
    )
    description: str = Field(default="", description="Plain-text description")
    market_cap: int = Field(
        ..., ge=0, le=MAX_MARKET_CAP, description="Market capitalization, USD"
    )
    price: float = Field(..., ge=0, description="Price, USD")
    pe_ratio: float = Field(..., description="P/E ratio at the current price")

    model_config = {"frozen": True}
