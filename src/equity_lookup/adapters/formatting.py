"""
Display Formatting.

Renders equities for console output. Price, market capitalization (in the
configured unit, millions by default) and P/E ratio are printed fixed-point.
"""

from __future__ import annotations

from typing import Iterable, List

from equity_lookup.domain.entities import (
    MARKET_CAP_UNIT_LABELS,
    MARKET_CAP_UNIT_MILLIONS,
    Equity,
)


def format_equity(
    equity: Equity,
    precision: int = 3,
    market_cap_unit: int = MARKET_CAP_UNIT_MILLIONS,
) -> str:
    """
    Format one equity as a single line.

    Example:
        code: IBMUS description: International Business Machines
        last price: 182.950 market cap: 198657.057 Million  P/E: 11.180
        (printed on one line)
    """
    cap = equity.market_cap / market_cap_unit
    label = MARKET_CAP_UNIT_LABELS[market_cap_unit]
    return (
        f"code: {equity.symbol}"
        f" description: {equity.description}"
        f" last price: {equity.price:.{precision}f}"
        f" market cap: {cap:.{precision}f} {label} "
        f" P/E: {equity.pe_ratio:.{precision}f}"
    )


def format_equities(
    equities: Iterable[Equity],
    precision: int = 3,
    market_cap_unit: int = MARKET_CAP_UNIT_MILLIONS,
) -> List[str]:
    return [format_equity(e, precision, market_cap_unit) for e in equities]
