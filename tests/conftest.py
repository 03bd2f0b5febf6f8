"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from equity_lookup.config.models import LookupConfig
from equity_lookup.domain.entities import Equity
from equity_lookup.parsing.record_factory import EquityTextFactory
from equity_lookup.service.equity_service import EquityService
from equity_lookup.store.equity_store import EquityStore

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def input000_path() -> Path:
    """Path to the sample equity data file."""
    return FIXTURES_DIR / "input000.txt"


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return FIXTURES_DIR / "sample_config.yaml"


@pytest.fixture
def default_config() -> LookupConfig:
    """Create default lookup configuration."""
    return LookupConfig()


@pytest.fixture
def factory() -> EquityTextFactory:
    """Create record factory for testing."""
    return EquityTextFactory()


@pytest.fixture
def sample_equity() -> Equity:
    """Create a sample valid equity."""
    return Equity(
        symbol="IBMUS",
        description="International Business Machines",
        market_cap=198657057012,
        price=182.95,
        pe_ratio=11.18,
    )


@pytest.fixture
def sample_equities() -> List[Equity]:
    """Create a list of sample equities, deliberately out of symbol order."""
    return [
        Equity(
            symbol="MSFTUS",
            description="Microsoft Corp",
            market_cap=2500000000000,
            price=310.00,
            pe_ratio=9.50,
        ),
        Equity(
            symbol="IBMUS",
            description="International Business Machines",
            market_cap=198657057012,
            price=182.95,
            pe_ratio=11.18,
        ),
        Equity(
            symbol="AAPLUS",
            description="Apple Inc",
            market_cap=2950000000000,
            price=189.50,
            pe_ratio=29.40,
        ),
        Equity(
            symbol="TUS",
            description="AT&T Inc",
            market_cap=125000000000,
            price=17.40,
            pe_ratio=6.00,
        ),
    ]


@pytest.fixture
def populated_store(sample_equities: List[Equity]) -> EquityStore:
    """Store holding the sample equities."""
    store = EquityStore()
    for equity in sample_equities:
        store.insert(equity)
    return store


@pytest.fixture
def loaded_service(input000_path: Path) -> EquityService:
    """Service loaded from the sample data file."""
    service = EquityService()
    with open(input000_path, encoding="utf-8") as fh:
        service.ingest_all(fh)
    return service
