"""
Domain Layer - Core Business Entities and Value Objects.

This package contains the core domain model for Equity Lookup.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - Equity: A validated, immutable equity record

Value Objects:
    - RecordRejection: A line that failed validation
    - ParseResult: Record-or-rejection outcome of parsing one line
    - IngestReport: Summary of a bulk ingestion run

Design Principles:
    - Immutable (frozen models)
    - No infrastructure dependencies
"""

from equity_lookup.domain.entities import Equity
from equity_lookup.domain.value_objects import (
    IngestReport,
    ParseResult,
    RecordRejection,
)

__all__ = [
    "Equity",
    "IngestReport",
    "ParseResult",
    "RecordRejection",
]
