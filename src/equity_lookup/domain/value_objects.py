"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe the outcome of parsing
and ingesting equity records but have no conceptual identity.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from equity_lookup.domain.entities import Equity


class RecordRejection(BaseModel):
    """A line that failed schema or field validation."""

    line: str = Field(..., description="Original raw line")
    reason: str = Field(..., description="Human-readable rejection reason")
    field: Optional[str] = Field(
        default=None, description="Schema field that failed, None for field count"
    )
    line_number: Optional[int] = Field(
        default=None, ge=1, description="1-based position in the source"
    )

    model_config = {"frozen": True}


class ParseResult(BaseModel):
    """Outcome of parsing one line: exactly one of record or rejection."""

    record: Optional[Equity] = None
    rejection: Optional[RecordRejection] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> "ParseResult":
        if (self.record is None) == (self.rejection is None):
            raise ValueError("ParseResult needs exactly one of record or rejection")
        return self

    @property
    def ok(self) -> bool:
        return self.record is not None


class IngestReport(BaseModel):
    """Summary of a bulk ingestion run."""

    header: str
    accepted: int = Field(default=0, ge=0)
    replaced: int = Field(default=0, ge=0)
    rejections: List[RecordRejection] = Field(default_factory=list)

    @property
    def rejected(self) -> int:
        return len(self.rejections)

    @property
    def total_lines(self) -> int:
        """Record lines processed, header excluded."""
        return self.accepted + self.rejected
