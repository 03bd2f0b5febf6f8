"""
Error Taxonomy for Equity Lookup.

Three kinds of failure exist:
    - Rejected record: a line fails schema or field validation.
      Recoverable; the line is skipped and reported.
    - Not found: a lookup key is absent. Recoverable; caller decides.
    - Setup fatal: there is no input to ingest at all. Propagates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from equity_lookup.domain.value_objects import RecordRejection


class EquityLookupError(Exception):
    """Base error for this package."""


class FieldValidationError(EquityLookupError):
    """Raised when a single text field fails validation or conversion."""

    def __init__(self, message: str, field: Optional[str] = None, value: str = "") -> None:
        super().__init__(message)
        self.field = field
        self.value = value
        self.message = message


class RecordRejectedError(EquityLookupError):
    """Raised when a caller asks for a record from a line that was rejected."""

    def __init__(self, rejection: "RecordRejection") -> None:
        super().__init__(f"Rejected record: {rejection.reason} ({rejection.line!r})")
        self.rejection = rejection


class EquityNotFoundError(EquityLookupError, KeyError):
    """Raised when a symbol is not present in a store."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"No such equity symbol: {symbol}")
        self.symbol = symbol

    def __str__(self) -> str:
        return f"No such equity symbol: {self.symbol}"


class MissingHeaderError(EquityLookupError):
    """Raised when the input has no header line, so nothing can be ingested."""
