"""
Validation Package - Single-Field Validation.

This package provides the field-level rules applied to each token of
an input line:
    - validate_identifier: Equity symbol charset and length
    - parse_non_negative_integer: Market capitalization
    - parse_non_negative_decimal: Price and P/E ratio

Design Principles:
    - Pure functions, no side effects
    - Clear, actionable error messages
    - Failures raise FieldValidationError carrying the field name
"""

from equity_lookup.errors import FieldValidationError
from equity_lookup.validation.field_validator import (
    parse_non_negative_decimal,
    parse_non_negative_integer,
    validate_identifier,
)

__all__ = [
    "FieldValidationError",
    "parse_non_negative_decimal",
    "parse_non_negative_integer",
    "validate_identifier",
]
