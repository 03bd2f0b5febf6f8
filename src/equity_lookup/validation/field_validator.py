"""
Field Validator - Validate and Convert Single Text Fields.

Each function either returns the converted value or raises
FieldValidationError. They are pure: no logging, no state.

Rules:
    - Identifier: [A-Z0-9] only, 1..6 characters, no trimming or case folding
    - Non-negative integer: ASCII digits only, fits a signed 64-bit integer
    - Non-negative decimal: ASCII digits and '.', converted with float()

Design Notes:
    - Numeric fields drop leading whitespace only; trailing whitespace fails
      the charset check.
    - The decimal charset check does not count dots. "1.2.3" and "." pass it
      and are rejected by the conversion step instead.
"""

from __future__ import annotations

import math
from typing import Optional

from equity_lookup.domain.entities import MAX_MARKET_CAP
from equity_lookup.errors import FieldValidationError

IDENTIFIER_CHARSET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
IDENTIFIER_MAX_LENGTH = 6

DIGITS = frozenset("0123456789")
DECIMAL_CHARSET = DIGITS | {"."}
NONZERO_DIGITS = DIGITS - {"0"}

# Space, tab, newline, carriage return, backspace
LEADING_WHITESPACE = " \t\n\r\b"

MAX_INT64 = MAX_MARKET_CAP
MAX_INT64_DIGITS = len(str(MAX_INT64))


def validate_identifier(text: str, field: str = "symbol") -> str:
    """
    Validate an equity identifier against the business rules.

    Args:
        text: Raw field text
        field: Field name reported on failure

    Returns:
        The identifier, unchanged

    Raises:
        FieldValidationError: If a character falls outside [A-Z0-9] or the
            length is outside 1..6
    """
    if any(ch not in IDENTIFIER_CHARSET for ch in text):
        raise FieldValidationError(
            f"identifier {text!r} has characters outside [A-Z0-9]", field, text
        )

    if not 1 <= len(text) <= IDENTIFIER_MAX_LENGTH:
        raise FieldValidationError(
            f"identifier length={len(text)} not in 1..{IDENTIFIER_MAX_LENGTH}",
            field,
            text,
        )

    return text


def parse_non_negative_integer(text: str, field: Optional[str] = None) -> int:
    """
    Convert text to a non-negative 64-bit integer.

    Args:
        text: Raw field text
        field: Field name reported on failure

    Returns:
        Converted integer

    Raises:
        FieldValidationError: On empty input, non-digit characters, or a value
            above the signed 64-bit maximum
    """
    stripped = text.lstrip(LEADING_WHITESPACE)

    if not stripped:
        raise FieldValidationError("empty integer field", field, text)

    if any(ch not in DIGITS for ch in stripped):
        raise FieldValidationError(f"{text!r} is not a non-negative integer", field, text)

    # int() refuses very long digit strings, so leading zeros go first and
    # anything longer than the maximum is rejected before conversion
    digits = stripped.lstrip("0") or "0"
    if len(digits) > MAX_INT64_DIGITS:
        raise FieldValidationError(f"{text!r} overflows a 64-bit integer", field, text)

    value = int(digits)
    if value > MAX_INT64:
        raise FieldValidationError(f"{text!r} overflows a 64-bit integer", field, text)

    return value


def parse_non_negative_decimal(text: str, field: Optional[str] = None) -> float:
    """
    Convert text to a non-negative decimal.

    Args:
        text: Raw field text
        field: Field name reported on failure

    Returns:
        Converted float

    Raises:
        FieldValidationError: On characters other than digits and '.', on a
            malformed number such as "1.2.3" or ".", or on overflow or underflow
    """
    stripped = text.lstrip(LEADING_WHITESPACE)

    if any(ch not in DECIMAL_CHARSET for ch in stripped):
        raise FieldValidationError(f"{text!r} is not a non-negative decimal", field, text)

    try:
        value = float(stripped)
    except ValueError:
        raise FieldValidationError(
            f"{text!r} cannot be converted to a decimal", field, text
        ) from None

    if math.isinf(value):
        raise FieldValidationError(f"{text!r} overflows a decimal", field, text)

    if value == 0.0 and any(ch in NONZERO_DIGITS for ch in stripped):
        raise FieldValidationError(f"{text!r} underflows a decimal", field, text)

    return value
