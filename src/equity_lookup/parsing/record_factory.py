"""
Record Factory - Build Equity Records from Text Lines.

Parses a line formatted as follows:

    HEADER:Code|Description|Market Cap|Price|P/E Ratio
    IBMUS|International Business Machines|198657057012|182.95|11.18

A line that cannot be parsed never raises; the factory returns a
ParseResult carrying a RecordRejection with the original line instead.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from equity_lookup.domain.entities import Equity
from equity_lookup.domain.value_objects import ParseResult, RecordRejection
from equity_lookup.errors import FieldValidationError, RecordRejectedError
from equity_lookup.validation.field_validator import (
    parse_non_negative_decimal,
    parse_non_negative_integer,
    validate_identifier,
)

DELIMITER = "|"

# Field schema, in line order
FIELD_SYMBOL = "symbol"
FIELD_DESCRIPTION = "description"
FIELD_MARKET_CAP = "market_cap"
FIELD_PRICE = "price"
FIELD_PE_RATIO = "pe_ratio"

SCHEMA: Tuple[str, ...] = (
    FIELD_SYMBOL,
    FIELD_DESCRIPTION,
    FIELD_MARKET_CAP,
    FIELD_PRICE,
    FIELD_PE_RATIO,
)


def _take_verbatim(text: str, field: Optional[str] = None) -> str:
    return text


_CONVERTERS: Tuple[Callable[..., object], ...] = (
    validate_identifier,
    _take_verbatim,
    parse_non_negative_integer,
    parse_non_negative_decimal,
    parse_non_negative_decimal,
)


def split_fields(line: str, delimiter: str = DELIMITER) -> List[str]:
    """Split a line on a single-character delimiter, no escaping."""
    return line.split(delimiter)


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


class EquityTextFactory:
    """Creates Equity objects by parsing delimited lines of text."""

    @property
    def field_count(self) -> int:
        return len(SCHEMA)

    def parse(self, line: str, line_number: Optional[int] = None) -> ParseResult:
        """
        Parse an Equity from one line of text.

        Fields are validated in schema order and parsing stops at the first
        failure. The description is taken verbatim.

        Args:
            line: Raw input line (a trailing newline is ignored)
            line_number: Optional 1-based source position, kept on rejections

        Returns:
            ParseResult with either the record or the rejection
        """
        raw = _strip_terminator(line)
        tokens = split_fields(raw)

        if len(tokens) != self.field_count:
            return self._reject(
                raw,
                f"expected {self.field_count} fields separated by "
                f"'{DELIMITER}', got {len(tokens)}",
                None,
                line_number,
            )

        values = {}
        for name, converter, token in zip(SCHEMA, _CONVERTERS, tokens):
            try:
                values[name] = converter(token, name)
            except FieldValidationError as e:
                return self._reject(raw, e.message, name, line_number)

        return ParseResult(record=Equity(**values))

    def parse_or_raise(self, line: str) -> Equity:
        """
        Parse an Equity from one line of text.

        Raises:
            RecordRejectedError: If the line is rejected
        """
        result = self.parse(line)
        if result.rejection is not None:
            raise RecordRejectedError(result.rejection)
        return result.record

    def _reject(
        self,
        line: str,
        reason: str,
        field: Optional[str],
        line_number: Optional[int],
    ) -> ParseResult:
        return ParseResult(
            rejection=RecordRejection(
                line=line,
                reason=reason,
                field=field,
                line_number=line_number,
            )
        )
