"""
Parsing Package - Line-to-Record Factory.

Components:
    - EquityTextFactory: Splits a '|' delimited line and validates each field
    - SCHEMA: Ordered field names of an input line
"""

from equity_lookup.parsing.record_factory import (
    DELIMITER,
    SCHEMA,
    EquityTextFactory,
    split_fields,
)

__all__ = [
    "DELIMITER",
    "SCHEMA",
    "EquityTextFactory",
    "split_fields",
]
