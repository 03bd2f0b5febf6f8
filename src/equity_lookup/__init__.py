"""
Equity Lookup - Validated Equity Records with Fast Keyed Queries.

Ingests pipe-delimited equity records, validates every field, keeps the
valid records in a symbol-keyed store and answers queries against it:
exact lookup, predicate selection and best-of comparison.

Architecture:
    - Pure field validators feed a record factory
    - The factory never raises on bad input; it returns a rejection
    - A keyed store exposes generic select/reduce primitives
    - A thin service facade composes ingestion and queries

Main Components:
    - domain: Core entities (Equity) and value objects (ParseResult, ...)
    - validation: Single-field validators
    - parsing: Line-to-record factory
    - store: Symbol-keyed container with query primitives
    - queries: Selectors and comparators parameterizing the store
    - service: Application-level facade
    - adapters: Console diagnostics and display formatting
    - config: Configuration models and loaders

Example:
    >>> from equity_lookup import EquityService
    >>> service = EquityService()
    >>> report = service.ingest_all(open("equities.txt"))
    >>> print(service.lowest_pe())

"""

import logging

__version__ = "1.0.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Equity Lookup.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import equity_lookup
        >>> equity_lookup.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Set our package's logger
    logging.getLogger("equity_lookup").setLevel(level)


from equity_lookup.domain.entities import Equity  # noqa: E402
from equity_lookup.service.equity_service import EquityService  # noqa: E402
from equity_lookup.store.equity_store import EquityStore  # noqa: E402

__all__ = [
    "Equity",
    "EquityService",
    "EquityStore",
    "configure_logging",
]
