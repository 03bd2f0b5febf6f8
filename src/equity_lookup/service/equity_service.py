"""
Equity Service - Application-Level Facade.

The EquityService owns an EquityStore, fills it from a sequence of text
lines through the EquityTextFactory and answers the application queries.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Protocol

from equity_lookup.config.models import LookupConfig
from equity_lookup.domain.entities import Equity
from equity_lookup.domain.value_objects import IngestReport, RecordRejection
from equity_lookup.errors import MissingHeaderError
from equity_lookup.parsing.record_factory import EquityTextFactory
from equity_lookup.queries.predicates import LowestPEComparator, PERangeSelector
from equity_lookup.store.equity_store import EquityStore

logger = logging.getLogger(__name__)


class AuditLoggerProtocol(Protocol):
    """Protocol for ingestion diagnostics loggers."""

    def log_inserted(self, symbol: str, replaced: bool = False) -> None:
        ...

    def log_rejected(self, rejection: RecordRejection) -> None:
        ...

    def log_summary(self, report: IngestReport) -> None:
        ...


class EquityService:
    """Owns the equity store and provides application-level queries."""

    def __init__(
        self,
        config: Optional[LookupConfig] = None,
        factory: Optional[EquityTextFactory] = None,
        store: Optional[EquityStore] = None,
        audit_logger: Optional[AuditLoggerProtocol] = None,
    ) -> None:
        """
        Initialize service with its dependencies.

        Args:
            config: Lookup configuration (default: LookupConfig())
            factory: Line parser (default: EquityTextFactory())
            store: Store to fill (default: a new empty EquityStore)
            audit_logger: Optional per-line diagnostics collaborator
        """
        self.config = config or LookupConfig()
        self.factory = factory or EquityTextFactory()
        self._store = store if store is not None else EquityStore()
        self.audit_logger = audit_logger

    @property
    def store(self) -> EquityStore:
        return self._store

    def ingest_all(self, lines: Iterable[str]) -> IngestReport:
        """
        Parse every line and store the valid records.

        The first line is a header and is discarded without validation.
        Lines that fail validation are skipped and reported; they never
        abort ingestion.

        Args:
            lines: Text lines, e.g. an open file

        Returns:
            IngestReport with counts and rejections

        Raises:
            MissingHeaderError: If there is no line at all
        """
        iterator = iter(lines)
        try:
            header = next(iterator)
        except StopIteration:
            logger.error("No header line in input")
            raise MissingHeaderError("No header line in input") from None

        report = IngestReport(header=header.rstrip("\r\n"))

        for line_number, line in enumerate(iterator, start=2):
            result = self.factory.parse(line, line_number=line_number)

            if result.rejection is not None:
                report.rejections.append(result.rejection)
                logger.warning(
                    f"Skipping line {line_number}: {result.rejection.reason}"
                )
                if self.audit_logger is not None:
                    self.audit_logger.log_rejected(result.rejection)
                continue

            equity = result.record
            replaced = self._store.insert(equity)
            report.accepted += 1
            if replaced:
                report.replaced += 1

            if self.config.ingest.log_inserted:
                logger.debug(f"Inserted {equity.symbol}")
                if self.audit_logger is not None:
                    self.audit_logger.log_inserted(equity.symbol, replaced)

        logger.info(
            f"Ingestion complete: {report.accepted} accepted, "
            f"{report.replaced} replaced, {report.rejected} rejected"
        )
        if self.audit_logger is not None:
            self.audit_logger.log_summary(report)

        return report

    def lookup(self, symbol: str) -> Optional[Equity]:
        """
        Return the equity with the given symbol, None if not found.

        Args:
            symbol: Exact equity symbol

        Returns:
            Equity or None
        """
        equity = self._store.find(symbol)
        if equity is None:
            logger.info(f"No such equity symbol: {symbol}")
        return equity

    def all_keys(self) -> List[str]:
        """All security symbols, ordered alphabetically."""
        return self._store.symbols()

    def all_security_codes(self) -> str:
        """All security symbols, one per line, ordered alphabetically."""
        return "".join(f"{symbol}\n" for symbol in self.all_keys())

    def lowest_pe(self) -> Optional[str]:
        """
        Symbol of the equity with the lowest P/E ratio.

        Ties are broken by lowest price. None if the store is empty.
        """
        best = self._store.reduce_by_comparator(LowestPEComparator())
        return best.symbol if best is not None else None

    def select_pe_range(self, min_pe: float, max_pe: float) -> EquityStore:
        """
        Equities whose P/E ratio lies in [min_pe, max_pe].

        Args:
            min_pe: Lower bound (inclusive)
            max_pe: Upper bound (inclusive)

        Returns:
            New EquityStore sharing the selected records
        """
        selector = PERangeSelector(min_pe, max_pe)
        result = self._store.select_by_predicate(selector)
        logger.debug(f"{selector!r} matched {len(result)} equities")
        return result

    def select_default_pe_range(self) -> EquityStore:
        """Equities in the configured default P/E range."""
        return self.select_pe_range(
            self.config.query.default_pe_min,
            self.config.query.default_pe_max,
        )
