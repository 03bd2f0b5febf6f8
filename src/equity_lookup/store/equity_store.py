"""
Equity Store - Symbol-Keyed Container for Equity Records.

The EquityStore holds validated records keyed by symbol and provides two
generic query primitives driven by caller-supplied capability objects:

    - select: keep the records a predicate selects
    - reduce: fold all records down to the one a comparator prefers

Design Notes:
    - Iteration is always in ascending symbol order
    - Inserting an existing symbol replaces the entry (last write wins)
    - Records are immutable, so result stores share them with the source
    - The store trusts its records; validation happens in the factory
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

from equity_lookup.domain.entities import Equity
from equity_lookup.errors import EquityNotFoundError

if TYPE_CHECKING:
    from equity_lookup.queries.predicates import (
        PreferenceComparator,
        SelectPredicate,
    )

logger = logging.getLogger(__name__)


class EquityStore:
    """
    Associative container providing fast lookup of Equity objects.

    Not thread-safe. Concurrent use needs a single lock around the whole
    store.
    """

    def __init__(self) -> None:
        self._by_symbol: Dict[str, Equity] = {}

    def __len__(self) -> int:
        return len(self._by_symbol)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._by_symbol

    def __iter__(self) -> Iterator[Equity]:
        return iter(self.records())

    def __getitem__(self, symbol: str) -> Equity:
        return self.get(symbol)

    def __repr__(self) -> str:
        return f"EquityStore(size={len(self)})"

    def insert(self, equity: Equity) -> bool:
        """
        Insert an equity under its own symbol.

        Args:
            equity: Record to store

        Returns:
            True if an existing entry with the same symbol was replaced
        """
        replaced = equity.symbol in self._by_symbol
        self._by_symbol[equity.symbol] = equity
        if replaced:
            logger.debug(f"Replaced existing entry for {equity.symbol}")
        return replaced

    def find(self, symbol: str) -> Optional[Equity]:
        """Find an equity by exact symbol, None if absent."""
        return self._by_symbol.get(symbol)

    def get(self, symbol: str) -> Equity:
        """
        Find an equity by exact symbol.

        Raises:
            EquityNotFoundError: If the symbol is not present
        """
        try:
            return self._by_symbol[symbol]
        except KeyError:
            raise EquityNotFoundError(symbol) from None

    def symbols(self) -> List[str]:
        """All symbols in ascending order."""
        return sorted(self._by_symbol)

    def records(self) -> List[Equity]:
        """All records in ascending symbol order."""
        return [self._by_symbol[s] for s in self.symbols()]

    def all_sorted(self) -> List[Tuple[str, Equity]]:
        """All (symbol, record) pairs in ascending symbol order."""
        return [(s, self._by_symbol[s]) for s in self.symbols()]

    def select_into(self, predicate: "SelectPredicate", target: "EquityStore") -> int:
        """
        Insert every record the predicate selects into target.

        Args:
            predicate: Object whose select(record) decides inclusion
            target: Store receiving the selected records

        Returns:
            Number of records selected
        """
        count = 0
        for equity in self.records():
            if predicate.select(equity):
                target.insert(equity)
                count += 1
        return count

    def select_by_predicate(self, predicate: "SelectPredicate") -> "EquityStore":
        """
        Build a new store holding the records the predicate selects.

        Args:
            predicate: Object whose select(record) decides inclusion

        Returns:
            Fresh EquityStore; its length is the selected count
        """
        result = EquityStore()
        count = self.select_into(predicate, result)
        logger.debug(f"Selected {count} of {len(self)} equities")
        return result

    def reduce_by_comparator(
        self, comparator: "PreferenceComparator"
    ) -> Optional[Equity]:
        """
        Fold all records down to the one the comparator prefers.

        Records are visited in ascending symbol order. The running best is
        replaced by the candidate whenever compare(best, candidate) returns
        an object other than best. The answer is order independent only for
        transitive comparators.

        Args:
            comparator: Object whose compare(a, b) returns a or b

        Returns:
            Preferred record, None for an empty store
        """
        records = self.records()
        if not records:
            return None

        best = records[0]
        for candidate in records[1:]:
            if comparator.compare(best, candidate) is not best:
                best = candidate
        return best
