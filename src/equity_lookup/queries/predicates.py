"""
Query Predicates - Capability Objects for Store Queries.

EquityStore.select_by_predicate and EquityStore.reduce_by_comparator are
generic; what they select or prefer comes from objects implementing one
or both capabilities:

    - select(equity) -> bool: inclusion test
    - compare(a, b) -> Equity: returns whichever of a and b is preferred

Concrete Queries:
    - PERangeSelector: P/E ratio within an inclusive range
    - LowestPEComparator: lowest P/E, then lowest price

Design Notes:
    - EquityQuery gives both capabilities an explicit default, so a
      subclass overriding only one of them still behaves predictably
    - compare must return one of the two objects it was given; the store
      compares the result by identity
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from equity_lookup.domain.entities import Equity


@runtime_checkable
class SelectPredicate(Protocol):
    """Protocol for objects deciding record inclusion."""

    def select(self, equity: Equity) -> bool:
        ...


@runtime_checkable
class PreferenceComparator(Protocol):
    """Protocol for objects choosing the preferred of two records."""

    def compare(self, a: Equity, b: Equity) -> Equity:
        ...


class EquityQuery:
    """Base class providing default select and compare behavior."""

    def select(self, equity: Equity) -> bool:
        """Default inclusion test: reject every record."""
        return False

    def compare(self, a: Equity, b: Equity) -> Equity:
        """Default preference: always keep the left operand."""
        return a


class PERangeSelector(EquityQuery):
    """Select equities whose P/E ratio lies in [min_pe, max_pe]."""

    def __init__(self, min_pe: float, max_pe: float) -> None:
        """
        Initialize with range bounds.

        Args:
            min_pe: Lowest accepted P/E ratio (inclusive)
            max_pe: Highest accepted P/E ratio (inclusive)

        An inverted range (min_pe > max_pe) selects nothing.
        """
        self.min_pe = min_pe
        self.max_pe = max_pe

    def select(self, equity: Equity) -> bool:
        return self.min_pe <= equity.pe_ratio <= self.max_pe

    def __repr__(self) -> str:
        return f"PERangeSelector(min_pe={self.min_pe}, max_pe={self.max_pe})"


class LowestPEComparator(EquityQuery):
    """Prefer the lower P/E ratio, then the lower price."""

    def compare(self, a: Equity, b: Equity) -> Equity:
        if b.pe_ratio < a.pe_ratio:
            return b
        if b.pe_ratio == a.pe_ratio and b.price < a.price:
            return b
        # Exact tie keeps the left operand
        return a

    def __repr__(self) -> str:
        return "LowestPEComparator()"
