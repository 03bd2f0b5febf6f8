"""
Queries Package - Selectors and Comparators.

Objects in this package parameterize the generic query primitives of
EquityStore.

Protocols:
    - SelectPredicate: select(equity) -> bool
    - PreferenceComparator: compare(a, b) -> preferred equity

Implementations:
    - EquityQuery: Base class with explicit defaults
    - PERangeSelector: Inclusive P/E range
    - LowestPEComparator: Lowest P/E, tie-broken by lowest price
"""

from equity_lookup.queries.predicates import (
    EquityQuery,
    LowestPEComparator,
    PERangeSelector,
    PreferenceComparator,
    SelectPredicate,
)

__all__ = [
    "EquityQuery",
    "LowestPEComparator",
    "PERangeSelector",
    "PreferenceComparator",
    "SelectPredicate",
]
