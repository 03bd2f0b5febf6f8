"""
Store Package - Keyed Container for Validated Records.

Components:
    - EquityStore: Symbol-keyed container with select/reduce primitives
"""

from equity_lookup.store.equity_store import EquityStore

__all__ = ["EquityStore"]
