"""
Adapters Package - Infrastructure Implementations.

This package contains the console-facing pieces kept out of the core:

Loggers:
    - ConsoleAuditLogger: Per-line ingestion diagnostics on stderr

Formatting:
    - format_equity / format_equities: Fixed-point display lines

Design Principles:
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from equity_lookup.adapters.console_logger import ConsoleAuditLogger
from equity_lookup.adapters.formatting import format_equities, format_equity

__all__ = [
    "ConsoleAuditLogger",
    "format_equities",
    "format_equity",
]
