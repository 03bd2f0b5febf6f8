"""
Console Audit Logger.

A simple ingestion diagnostics logger that writes to the console.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Optional, TextIO

from equity_lookup.domain.value_objects import IngestReport, RecordRejection


class ConsoleAuditLogger:
    """Simple console-based ingestion logger."""

    def __init__(self, verbose: bool = True, stream: Optional[TextIO] = None) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log all events. If False, only summaries.
            stream: Output stream (default: stderr)
        """
        self._verbose = verbose
        self._stream = stream

    def log_inserted(self, symbol: str, replaced: bool = False) -> None:
        """Log that a record was stored."""
        if self._verbose:
            action = "Replaced" if replaced else "Inserted"
            self._log("DEBUG", f"{action} {symbol}")

    def log_rejected(self, rejection: RecordRejection) -> None:
        """Log that a line was skipped."""
        where = f"line {rejection.line_number}: " if rejection.line_number else ""
        self._log("WARN", f"{where}Failed at {rejection.line!r} ({rejection.reason})")

    def log_summary(self, report: IngestReport) -> None:
        """Log the outcome of an ingestion run."""
        self._log(
            "INFO",
            f"Ingested {report.accepted} equities, "
            f"rejected {report.rejected} of {report.total_lines} lines",
        )

    def _log(self, level: str, message: str) -> None:
        """Internal logging method."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        stream = self._stream or sys.stderr
        print(f"[{timestamp}] [{level:5}] {message}", file=stream)
