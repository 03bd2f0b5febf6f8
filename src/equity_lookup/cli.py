"""Command-line interface for equity_lookup.

Reads equity lines from a file or stdin, then answers the queries
requested on the command line. With no query flag, prints every security
code.

Exit codes:
    0 - success
    1 - a requested symbol was not found
    2 - setup failure (missing file, empty input, invalid config)
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

import yaml
from pydantic import ValidationError

import equity_lookup
from equity_lookup.adapters.console_logger import ConsoleAuditLogger
from equity_lookup.adapters.formatting import format_equity
from equity_lookup.config.loader import load_config
from equity_lookup.config.models import LookupConfig
from equity_lookup.errors import MissingHeaderError
from equity_lookup.service.equity_service import EquityService
from equity_lookup.store.equity_store import EquityStore

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_SETUP = 2


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="equity-lookup",
        description="Load pipe-delimited equity records and query them.",
    )
    p.add_argument("path", nargs="?", default="-", help="Input file path or '-' for stdin")
    p.add_argument("--config", help="YAML configuration file")
    p.add_argument(
        "--symbol",
        action="append",
        default=[],
        metavar="SYM",
        help="Print the record for SYM (repeatable)",
    )
    p.add_argument("--list", action="store_true", help="Print all security codes")
    p.add_argument("--lowest-pe", action="store_true", help="Print the lowest P/E symbol")
    p.add_argument(
        "--pe-range",
        nargs=2,
        type=float,
        metavar=("MIN", "MAX"),
        help="Print records with MIN <= P/E <= MAX",
    )
    p.add_argument(
        "--pe-default",
        action="store_true",
        help="Print records in the configured default P/E range",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print per-line ingestion diagnostics on stderr",
    )
    return p


def _print_store(store: EquityStore, config: LookupConfig, out: TextIO) -> None:
    for equity in store:
        out.write(
            format_equity(
                equity,
                config.display.precision,
                config.display.market_cap_unit,
            )
            + "\n"
        )
    out.write(f"{len(store)} matching equities\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else LookupConfig()
    except (OSError, ValidationError, yaml.YAMLError) as ex:
        sys.stderr.write(f"error: invalid configuration: {ex}\n")
        return EXIT_SETUP

    equity_lookup.configure_logging(config.global_settings.log_level_value)

    audit_logger = ConsoleAuditLogger(verbose=True) if args.verbose else None
    service = EquityService(config=config, audit_logger=audit_logger)

    try:
        if args.path == "-":
            # In-memory replacements for stdin have no encoding to change
            if hasattr(sys.stdin, "reconfigure"):
                sys.stdin.reconfigure(encoding=config.ingest.encoding)
            service.ingest_all(sys.stdin)
        else:
            with open(args.path, encoding=config.ingest.encoding) as fh:
                service.ingest_all(fh)
    except (OSError, MissingHeaderError) as ex:
        sys.stderr.write(f"error: {ex}\n")
        return EXIT_SETUP

    out = sys.stdout
    status = EXIT_OK
    queried = False

    for symbol in args.symbol:
        queried = True
        equity = service.lookup(symbol)
        if equity is None:
            out.write("Not found\n")
            status = EXIT_NOT_FOUND
        else:
            out.write(
                format_equity(
                    equity,
                    config.display.precision,
                    config.display.market_cap_unit,
                )
                + "\n"
            )

    if args.lowest_pe:
        queried = True
        out.write(f"{service.lowest_pe() or 'Not found'}\n")

    if args.pe_range:
        queried = True
        _print_store(service.select_pe_range(*args.pe_range), config, out)

    if args.pe_default:
        queried = True
        _print_store(service.select_default_pe_range(), config, out)

    if args.list or not queried:
        out.write(service.all_security_codes())

    return status


if __name__ == "__main__":
    raise SystemExit(main())
