"""
Integration Tests for the Command-Line Interface.

Tests cover:
    - Default listing of security codes
    - Symbol lookup, lowest P/E and P/E range queries
    - Exit codes for missing symbols and setup failures
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from equity_lookup.cli import EXIT_NOT_FOUND, EXIT_OK, EXIT_SETUP, main


class TestCli:
    """Test cases for equity_lookup.cli.main."""

    def test_lists_codes_by_default(
        self, input000_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """
        SCENARIO: Only an input file is given
        EXPECTED: All security codes, one per line, sorted
        """
        # Act
        status = main([str(input000_path)])

        # Assert
        out = capsys.readouterr().out.splitlines()
        assert status == EXIT_OK
        assert len(out) == 17
        assert out[0] == "AAPLUS"
        assert out == sorted(out)

    def test_symbol_lookup(
        self, input000_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        status = main([str(input000_path), "--symbol", "IBMUS"])

        out = capsys.readouterr().out
        assert status == EXIT_OK
        assert out == (
            "code: IBMUS description: International Business Machines"
            " last price: 182.950 market cap: 198657.057 Million "
            " P/E: 11.180\n"
        )

    def test_missing_symbol(
        self, input000_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """
        SCENARIO: Lookup of a symbol that is not in the file
        EXPECTED: "Not found" printed, exit code 1
        """
        status = main([str(input000_path), "--symbol", "BADUS"])

        assert status == EXIT_NOT_FOUND
        assert capsys.readouterr().out == "Not found\n"

    def test_lowest_pe(
        self, input000_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        status = main([str(input000_path), "--lowest-pe"])

        assert status == EXIT_OK
        assert capsys.readouterr().out == "TUS\n"

    def test_pe_range(
        self, input000_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        status = main([str(input000_path), "--pe-range", "9", "10"])

        out = capsys.readouterr().out.splitlines()
        assert status == EXIT_OK
        assert out[0].startswith("code: MSFTUS ")
        assert out[-1] == "1 matching equities"

    def test_pe_default_uses_config(
        self,
        input000_path: Path,
        sample_config_path: Path,
        capsys: pytest.CaptureFixture,
    ) -> None:
        """
        SCENARIO: Config narrows the default range to [8.0, 12.0], precision 2
        EXPECTED: Only equities in that range, printed with 2 decimals
        """
        status = main(
            [str(input000_path), "--config", str(sample_config_path), "--pe-default"]
        )

        out = capsys.readouterr().out.splitlines()
        assert status == EXIT_OK
        assert out[-1] == "6 matching equities"
        assert out[1].startswith("code: IBMUS ")
        assert out[1].endswith("P/E: 11.18")

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        monkeypatch.setattr(
            "sys.stdin",
            io.StringIO("HEADER\nMSFTUS|Microsoft Corp|2500000000000|310.00|9.50\n"),
        )

        status = main(["-", "--list"])

        assert status == EXIT_OK
        assert capsys.readouterr().out == "MSFTUS\n"

    def test_stdin_uses_configured_encoding(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
        capsys: pytest.CaptureFixture,
    ) -> None:
        """
        SCENARIO: Latin-1 bytes on stdin, config sets ingest.encoding latin-1
        EXPECTED: Description decoded with the configured encoding
        """
        config_file = tmp_path / "latin1.yaml"
        config_file.write_text("ingest:\n  encoding: latin-1\n")
        raw = "HEADER\nNESNUS|Nestlé SA|1000000|100.0|20.0\n".encode("latin-1")
        monkeypatch.setattr(
            "sys.stdin", io.TextIOWrapper(io.BytesIO(raw), encoding="utf-8")
        )

        status = main(["-", "--config", str(config_file), "--symbol", "NESNUS"])

        assert status == EXIT_OK
        assert "description: Nestlé SA " in capsys.readouterr().out

    def test_verbose_reports_rejections(
        self,
        input000_path: Path,
        capsys: pytest.CaptureFixture,
    ) -> None:
        main([str(input000_path), "--verbose", "--lowest-pe"])

        err = capsys.readouterr().err
        assert "Failed at 'TOOLONGNAME|desc|1|1.0|1.0'" in err
        assert "Ingested 17 equities, rejected 8 of 25 lines" in err

    def test_empty_input_is_setup_failure(
        self, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """
        SCENARIO: Input file has no lines at all
        EXPECTED: Error on stderr, exit code 2
        """
        empty = tmp_path / "empty.txt"
        empty.write_text("")

        status = main([str(empty)])

        assert status == EXIT_SETUP
        assert "No header line" in capsys.readouterr().err

    def test_missing_file_is_setup_failure(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.txt")]) == EXIT_SETUP

    def test_invalid_config_is_setup_failure(
        self, input000_path: Path, tmp_path: Path
    ) -> None:
        bad = tmp_path / "bad.yaml"
        bad.write_text("display:\n  precision: -5\n")

        assert main([str(input000_path), "--config", str(bad)]) == EXIT_SETUP
