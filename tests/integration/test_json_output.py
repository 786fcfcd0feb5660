"""
Tests for formatters and the command-line interface.

Tests cover:
- Date helpers for intake form inputs
- JSON output (full and human-readable)
- CLI output and exit status
"""

import json
from datetime import date, datetime

import pytest

from gs1_intake import (
    decode_gs1,
    decode_gs1_to_json,
    format_date_for_input,
    format_date_for_month_year,
    record_to_dict,
)
from gs1_intake.__main__ import main


class TestDateFormatting:
    """Tests for form date helpers."""

    def test_input_format(self):
        assert format_date_for_input(date(2026, 4, 30)) == "2026-04-30"
        assert format_date_for_input(date(2027, 8, 5)) == "2027-08-05"

    def test_input_format_accepts_datetime(self):
        assert format_date_for_input(datetime(2026, 4, 30, 12, 0)) == "2026-04-30"

    @pytest.mark.parametrize("value", [None, "2026-04-30", 20260430])
    def test_input_format_invalid(self, value):
        assert format_date_for_input(value) == ""

    def test_month_year(self):
        assert format_date_for_month_year(date(2027, 8, 15)) == ("08", "2027")

    def test_month_year_invalid(self):
        assert format_date_for_month_year(None) == ("", "")


class TestJsonOutput:
    """Tests for record_to_dict / decode_gs1_to_json."""

    def test_full_dict(self):
        record = decode_gs1("(01)05012345678901(17)260430(10)LOT12345(21)SN987654")

        assert record_to_dict(record) == {
            "raw": "(01)05012345678901(17)260430(10)LOT12345(21)SN987654",
            "is_gs1": True,
            "encoding": "parenthesized",
            "gtin": "05012345678901",
            "expiry_date_raw": "260430",
            "expiry_date": "2026-04-30",
            "batch": "LOT12345",
            "serial": "SN987654",
        }

    def test_absent_fields_are_null(self):
        data = json.loads(decode_gs1_to_json("5012345678900"))

        assert data["is_gs1"] is False
        assert data["encoding"] is None
        for key in ("gtin", "expiry_date_raw", "expiry_date", "batch", "serial"):
            assert data[key] is None

    def test_human_readable(self):
        output = json.loads(decode_gs1_to_json("(01)08712345678906(17)270815", human_readable=True))

        assert output == {
            "GTIN Code": "08712345678906",
            "Expiry Date": "2027-08-15",
        }

    def test_human_readable_drops_invalid_expiry(self):
        output = json.loads(decode_gs1_to_json(
            "(01)05012345678901(17)261332(10)BATCH123", human_readable=True,
        ))

        assert output == {
            "GTIN Code": "05012345678901",
            "Batch/Lot Number": "BATCH123",
        }


class TestCli:
    """Tests for python -m gs1_intake."""

    def test_json_output(self, capsys):
        exit_code = main(["(01)05012345678901(17)260430", "--json"])
        data = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert data["gtin"] == "05012345678901"
        assert data["expiry_date"] == "2026-04-30"

    def test_gs_token(self, capsys):
        exit_code = main(["0105012345678901<GS>17260430<GS>10LOT999", "--json"])
        data = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert data["encoding"] == "bracketless"
        assert data["batch"] == "LOT999"

    def test_non_gs1_exit_status(self, capsys):
        exit_code = main(["5012345678900"])
        out = capsys.readouterr().out

        assert exit_code == 1
        assert "Not a GS1 barcode" in out

    def test_report_shows_date_errors(self, capsys):
        main(["(01)05012345678901(17)261332(10)BATCH123"])
        out = capsys.readouterr().out

        assert "Batch/Lot: BATCH123" in out
        assert "Invalid month: 13" in out

    def test_report_non_ascii_expiry(self, capsys):
        exit_code = main(["(01)05012345678901(17)²60430"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "[INVALID_DATE]" in out

    def test_human_json(self, capsys):
        main(["(01)08712345678906(17)270815", "--json", "--human"])
        data = json.loads(capsys.readouterr().out)

        assert data == {"GTIN Code": "08712345678906", "Expiry Date": "2027-08-15"}
