"""
Tests for the `proforma` command.

Run:
    pytest tests/test_cli.py -v
"""

import json

import pytest

from app.cli import main


class TestCli:
    """End-to-end runs through argparse, coercion, engine and tables."""

    def test_json_summary(self, capsys):
        assert main(["--aov", "100", "--ecommerce", "10", "--orders", "5", "--format", "json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert len(rows) == 13
        assert rows[0]["Month"] == "Jan"
        assert rows[0]["Total Revenue"] == pytest.approx(5615.5)
        assert rows[-1]["Month"] == "Total"

    def test_csv_section(self, capsys):
        main(["--table", "revenue", "--format", "csv"])
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "Month,bCommerce Subscriptions,Credit Card Commissions,Shipping Profits,3PL Easy,Total Revenue"
        assert len(lines) == 14
        assert lines[-1].startswith("Total,")

    def test_text_output_formats_currency(self, capsys):
        main(["--table", "opex"])
        out = capsys.readouterr().out
        assert "$10,000.00" in out
        assert "Dec" in out

    def test_invalid_amounts_coerced(self, capsys, caplog):
        assert main(["--aov", "abc", "--orders", "-4", "--format", "json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert rows[0]["Total Revenue"] == 0.0
        assert "averageOrderValue is not a number" in caplog.text

    def test_report(self, capsys):
        main(["--aov", "100", "--ecommerce", "10", "--orders", "5", "--report"])
        out = capsys.readouterr().out
        assert "Break-even Month" in out
        assert "Apr" in out
        assert "Cumulative Net Income" in out
        assert "50.00%" in out

    def test_unknown_table_rejected(self):
        with pytest.raises(SystemExit):
            main(["--table", "balance"])
