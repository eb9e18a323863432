"""Tests for the interactive wizard CLI command."""

from decimal import Decimal
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from esppcalc.cli import app
from esppcalc.formatting import parse_currency
from esppcalc.wizard import _prompt_value

runner = CliRunner()


class TestPromptValue:
    def test_retries_on_bad_input(self):
        console = _QuietConsole()
        with patch("esppcalc.wizard.Prompt.ask", side_effect=["abc", "$12.50"]):
            assert _prompt_value("Amount", "$1.00", parse_currency, console) == Decimal("12.50")
        assert any("Cannot parse" in line for line in console.lines)


class _QuietConsole:
    def __init__(self):
        self.lines: list[str] = []

    def print(self, text="", *args, **kwargs):
        self.lines.append(str(text))


# ---------------------------------------------------------------------------
# Integration tests: full wizard flow via CliRunner
# ---------------------------------------------------------------------------


@pytest.fixture
def accept_defaults() -> str:
    # purchase FMV, discount, amount, stock change, sale FMV, tax rate, save report?
    return "\n".join(["", "", "", "", "", "", "n"]) + "\n"


class TestWizardCommand:
    def test_defaults_flow(self, accept_defaults):
        result = runner.invoke(app, ["wizard"], input=accept_defaults)
        assert result.exit_code == 0, f"Wizard failed:\n{result.output}"
        assert "ESPP Calculator Wizard" in result.output
        assert "ESPP Results" in result.output
        assert "255" in result.output
        assert "Done." in result.output

    def test_stock_change_sets_sale_default(self):
        inputs = "\n".join([
            "$50",      # Market value at purchase date
            "0%",       # Discount
            "$1,500",   # Purchase amount
            "20%",      # Stock change
            "",         # Sale value: accept derived $60.00
            "25%",      # Tax rate
            "n",        # Save report? No
        ]) + "\n"
        result = runner.invoke(app, ["wizard"], input=inputs)
        assert result.exit_code == 0, f"Wizard failed:\n{result.output}"
        assert "$60.00" in result.output
        assert "$300.00" in result.output

    def test_invalid_input_reprompts(self):
        inputs = "\n".join([
            "50", "100%", "1500", "", "", "25",   # rejected: 100% discount
            "50", "10%", "1500", "", "45", "25",  # accepted
            "n",
        ]) + "\n"
        result = runner.invoke(app, ["wizard"], input=inputs)
        assert result.exit_code == 0, f"Wizard failed:\n{result.output}"
        assert "Validation error on 'discountPercent'" in result.output
        assert "-$41.25" in result.output

    def test_save_report(self, tmp_path, accept_defaults):
        report_path = tmp_path / "espp_report.txt"
        inputs = accept_defaults[: -len("n\n")] + "y\n" + f"{report_path}\n"
        result = runner.invoke(app, ["wizard"], input=inputs)
        assert result.exit_code == 0, f"Wizard failed:\n{result.output}"
        assert report_path.exists()
        assert "ESPP SALE REPORT" in report_path.read_text()
