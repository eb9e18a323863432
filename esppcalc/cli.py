"""Typer CLI interface for the ESPP calculator."""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from esppcalc.engines.constants import (
    DEFAULT_DISCOUNT_PERCENT,
    DEFAULT_MARKET_VALUE_PURCHASE,
    DEFAULT_PURCHASE_AMOUNT,
    DEFAULT_TAX_RATE_PERCENT,
)
from esppcalc.exceptions import InputFormatError
from esppcalc.formatting import (
    format_currency,
    format_percent,
    is_negative,
    parse_currency,
    parse_percent,
)
from esppcalc.models.espp import ESPPInput, ESPPOutput

BANNER = r"""
   ___  ___ ___ ___
  | __|/ __| _ \ _ \
  | _| \__ \  _/  _/
  |___||___/_| |_|   calculator

  "Buy low, pay tax on the discount anyway."
"""

logger = logging.getLogger(__name__)


def show_banner() -> None:
    typer.echo(BANNER)


app = typer.Typer(
    name="esppcalc",
    help="ESPP Calculator: after-tax outcome of a disqualifying ESPP sale.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """ESPP Calculator: after-tax outcome of a disqualifying ESPP sale."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        show_banner()
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Input assembly
# ---------------------------------------------------------------------------


def _load_input_file(path: Path) -> dict[str, Any]:
    """Read a JSON input record keyed by camelCase field names."""
    logger.debug("Loading ESPP input from %s", path)
    data = json.loads(path.read_text(), parse_float=Decimal)
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must contain a JSON object")
    return data


def _build_input(
    market_value_purchase: str,
    discount: str,
    amount: str,
    market_value_sale: str | None,
    stock_change: str | None,
    tax_rate: str,
) -> dict[str, Any]:
    """Parse option text into a raw input record.

    The sale-date market value comes from ``--market-value-sale`` or is
    derived from ``--stock-change``; with neither, the price is unchanged.
    """
    from esppcalc.engines.espp import sale_value_from_change

    if market_value_sale is not None and stock_change is not None:
        raise typer.BadParameter("Use either --market-value-sale or --stock-change, not both")

    purchase_value = parse_currency(market_value_purchase)
    if market_value_sale is not None:
        sale_value = parse_currency(market_value_sale)
    else:
        change = parse_percent(stock_change) if stock_change is not None else Decimal("0")
        sale_value = sale_value_from_change(purchase_value, change)
        logger.debug("Derived sale value %s from a %s%% price change", sale_value, change)

    return {
        "marketValuePurchaseDate": purchase_value,
        "discountPercent": parse_percent(discount),
        "purchaseAmount": parse_currency(amount),
        "marketValueSaleDate": sale_value,
        "taxRatePercent": parse_percent(tax_rate),
    }


def _resolve(
    input_file: Path | None,
    market_value_purchase: str,
    discount: str,
    amount: str,
    market_value_sale: str | None,
    stock_change: str | None,
    tax_rate: str,
) -> tuple[ESPPInput, ESPPOutput]:
    """Assemble, validate and compute; exit with status 1 on bad input."""
    from esppcalc.engines.espp import ESPPCalculator
    from esppcalc.engines.validation import validate_input

    try:
        if input_file is not None:
            raw = _load_input_file(input_file)
        else:
            raw = _build_input(
                market_value_purchase, discount, amount, market_value_sale, stock_change, tax_rate
            )
    except InputFormatError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)
    except (OSError, ValueError) as exc:
        typer.echo(f"Error: Cannot read input file: {exc}", err=True)
        raise typer.Exit(1)

    validation = validate_input(raw)
    if not validation.is_valid:
        for error in validation.errors:
            typer.echo(f"Error: Validation error on '{error.field}': {error.message}", err=True)
        raise typer.Exit(1)

    return validation.input, ESPPCalculator().compute(validation.input)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _money(value: Decimal) -> str:
    text = format_currency(value)
    return f"[red]{text}[/red]" if is_negative(value) else text


def _percent(value: Decimal) -> str:
    text = format_percent(value)
    return f"[red]{text}[/red]" if is_negative(value) else text


def build_results_table(result: ESPPOutput) -> Table:
    """Results grouped the way the report groups them; negatives in red."""
    table = Table(title="ESPP Results", show_header=False, padding=(0, 1))
    table.add_column("", style="cyan", min_width=32)
    table.add_column("", justify="right")

    table.add_row("[bold]Share Information[/bold]", "")
    table.add_row("Number of Shares Purchased", str(result.number_of_shares))
    table.add_row("Purchase Price per Share", format_currency(result.purchase_price_per_share))
    table.add_row("Discount per Share", format_currency(result.discount_per_share))

    table.add_row("[bold]Financial Impact[/bold]", "")
    table.add_row("Total Purchase Price", format_currency(result.total_purchase_price))
    table.add_row("Total Discount", format_currency(result.total_discount))

    table.add_row("[bold]Gains/Losses[/bold]", "")
    table.add_row("Capital Gain/Loss per Share", _money(result.capital_gain_per_share))
    table.add_row("Total Capital Gain/Loss", _money(result.total_capital_gain))

    table.add_row("[bold]Tax Implications[/bold]", "")
    table.add_row("Amount Taxable as Income", format_currency(result.amount_taxable_as_income))
    table.add_row("Total Tax", format_currency(result.total_tax))

    table.add_row("[bold]Final Outcome[/bold]", "")
    table.add_row("Total Profit/Loss", _money(result.total_profit))
    table.add_row("Percentage Gain/Loss", _percent(result.percentage_gain_loss_on_investment))
    return table


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def calculate(
    market_value_purchase: str = typer.Option(
        format_currency(DEFAULT_MARKET_VALUE_PURCHASE),
        "--market-value-purchase",
        "-p",
        help="Market value per share at the purchase date, e.g. $4.60",
    ),
    discount: str = typer.Option(
        format_percent(DEFAULT_DISCOUNT_PERCENT),
        "--discount",
        "-d",
        help="Plan discount percent, e.g. 15%",
    ),
    amount: str = typer.Option(
        format_currency(DEFAULT_PURCHASE_AMOUNT),
        "--amount",
        "-a",
        help="Total dollars contributed, e.g. $1,000",
    ),
    market_value_sale: str | None = typer.Option(
        None,
        "--market-value-sale",
        "-s",
        help="Market value per share at the sale date",
    ),
    stock_change: str | None = typer.Option(
        None,
        "--stock-change",
        "-c",
        help="Stock price change between purchase and sale, e.g. 12.5%",
    ),
    tax_rate: str = typer.Option(
        format_percent(DEFAULT_TAX_RATE_PERCENT),
        "--tax-rate",
        "-t",
        help="Tax rate applied to the discount income, e.g. 40%",
    ),
    input_file: Path | None = typer.Option(
        None,
        "--input-file",
        "-f",
        help="JSON file with the five input fields (overrides the value options)",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Compute the outcome of one disqualifying ESPP sale."""
    _, result = _resolve(
        input_file, market_value_purchase, discount, amount, market_value_sale, stock_change, tax_rate
    )

    if json_output:
        typer.echo(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
        return

    Console().print(build_results_table(result))


@app.command()
def report(
    market_value_purchase: str = typer.Option(
        format_currency(DEFAULT_MARKET_VALUE_PURCHASE),
        "--market-value-purchase",
        "-p",
        help="Market value per share at the purchase date, e.g. $4.60",
    ),
    discount: str = typer.Option(
        format_percent(DEFAULT_DISCOUNT_PERCENT),
        "--discount",
        "-d",
        help="Plan discount percent, e.g. 15%",
    ),
    amount: str = typer.Option(
        format_currency(DEFAULT_PURCHASE_AMOUNT),
        "--amount",
        "-a",
        help="Total dollars contributed, e.g. $1,000",
    ),
    market_value_sale: str | None = typer.Option(
        None,
        "--market-value-sale",
        "-s",
        help="Market value per share at the sale date",
    ),
    stock_change: str | None = typer.Option(
        None,
        "--stock-change",
        "-c",
        help="Stock price change between purchase and sale, e.g. 12.5%",
    ),
    tax_rate: str = typer.Option(
        format_percent(DEFAULT_TAX_RATE_PERCENT),
        "--tax-rate",
        "-t",
        help="Tax rate applied to the discount income, e.g. 40%",
    ),
    input_file: Path | None = typer.Option(
        None,
        "--input-file",
        "-f",
        help="JSON file with the five input fields (overrides the value options)",
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the report to this file"),
) -> None:
    """Generate a plain-text report for one disqualifying ESPP sale."""
    from esppcalc.reports import ESPPReportGenerator

    espp, result = _resolve(
        input_file, market_value_purchase, discount, amount, market_value_sale, stock_change, tax_rate
    )
    content = ESPPReportGenerator().render(espp, result)

    if output is None:
        typer.echo(content, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content)
    logger.info("Wrote ESPP report to %s", output)
    typer.echo(f"Report written to {output}")


@app.command()
def wizard() -> None:
    """Interactive step-by-step ESPP calculation."""
    from esppcalc.wizard import run_wizard

    run_wizard()


if __name__ == "__main__":
    app()
