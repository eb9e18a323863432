"""Interactive step-by-step wizard for the ESPP calculator.

Walks the user through the five inputs, derives the sale-date market value
from a stock price change when asked to, shows the results and optionally
saves the plain-text report.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.rule import Rule

from esppcalc.cli import BANNER, build_results_table
from esppcalc.engines.constants import (
    DEFAULT_DISCOUNT_PERCENT,
    DEFAULT_MARKET_VALUE_PURCHASE,
    DEFAULT_PURCHASE_AMOUNT,
    DEFAULT_STOCK_CHANGE_PERCENT,
    DEFAULT_TAX_RATE_PERCENT,
)
from esppcalc.engines.espp import calculate_espp, sale_value_from_change
from esppcalc.exceptions import InputFormatError, InvalidInput
from esppcalc.formatting import format_currency, format_percent, parse_currency, parse_percent
from esppcalc.models.espp import ESPPInput, ESPPOutput

logger = logging.getLogger(__name__)


def _prompt_value(
    label: str,
    default: str,
    parser: Callable[[str], Decimal],
    console: Console,
) -> Decimal:
    """Prompt for a currency or percent value, retrying on bad input."""
    while True:
        raw = Prompt.ask(label, default=default, console=console)
        try:
            return parser(raw)
        except InputFormatError as exc:
            console.print(f"[red]{escape(str(exc))}. Try again.[/red]")


def _collect_input(console: Console) -> dict[str, Decimal]:
    purchase_value = _prompt_value(
        "Market value at purchase date",
        format_currency(DEFAULT_MARKET_VALUE_PURCHASE),
        parse_currency,
        console,
    )
    discount = _prompt_value(
        "Discount percent", format_percent(DEFAULT_DISCOUNT_PERCENT), parse_percent, console
    )
    amount = _prompt_value(
        "Purchase amount (in dollars)", format_currency(DEFAULT_PURCHASE_AMOUNT), parse_currency, console
    )
    change = _prompt_value(
        "Stock percentage gain/loss",
        format_percent(DEFAULT_STOCK_CHANGE_PERCENT),
        parse_percent,
        console,
    )
    sale_value = _prompt_value(
        "Market value at time of sale",
        format_currency(sale_value_from_change(purchase_value, change)),
        parse_currency,
        console,
    )
    tax_rate = _prompt_value(
        "Tax rate percent", format_percent(DEFAULT_TAX_RATE_PERCENT), parse_percent, console
    )
    return {
        "marketValuePurchaseDate": purchase_value,
        "discountPercent": discount,
        "purchaseAmount": amount,
        "marketValueSaleDate": sale_value,
        "taxRatePercent": tax_rate,
    }


def _save_report(espp: ESPPInput, result: ESPPOutput, console: Console) -> None:
    from esppcalc.reports import ESPPReportGenerator

    path = Path(Prompt.ask("Report file", default="espp_report.txt", console=console))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(ESPPReportGenerator().render(espp, result))
    logger.info("Wrote ESPP report to %s", path)
    console.print(f"[green]Report written to {path}[/green]")


def run_wizard(console: Console | None = None) -> None:
    """Main wizard orchestration; called from cli.py."""
    if console is None:
        console = Console()

    console.print(
        Panel(
            f"[bold green]{BANNER}[/bold green]\n"
            "[bold]Interactive ESPP Calculator[/bold]\n\n"
            "Enter values as shown in the defaults, e.g. $1,000.00 or 15%.\n"
            "Press Enter to accept a default.",
            title="[bold cyan]ESPP Calculator Wizard[/bold cyan]",
            border_style="cyan",
        )
    )

    while True:
        console.print(Rule("Inputs", style="bold cyan"))
        raw = _collect_input(console)
        try:
            result = calculate_espp(raw)
        except InvalidInput as exc:
            for error in exc.errors:
                console.print(f"[red]Validation error on '{error.field}': {error.message}[/red]")
            console.print("[yellow]Please check your entries and try again.[/yellow]")
            continue
        break

    console.print(Rule("Results", style="bold cyan"))
    console.print(build_results_table(result))

    if Confirm.ask("Save a text report?", default=False, console=console):
        _save_report(ESPPInput.model_validate(raw), result, console)

    console.print("[bold green]Done.[/bold green]")
