"""ESPP sale report generator."""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from esppcalc.engines.espp import change_percent_from_sale
from esppcalc.formatting import format_currency, format_percent
from esppcalc.models.espp import ESPPInput, ESPPOutput

TEMPLATE_DIR = Path(__file__).parent / "templates"

logger = logging.getLogger(__name__)


class ESPPReportGenerator:
    """Generates the plain-text ESPP sale report."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), keep_trailing_newline=True)
        self.env.filters["currency"] = format_currency
        self.env.filters["percent"] = format_percent

    def render(self, espp: ESPPInput, result: ESPPOutput) -> str:
        """Render the report for one transaction."""
        logger.debug("Rendering ESPP report for %d share(s)", result.number_of_shares)
        template = self.env.get_template("espp_report.txt")
        change = change_percent_from_sale(espp.market_value_purchase_date, espp.market_value_sale_date)
        return template.render(input=espp, result=result, change=change)
