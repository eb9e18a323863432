"""Report generation for the ESPP calculator."""

from esppcalc.reports.espp_report import ESPPReportGenerator

__all__ = ["ESPPReportGenerator"]
