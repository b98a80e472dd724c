"""
Projection reports: summary and section tables, chart series, headline metrics.
"""

from .tables import SECTIONS, chart_series, section_table, summary_table, with_total_row
from .metrics import (
    ProjectionReport,
    add_margins,
    annual_totals,
    break_even_month,
    generate_projection_report,
)

__all__ = [
    "SECTIONS",
    "chart_series",
    "section_table",
    "summary_table",
    "with_total_row",
    "ProjectionReport",
    "add_margins",
    "annual_totals",
    "break_even_month",
    "generate_projection_report",
]
