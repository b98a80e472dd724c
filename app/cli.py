"""
Command-line pro forma.

    proforma --aov 100 --ecommerce 10 --orders 5 --table income --format csv

Prints one table of the 12-month projection. Any value that is not a
non-negative number is treated as 0, same as the dashboard form.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import pandas as pd

from data_prep.inputs import parse_assumptions
from data_prep.validators import validate_inputs
from engine.runner import run_projection
from reports.metrics import add_margins, generate_projection_report
from reports.tables import section_table, summary_table

logger = logging.getLogger(__name__)

TABLE_CHOICES = {
    "summary": None,
    "revenue": "Revenue",
    "cogs": "COGS",
    "opex": "Operating Expenses",
    "income": "Income Statement",
}


def _args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="proforma", description="12-month pro forma projection")
    # Raw strings: coercion happens at the input boundary, not in argparse.
    p.add_argument("--aov", default="0", help="average order value per end-user order ($)")
    p.add_argument("--ecommerce", default="0", help="monthly subscription sales, eCommerce plan ($)")
    p.add_argument("--wholesale", default="0", help="monthly subscription sales, wholesale ($)")
    p.add_argument("--orders", default="0", help="end-user monthly sales orders")
    p.add_argument("--churn", default="0", help="annual churn rate (%%), recorded only")
    p.add_argument("--table", choices=sorted(TABLE_CHOICES), default="summary")
    p.add_argument("--format", choices=["text", "csv", "json"], default="text")
    p.add_argument("--report", action="store_true", help="append the headline metrics")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def raw_inputs(args: argparse.Namespace) -> dict:
    return {
        "averageOrderValue": args.aov,
        "ecommerceSubscriptionRevenue": args.ecommerce,
        "wholesaleSubscriptionRevenue": args.wholesale,
        "endUserMonthlySalesOrders": args.orders,
        "annualChurnRate": args.churn,
    }


def build_table(projection: pd.DataFrame, name: str) -> pd.DataFrame:
    section = TABLE_CHOICES[name]
    if section is None:
        return summary_table(projection)
    return section_table(projection, section, include_total=True)


def margins_table(projection: pd.DataFrame) -> pd.DataFrame:
    """Per-month margins and running net income, for the report."""
    margins = add_margins(projection)
    return pd.DataFrame({
        "Month": margins["month"],
        "Gross Margin": margins["gross_margin"].map(lambda v: f"{v:.2%}"),
        "Net Margin": margins["net_margin"].map(lambda v: f"{v:.2%}"),
        "Cumulative Net Income": margins["cumulative_net_income"].map(lambda v: f"${v:,.2f}"),
    })


def _render(table: pd.DataFrame, fmt: str) -> str:
    if fmt == "csv":
        return table.to_csv(index=False)
    if fmt == "json":
        return json.dumps(table.to_dict(orient="records"), indent=2)
    formatted = table.copy()
    for col in formatted.columns:
        if col != "Month":
            formatted[col] = formatted[col].map(lambda v: f"${v:,.2f}")
    return formatted.to_string(index=False)


def main(argv: Optional[List[str]] = None) -> int:
    args = _args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    raw = raw_inputs(args)
    for warning in validate_inputs(raw).warnings:
        logger.warning(warning)
    projection, _ = run_projection(parse_assumptions(raw))

    sys.stdout.write(_render(build_table(projection, args.table), args.format) + "\n")
    if args.report:
        report = generate_projection_report(projection).to_dataframe()
        sys.stdout.write("\n" + report.to_string(index=False) + "\n")
        sys.stdout.write("\n" + margins_table(projection).to_string(index=False) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
