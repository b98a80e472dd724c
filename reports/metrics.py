"""
Headline metrics for a 12-month projection.

Turns the monthly frame into the handful of numbers an owner looks at first:
annual totals, margins, when the business turns profitable, and how the first
and last month compare.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from core.schema import RECORD_FIELDS
from core.utils import require_columns, safe_ratio


def annual_totals(frame: pd.DataFrame) -> pd.Series:
    """Sum of every record field across the projection, indexed by field name."""
    require_columns(frame, RECORD_FIELDS)
    return frame.loc[:, list(RECORD_FIELDS)].sum().astype(float)


def add_margins(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Return a copy with per-period gross_margin, net_margin and
    cumulative_net_income columns. Margins are 0 in periods with no revenue.
    """
    require_columns(frame, ["total_revenue", "gross_profit", "net_income"])
    out = frame.copy()
    revenue = out["total_revenue"].to_numpy(dtype=float)
    has_revenue = revenue != 0
    safe_revenue = np.where(has_revenue, revenue, 1.0)
    out["gross_margin"] = np.where(has_revenue, out["gross_profit"].to_numpy(dtype=float) / safe_revenue, 0.0)
    out["net_margin"] = np.where(has_revenue, out["net_income"].to_numpy(dtype=float) / safe_revenue, 0.0)
    out["cumulative_net_income"] = out["net_income"].cumsum()
    return out


def break_even_month(frame: pd.DataFrame) -> Optional[str]:
    """First month whose net income is non-negative, or None if there is none."""
    require_columns(frame, ["month", "net_income"])
    profitable = frame.loc[frame["net_income"] >= 0, "month"]
    if profitable.empty:
        return None
    return str(profitable.iloc[0])


@dataclass
class ProjectionReport:
    """Structured headline output for one projection."""
    annual_revenue: float
    annual_cogs: float
    annual_gross_profit: float
    annual_operating_expenses: float
    annual_net_income: float

    gross_margin: float
    net_margin: float

    break_even_month: Optional[str]
    first_month_net_income: float
    last_month_net_income: float

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Annual Revenue", "Value": f"{self.annual_revenue:,.2f}", "Unit": "$"},
            {"Metric": "Annual COGS", "Value": f"{self.annual_cogs:,.2f}", "Unit": "$"},
            {"Metric": "Annual Gross Profit", "Value": f"{self.annual_gross_profit:,.2f}", "Unit": "$"},
            {"Metric": "Annual Operating Expenses", "Value": f"{self.annual_operating_expenses:,.2f}", "Unit": "$"},
            {"Metric": "Annual Net Income", "Value": f"{self.annual_net_income:,.2f}", "Unit": "$"},
            {"Metric": "Gross Margin", "Value": f"{self.gross_margin:.2%}", "Unit": ""},
            {"Metric": "Net Margin", "Value": f"{self.net_margin:.2%}", "Unit": ""},
            {"Metric": "Break-even Month", "Value": self.break_even_month or "Not reached", "Unit": ""},
            {"Metric": "First Month Net Income", "Value": f"{self.first_month_net_income:,.2f}", "Unit": "$"},
            {"Metric": "Last Month Net Income", "Value": f"{self.last_month_net_income:,.2f}", "Unit": "$"},
        ]
        return pd.DataFrame(rows)


def generate_projection_report(frame: pd.DataFrame) -> ProjectionReport:
    """
    Build the headline report from a projection frame.

    Parameters
    ----------
    frame : pd.DataFrame
        Output of engine.runner.records_to_frame(), one row per period.
    """
    if len(frame) == 0:
        raise ValueError("No projection periods to report on.")
    totals = annual_totals(frame)
    return ProjectionReport(
        annual_revenue=float(totals["total_revenue"]),
        annual_cogs=float(totals["total_cogs"]),
        annual_gross_profit=float(totals["gross_profit"]),
        annual_operating_expenses=float(totals["total_operating_expenses"]),
        annual_net_income=float(totals["net_income"]),
        gross_margin=safe_ratio(totals["gross_profit"], totals["total_revenue"]),
        net_margin=safe_ratio(totals["net_income"], totals["total_revenue"]),
        break_even_month=break_even_month(frame),
        first_month_net_income=float(frame["net_income"].iloc[0]),
        last_month_net_income=float(frame["net_income"].iloc[-1]),
    )
