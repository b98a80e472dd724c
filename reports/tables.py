"""
Tabular views of a projection frame.

The dashboard and the CLI both show:
  - a summary table of the seven headline series, closed by a "Total" row that
    is the column sum over all twelve periods
  - one breakdown table per statement section (Revenue, COGS, Operating
    Expenses, Income Statement)
  - the headline series in long format for charting

Every function takes the frame produced by engine.runner.records_to_frame and
returns new frames with display labels as column names. Values stay numeric;
currency formatting is left to the caller.
"""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

import pandas as pd

from core.schema import (
    CHART_FIELDS,
    COGS_FIELDS,
    FIELD_LABELS,
    OPERATING_EXPENSE_FIELDS,
    OTHER_FIELDS,
    REVENUE_FIELDS,
)
from core.utils import require_columns

TOTAL_LABEL = "Total"

SECTIONS: Tuple[str, ...] = ("Revenue", "COGS", "Operating Expenses", "Income Statement")

SECTION_FIELDS: Dict[str, Tuple[str, ...]] = {
    "Revenue": REVENUE_FIELDS,
    "COGS": COGS_FIELDS,
    "Operating Expenses": OPERATING_EXPENSE_FIELDS,
    "Income Statement": (
        "total_revenue",
        "total_cogs",
        "gross_profit",
        "total_operating_expenses",
        "net_operating_income",
    )
    + OTHER_FIELDS
    + ("net_income_pre_draw", "owners_draw", "net_income"),
}

# The income statement shows net income explicitly as after the owner's draw.
_SECTION_LABEL_OVERRIDES: Dict[str, Dict[str, str]] = {
    "Income Statement": {"net_income": "Net Income (After Draw)"},
}


def _labelled(frame: pd.DataFrame, fields: Sequence[str], overrides: Dict[str, str]) -> pd.DataFrame:
    require_columns(frame, ["month", *fields])
    out = frame.loc[:, ["month", *fields]].copy()
    labels = {f: overrides.get(f, FIELD_LABELS[f]) for f in ["month", *fields]}
    return out.rename(columns=labels).reset_index(drop=True)


def with_total_row(table: pd.DataFrame, *, label_col: str = "Month") -> pd.DataFrame:
    """Append a row labelled "Total" holding the sum of every numeric column."""
    numeric_cols = [c for c in table.columns if c != label_col]
    totals = {label_col: TOTAL_LABEL}
    totals.update({c: float(table[c].sum()) for c in numeric_cols})
    return pd.concat([table, pd.DataFrame([totals])], ignore_index=True)


def summary_table(frame: pd.DataFrame) -> pd.DataFrame:
    """Twelve monthly rows of the headline series plus the aggregate Total row."""
    return with_total_row(_labelled(frame, CHART_FIELDS, {}))


def section_table(frame: pd.DataFrame, section: str, *, include_total: bool = False) -> pd.DataFrame:
    """
    Breakdown table for one statement section.

    Raises KeyError for a section name outside SECTIONS.
    """
    if section not in SECTION_FIELDS:
        raise KeyError(f"Unknown section {section!r}; expected one of {list(SECTIONS)}")
    table = _labelled(frame, SECTION_FIELDS[section], _SECTION_LABEL_OVERRIDES.get(section, {}))
    if include_total:
        table = with_total_row(table)
    return table


def chart_series(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Headline series in long format: one row per (month, series).

    Columns: period, month, field, series (display label), value. Month order
    is kept within each series.
    """
    require_columns(frame, ["period", "month", *CHART_FIELDS])
    long = frame.melt(
        id_vars=["period", "month"],
        value_vars=list(CHART_FIELDS),
        var_name="field",
        value_name="value",
    )
    long["series"] = long["field"].map(FIELD_LABELS)
    order = {f: i for i, f in enumerate(CHART_FIELDS)}
    long["_order"] = long["field"].map(order)
    long = long.sort_values(["_order", "period"]).drop(columns="_order").reset_index(drop=True)
    return long.loc[:, ["period", "month", "field", "series", "value"]]
