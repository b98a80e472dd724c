"""
12-Month Pro Forma Calculator: Dashboard
=========================================

Enter the business assumptions; the projection is recomputed from scratch on
every change and shown as:
  1. Financial Metrics Overview: line chart of the seven headline series
  2. Summary table with a Total row
  3. Section breakdowns: Revenue, COGS, Operating Expenses, Income Statement

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.schema import CHART_COLORS, CHART_FIELDS, FIELD_LABELS, MONTH_LABELS
from core.utils import MAX_AMOUNT

from data_prep.inputs import parse_assumptions
from data_prep.validators import validate_inputs

from engine.records import Assumptions
from engine.runner import run_projection

from reports.tables import SECTIONS, chart_series, section_table, summary_table
from reports.metrics import generate_projection_report


# ---------------------------------------------------------------------------
# Form definition: session key -> (label, step, max)
# ---------------------------------------------------------------------------
INPUT_FIELDS: Dict[str, Dict[str, Any]] = {
    "averageOrderValue": {"label": "Average Order Value (AOV) for End Users ($)", "step": 0.01, "max": MAX_AMOUNT},
    "ecommerceSubscriptionRevenue": {"label": "Monthly Subscription Sales - eCommerce Plan Revenue ($)", "step": 0.01, "max": MAX_AMOUNT},
    "wholesaleSubscriptionRevenue": {"label": "Monthly Subscription Sales - Wholesale ($)", "step": 0.01, "max": MAX_AMOUNT},
    "endUserMonthlySalesOrders": {"label": "End User Monthly Sales Orders", "step": 1.0, "max": MAX_AMOUNT},
    "annualChurnRate": {"label": "Annual Churn Rate (%)", "step": 0.1, "max": 100.0},
}
SECTION_KEY = "active_section"


@dataclass(frozen=True)
class ViewState:
    """Everything the page needs from the session, read once per rerun."""
    raw_inputs: Dict[str, Any] = field(default_factory=dict)
    active_section: str = SECTIONS[0]


def _read_view_state() -> ViewState:
    raw = {key: st.session_state.get(key, 0.0) for key in INPUT_FIELDS}
    section = st.session_state.get(SECTION_KEY, SECTIONS[0])
    if section not in SECTIONS:
        section = SECTIONS[0]
    return ViewState(raw_inputs=raw, active_section=section)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
def _fmt_currency(val):
    """Format dollars with commas and cents."""
    return f"${val:,.2f}"


def _format_table(table: pd.DataFrame) -> pd.DataFrame:
    out = table.copy()
    for col in out.columns:
        if col != "Month":
            out[col] = out[col].map(_fmt_currency)
    return out


# ---------------------------------------------------------------------------
# Render functions: stateless, everything arrives as arguments
# ---------------------------------------------------------------------------
def _render_inputs() -> None:
    st.subheader("Assumptions")
    cols = st.columns(4)
    for i, (key, opts) in enumerate(INPUT_FIELDS.items()):
        with cols[i % 4]:
            st.number_input(
                opts["label"],
                min_value=0.0,
                max_value=opts.get("max"),
                step=opts["step"],
                key=key,
            )
    with cols[1]:
        st.text_input(
            "Commission Per Sale for Each Shipment ($)",
            value=f"{Assumptions.COMMISSION_PER_SHIPMENT}",
            disabled=True,
        )
    with cols[2]:
        st.text_input(
            "Credit Card Commissions (Rate)",
            value=f"{Assumptions.CREDIT_CARD_COMMISSION_RATE}",
            disabled=True,
        )
    st.caption("Annual churn rate is recorded but does not change the projection.")


def _plot_overview(projection: pd.DataFrame, *, height: int = 400) -> None:
    long = chart_series(projection)
    labels = [FIELD_LABELS[f] for f in CHART_FIELDS]
    colors = [CHART_COLORS[f] for f in CHART_FIELDS]
    chart = (
        alt.Chart(long).mark_line(point=True)
        .encode(
            x=alt.X("month:O", title="Month", sort=list(MONTH_LABELS)),
            y=alt.Y("value:Q", title="USD", axis=alt.Axis(format="$,.0f")),
            color=alt.Color("series:N", title="Series",
                            scale=alt.Scale(domain=labels, range=colors)),
            tooltip=["month", "series", alt.Tooltip("value:Q", format="$,.2f")],
        )
        .properties(title="Financial Metrics Overview", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _render_kpis(projection: pd.DataFrame) -> None:
    report = generate_projection_report(projection)
    k1, k2, k3, k4, k5 = st.columns(5)
    k1.metric("Annual Revenue", _fmt_currency(report.annual_revenue))
    k2.metric("Annual Gross Profit", _fmt_currency(report.annual_gross_profit))
    k3.metric("Annual Net Income", _fmt_currency(report.annual_net_income))
    k4.metric("Net Margin", f"{report.net_margin:.2%}")
    k5.metric("Break-even Month", report.break_even_month or "Not reached")


def _render_sections(projection: pd.DataFrame, active_section: str) -> None:
    st.radio(
        "Breakdown",
        SECTIONS,
        index=SECTIONS.index(active_section),
        key=SECTION_KEY,
        horizontal=True,
        label_visibility="collapsed",
    )
    st.markdown(f"**{active_section}**")
    st.dataframe(
        _format_table(section_table(projection, active_section)),
        use_container_width=True,
        hide_index=True,
    )


def render_dashboard(view: ViewState) -> None:
    validation = validate_inputs(view.raw_inputs)
    for warning in validation.warnings:
        st.warning(warning)

    assumptions = parse_assumptions(view.raw_inputs)
    projection, _ = run_projection(assumptions)

    st.subheader("Financial Projections")
    _render_kpis(projection)
    _plot_overview(projection)

    st.markdown("**Summary**")
    st.dataframe(_format_table(summary_table(projection)), use_container_width=True, hide_index=True)

    _render_sections(projection, view.active_section)

    st.download_button(
        "Download projection (CSV)",
        data=projection.to_csv(index=False).encode("utf-8"),
        file_name="proforma_12_month.csv",
        mime="text/csv",
    )


# ═══════════════════════════════════════════════════════════════════════════
# PAGE
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="12-Month Pro Forma Calculator", layout="wide")
st.title("12-Month Pro Forma Calculator")
st.caption("Financial Projections Based on Key Assumptions")

_render_inputs()
render_dashboard(_read_view_state())
