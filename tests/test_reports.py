"""
Unit tests for reports.tables and reports.metrics.

Run:
    pytest tests/test_reports.py -v
"""

import pandas as pd
import pytest

from core.schema import CHART_FIELDS, FIELD_LABELS, MONTH_LABELS, RECORD_FIELDS
from engine.records import Assumptions
from engine.runner import run_projection
from reports.metrics import (
    ProjectionReport,
    add_margins,
    annual_totals,
    break_even_month,
    generate_projection_report,
)
from reports.tables import SECTIONS, chart_series, section_table, summary_table, with_total_row


# =========================================================================
# SUMMARY TABLE
# =========================================================================
class TestSummaryTable:
    """Headline series plus a Total row equal to the column sums."""

    def test_shape_and_labels(self, sample_projection):
        table = summary_table(sample_projection)
        assert len(table) == 13
        assert list(table.columns) == ["Month"] + [FIELD_LABELS[f] for f in CHART_FIELDS]
        assert table["Month"].tolist() == list(MONTH_LABELS) + ["Total"]

    @pytest.mark.parametrize("assumptions", [
        Assumptions(),
        Assumptions(average_order_value=100.0, ecommerce_subscription_revenue=10.0,
                    end_user_monthly_sales_orders=5.0),
        Assumptions(average_order_value=19.99, ecommerce_subscription_revenue=7.0,
                    wholesale_subscription_revenue=3.0, end_user_monthly_sales_orders=321.0),
    ])
    def test_total_row_is_column_sum(self, assumptions):
        projection, _ = run_projection(assumptions)
        table = summary_table(projection)
        total = table.iloc[-1]
        for field in CHART_FIELDS:
            label = FIELD_LABELS[field]
            assert total[label] == pytest.approx(projection[field].sum())
            assert total[label] == pytest.approx(sum(table[label].iloc[:12]))

    def test_known_total(self, sample_projection):
        total = summary_table(sample_projection).iloc[-1]
        cc_total = 35.5 + sum(71.0 + 2340.0 * k for k in range(11))
        sp_total = 600.0 + sum(1200.0 + 3900.0 * k for k in range(11))
        assert total["Total Revenue"] == pytest.approx(4980.0 * 12 + cc_total + sp_total)

    def test_source_frame_untouched(self, sample_projection):
        before = sample_projection.copy()
        summary_table(sample_projection)
        pd.testing.assert_frame_equal(before, sample_projection)

    def test_missing_columns_rejected(self):
        with pytest.raises(ValueError, match="Missing required columns"):
            summary_table(pd.DataFrame({"month": MONTH_LABELS}))


class TestWithTotalRow:
    """Generic aggregate row."""

    def test_appends_sums(self):
        table = pd.DataFrame({"Month": ["Jan", "Feb"], "A": [1.0, 2.5], "B": [-1.0, 1.0]})
        out = with_total_row(table)
        assert out.iloc[-1].tolist() == ["Total", 3.5, 0.0]
        assert len(table) == 2


# =========================================================================
# SECTION TABLES
# =========================================================================
class TestSectionTables:
    """Revenue, COGS, Operating Expenses, Income Statement breakdowns."""

    def test_sections(self):
        assert SECTIONS == ("Revenue", "COGS", "Operating Expenses", "Income Statement")

    def test_revenue_columns(self, sample_projection):
        table = section_table(sample_projection, "Revenue")
        assert list(table.columns) == [
            "Month", "bCommerce Subscriptions", "Credit Card Commissions",
            "Shipping Profits", "3PL Easy", "Total Revenue",
        ]
        assert len(table) == 12

    def test_cogs_columns(self, sample_projection):
        table = section_table(sample_projection, "COGS")
        assert list(table.columns)[1:] == [
            "Costs of bCommerce", "Costs of Credit Card", "Costs of Shipping",
            "Costs of 3PL Easy", "Other COGS", "Total COGS",
        ]

    def test_operating_expense_columns(self, sample_projection):
        table = section_table(sample_projection, "Operating Expenses")
        assert "Salaries & Commission" in table.columns
        assert table["Reseller Fee"].tolist() == [10000.0] + [0.0] * 11
        assert table.columns[-1] == "Total Operating Expenses"

    def test_income_statement_columns(self, sample_projection):
        table = section_table(sample_projection, "Income Statement")
        assert list(table.columns) == [
            "Month", "Total Revenue", "Total COGS", "Gross Profit",
            "Total Operating Expenses", "Net Operating Income", "Other Income",
            "Interest Expense", "Taxes", "Depreciation", "Total Other",
            "Net Income (Pre-Draw)", "Owner's Draw", "Net Income (After Draw)",
        ]

    def test_optional_total_row(self, sample_projection):
        table = section_table(sample_projection, "COGS", include_total=True)
        assert table["Month"].iloc[-1] == "Total"
        assert table["Total COGS"].iloc[-1] == pytest.approx(sample_projection["total_cogs"].sum())

    def test_unknown_section(self, sample_projection):
        with pytest.raises(KeyError):
            section_table(sample_projection, "Balance Sheet")


# =========================================================================
# CHART SERIES
# =========================================================================
class TestChartSeries:
    """Long-format headline series for plotting."""

    def test_long_format(self, sample_projection):
        long = chart_series(sample_projection)
        assert len(long) == 12 * len(CHART_FIELDS)
        assert list(long.columns) == ["period", "month", "field", "series", "value"]
        assert long["field"].unique().tolist() == list(CHART_FIELDS)

    def test_month_order_within_series(self, sample_projection):
        long = chart_series(sample_projection)
        revenue = long[long["field"] == "total_revenue"]
        assert revenue["month"].tolist() == list(MONTH_LABELS)
        assert revenue["value"].tolist() == sample_projection["total_revenue"].tolist()
        assert set(revenue["series"]) == {"Total Revenue"}


# =========================================================================
# METRICS
# =========================================================================
class TestMetrics:
    """Annual totals, margins, break-even."""

    def test_annual_totals(self, sample_projection):
        totals = annual_totals(sample_projection)
        assert list(totals.index) == list(RECORD_FIELDS)
        assert totals["reseller_fee"] == 10000.0
        assert totals["facebook_ads"] == pytest.approx(1300.0 * 12)

    def test_margins(self, sample_projection):
        out = add_margins(sample_projection)
        assert out["gross_margin"].tolist() == pytest.approx([0.5] * 12)
        first = sample_projection.iloc[0]
        assert out["net_margin"].iloc[0] == pytest.approx(first["net_income"] / first["total_revenue"])
        assert out["cumulative_net_income"].iloc[-1] == pytest.approx(sample_projection["net_income"].sum())
        assert "gross_margin" not in sample_projection.columns

    def test_margins_zero_without_revenue(self, zero_projection):
        out = add_margins(zero_projection)
        assert out["gross_margin"].iloc[0] == 0.0
        assert out["net_margin"].iloc[1] == 0.0

    def test_break_even_sample(self, sample_projection):
        assert break_even_month(sample_projection) == "Apr"

    def test_break_even_zero_inputs(self, zero_projection):
        assert break_even_month(zero_projection) == "May"

    def test_break_even_never(self):
        frame = pd.DataFrame({"month": ["Jan", "Feb"], "net_income": [-1.0, -2.0]})
        assert break_even_month(frame) is None


class TestProjectionReport:
    """Headline report."""

    def test_report_values(self, sample_projection):
        report = generate_projection_report(sample_projection)
        assert isinstance(report, ProjectionReport)
        assert report.annual_revenue == pytest.approx(sample_projection["total_revenue"].sum())
        assert report.gross_margin == pytest.approx(0.5)
        assert report.break_even_month == "Apr"
        assert report.first_month_net_income == pytest.approx(-11376.9)

    def test_to_dataframe(self, sample_projection):
        df = generate_projection_report(sample_projection).to_dataframe()
        assert list(df.columns) == ["Metric", "Value", "Unit"]
        assert "Break-even Month" in df["Metric"].tolist()

    def test_not_reached(self):
        report = ProjectionReport(0, 0, 0, 0, 0, 0, 0, None, 0, 0)
        row = report.to_dataframe().set_index("Metric").loc["Break-even Month"]
        assert row["Value"] == "Not reached"

    def test_empty_frame_rejected(self, sample_projection):
        with pytest.raises(ValueError):
            generate_projection_report(sample_projection.iloc[0:0])
