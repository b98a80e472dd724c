from __future__ import annotations

from typing import Dict, Tuple

# Fixed projection horizon: one record per calendar month.
PROJECTION_MONTHS: int = 12

MONTH_LABELS: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Statement sections, in the order they appear on the income statement.
REVENUE_FIELDS: Tuple[str, ...] = (
    "b_commerce_subscriptions",
    "credit_card_commissions",
    "shipping_profits",
    "three_pl_easy",
    "total_revenue",
)

COGS_FIELDS: Tuple[str, ...] = (
    "cogs_b_commerce",
    "cogs_credit_card",
    "cogs_shipping",
    "cogs_three_pl",
    "other_cogs",
    "total_cogs",
)

OPERATING_EXPENSE_FIELDS: Tuple[str, ...] = (
    "salaries",
    "payroll_taxes",
    "rent",
    "utilities",
    "facebook_ads",
    "insurance",
    "reseller_fee",
    "software_subscriptions",
    "indeed_recruiting",
    "total_operating_expenses",
)

OTHER_FIELDS: Tuple[str, ...] = (
    "other_income",
    "interest_expense",
    "taxes",
    "depreciation",
    "total_other",
)

NET_INCOME_FIELDS: Tuple[str, ...] = (
    "net_income_pre_draw",
    "owners_draw",
    "net_income",
)

RECORD_FIELDS: Tuple[str, ...] = (
    REVENUE_FIELDS
    + COGS_FIELDS
    + ("gross_profit",)
    + OPERATING_EXPENSE_FIELDS
    + ("net_operating_income",)
    + OTHER_FIELDS
    + NET_INCOME_FIELDS
)

# Series plotted on the overview chart and shown in the summary table.
CHART_FIELDS: Tuple[str, ...] = (
    "total_revenue",
    "total_cogs",
    "gross_profit",
    "total_operating_expenses",
    "net_operating_income",
    "net_income_pre_draw",
    "net_income",
)

FIELD_LABELS: Dict[str, str] = {
    "month": "Month",
    "b_commerce_subscriptions": "bCommerce Subscriptions",
    "credit_card_commissions": "Credit Card Commissions",
    "shipping_profits": "Shipping Profits",
    "three_pl_easy": "3PL Easy",
    "total_revenue": "Total Revenue",
    "cogs_b_commerce": "Costs of bCommerce",
    "cogs_credit_card": "Costs of Credit Card",
    "cogs_shipping": "Costs of Shipping",
    "cogs_three_pl": "Costs of 3PL Easy",
    "other_cogs": "Other COGS",
    "total_cogs": "Total COGS",
    "gross_profit": "Gross Profit",
    "salaries": "Salaries & Commission",
    "payroll_taxes": "Payroll Taxes",
    "rent": "Rent",
    "utilities": "Utilities",
    "facebook_ads": "Facebook Ads",
    "insurance": "Insurance",
    "reseller_fee": "Reseller Fee",
    "software_subscriptions": "Software & Subscriptions",
    "indeed_recruiting": "Indeed Recruiting",
    "total_operating_expenses": "Total Operating Expenses",
    "net_operating_income": "Net Operating Income",
    "other_income": "Other Income",
    "interest_expense": "Interest Expense",
    "taxes": "Taxes",
    "depreciation": "Depreciation",
    "total_other": "Total Other",
    "net_income_pre_draw": "Net Income (Pre-Draw)",
    "owners_draw": "Owner's Draw",
    "net_income": "Net Income",
}

CHART_COLORS: Dict[str, str] = {
    "total_revenue": "#4CAF50",
    "total_cogs": "#9E9E9E",
    "gross_profit": "#2196F3",
    "total_operating_expenses": "#E91E63",
    "net_operating_income": "#FF9800",
    "net_income_pre_draw": "#9C27B0",
    "net_income": "#F44336",
}

# User-editable assumption fields → the camelCase names used by the input form.
INPUT_FIELD_ALIASES: Dict[str, str] = {
    "average_order_value": "averageOrderValue",
    "ecommerce_subscription_revenue": "ecommerceSubscriptionRevenue",
    "wholesale_subscription_revenue": "wholesaleSubscriptionRevenue",
    "end_user_monthly_sales_orders": "endUserMonthlySalesOrders",
    "annual_churn_rate": "annualChurnRate",
}

# Read-only assumptions: shown on the form, never taken from it.
FIXED_INPUT_FIELDS: Dict[str, str] = {
    "commission_per_shipment": "commissionPerShipment",
    "credit_card_commission_rate": "creditCardCommissionRate",
}
