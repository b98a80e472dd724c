"""
Engine input and output records.

Assumptions is the engine's input contract. The commission per shipment and the
card processing rate are fixed by the business, so they are class constants
rather than fields: no caller can construct an Assumptions with other values.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import ClassVar, Dict


@dataclass(frozen=True)
class Assumptions:
    average_order_value: float = 0.0
    ecommerce_subscription_revenue: float = 0.0
    wholesale_subscription_revenue: float = 0.0
    end_user_monthly_sales_orders: float = 0.0

    # collected from the user but not referenced by any projection formula
    annual_churn_rate: float = 0.0

    COMMISSION_PER_SHIPMENT: ClassVar[float] = 0.5
    CREDIT_CARD_COMMISSION_RATE: ClassVar[float] = 0.0071

    @property
    def commission_per_shipment(self) -> float:
        return self.COMMISSION_PER_SHIPMENT

    @property
    def credit_card_commission_rate(self) -> float:
        return self.CREDIT_CARD_COMMISSION_RATE

    @property
    def total_subscription_revenue(self) -> float:
        return self.ecommerce_subscription_revenue + self.wholesale_subscription_revenue


@dataclass(frozen=True)
class MonthlyRecord:
    """One fully-populated period of the pro forma income statement."""

    period: int
    month: str

    # Revenue
    b_commerce_subscriptions: float
    credit_card_commissions: float
    shipping_profits: float
    three_pl_easy: float
    total_revenue: float

    # COGS
    cogs_b_commerce: float
    cogs_credit_card: float
    cogs_shipping: float
    cogs_three_pl: float
    other_cogs: float
    total_cogs: float

    gross_profit: float

    # Operating expenses
    salaries: float
    payroll_taxes: float
    rent: float
    utilities: float
    facebook_ads: float
    insurance: float
    reseller_fee: float
    software_subscriptions: float
    indeed_recruiting: float
    total_operating_expenses: float

    net_operating_income: float

    # Other income / expense
    other_income: float
    interest_expense: float
    taxes: float
    depreciation: float
    total_other: float

    # Net income
    net_income_pre_draw: float
    owners_draw: float
    net_income: float

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)
