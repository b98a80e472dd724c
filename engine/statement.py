"""
Per-period statement math.

Given the four revenue values of one period, derive every cost, expense and
profit line. All of it is arithmetic on the current period only; the
period-to-period state lives in the runner.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import MONTH_LABELS

from .records import Assumptions, MonthlyRecord


@dataclass(frozen=True)
class BaseQuantities:
    """Values computed once per projection and reused in every period."""
    credit_card: float
    shipping: float
    b_commerce: float


def base_quantities(
    assumptions: Assumptions,
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> BaseQuantities:
    subs = assumptions.total_subscription_revenue
    credit_card = (
        subs
        * assumptions.end_user_monthly_sales_orders
        * assumptions.average_order_value
        * assumptions.credit_card_commission_rate
    )
    shipping = subs * config.shipments_per_subscription * assumptions.commission_per_shipment
    b_commerce = (
        config.ecommerce_plan_multiplier * assumptions.ecommerce_subscription_revenue
        + config.wholesale_plan_multiplier * assumptions.wholesale_subscription_revenue
    )
    return BaseQuantities(credit_card=credit_card, shipping=shipping, b_commerce=b_commerce)


def build_monthly_record(
    period: int,
    *,
    b_commerce_subscriptions: float,
    credit_card_commissions: float,
    shipping_profits: float,
    three_pl_easy: float,
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> MonthlyRecord:
    """Assemble one MonthlyRecord from the period's revenue lines."""
    total_revenue = (
        b_commerce_subscriptions + credit_card_commissions + shipping_profits + three_pl_easy
    )

    # Each cost line tracks its revenue line
    ratio = config.cogs_ratio
    cogs_b_commerce = b_commerce_subscriptions * ratio
    cogs_credit_card = credit_card_commissions * ratio
    cogs_shipping = shipping_profits * ratio
    cogs_three_pl = three_pl_easy * ratio
    other_cogs = 0.0
    total_cogs = cogs_b_commerce + cogs_credit_card + cogs_shipping + cogs_three_pl + other_cogs

    gross_profit = total_revenue - total_cogs

    salaries = total_revenue * config.salary_ratio
    payroll_taxes = 0.0
    rent = 0.0
    utilities = 0.0
    facebook_ads = config.facebook_ads
    insurance = 0.0
    reseller_fee = config.reseller_fee if period == 0 else 0.0
    software_subscriptions = config.software_subscriptions
    indeed_recruiting = config.indeed_recruiting
    total_operating_expenses = (
        salaries
        + payroll_taxes
        + rent
        + utilities
        + facebook_ads
        + insurance
        + reseller_fee
        + software_subscriptions
        + indeed_recruiting
    )

    net_operating_income = gross_profit - total_operating_expenses

    other_income = 0.0
    interest_expense = 0.0
    taxes = 0.0
    depreciation = 0.0
    total_other = other_income - interest_expense - taxes - depreciation

    net_income_pre_draw = net_operating_income + total_other
    owners_draw = 0.0
    net_income = net_income_pre_draw - owners_draw

    return MonthlyRecord(
        period=period,
        month=MONTH_LABELS[period],
        b_commerce_subscriptions=b_commerce_subscriptions,
        credit_card_commissions=credit_card_commissions,
        shipping_profits=shipping_profits,
        three_pl_easy=three_pl_easy,
        total_revenue=total_revenue,
        cogs_b_commerce=cogs_b_commerce,
        cogs_credit_card=cogs_credit_card,
        cogs_shipping=cogs_shipping,
        cogs_three_pl=cogs_three_pl,
        other_cogs=other_cogs,
        total_cogs=total_cogs,
        gross_profit=gross_profit,
        salaries=salaries,
        payroll_taxes=payroll_taxes,
        rent=rent,
        utilities=utilities,
        facebook_ads=facebook_ads,
        insurance=insurance,
        reseller_fee=reseller_fee,
        software_subscriptions=software_subscriptions,
        indeed_recruiting=indeed_recruiting,
        total_operating_expenses=total_operating_expenses,
        net_operating_income=net_operating_income,
        other_income=other_income,
        interest_expense=interest_expense,
        taxes=taxes,
        depreciation=depreciation,
        total_other=total_other,
        net_income_pre_draw=net_income_pre_draw,
        owners_draw=owners_draw,
        net_income=net_income,
    )
