"""
Projection configuration.
Reference-workbook constants for the 12-month pro forma. The horizon and the
two fixed assumption rates are deliberately not here (see core.schema and
engine.records.Assumptions).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectionConfig:
    # bCommerce subscription revenue per unit of subscription sales
    ecommerce_plan_multiplier: float = 498.0
    wholesale_plan_multiplier: float = 4000.0

    # shipments generated per unit of subscription sales
    shipments_per_subscription: float = 120.0

    # month-over-month growth of the ramped revenue lines from period 2 on
    credit_card_increment: float = 2340.0
    shipping_increment: float = 3900.0

    # every cost line is this fraction of its revenue line
    cogs_ratio: float = 0.5

    salary_ratio: float = 0.3  # of total revenue
    facebook_ads: float = 1300.0
    software_subscriptions: float = 700.0
    indeed_recruiting: float = 500.0
    reseller_fee: float = 10000.0  # one-time, first period only


DEFAULT_CONFIG = ProjectionConfig()
