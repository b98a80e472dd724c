"""
Input boundary: raw form values to engine Assumptions.

Anything the user can type is accepted: numeric strings are parsed and
non-numeric, non-finite or negative values are replaced by 0 so the projection
always renders. The two fixed rates are not read from input at all.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from core.utils import coerce_amount, invalid_amount_reason
from engine.records import Assumptions

logger = logging.getLogger(__name__)


class AssumptionInputs(BaseModel):
    """User-editable assumptions as collected by the input form."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    average_order_value: float = Field(default=0.0, alias="averageOrderValue")
    ecommerce_subscription_revenue: float = Field(default=0.0, alias="ecommerceSubscriptionRevenue")
    wholesale_subscription_revenue: float = Field(default=0.0, alias="wholesaleSubscriptionRevenue")
    end_user_monthly_sales_orders: float = Field(default=0.0, alias="endUserMonthlySalesOrders")
    annual_churn_rate: float = Field(default=0.0, alias="annualChurnRate")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_amount(cls, v: Any, info: ValidationInfo) -> float:
        reason = invalid_amount_reason(v)
        if reason is not None:
            logger.warning("Coercing %s=%r to 0 (%s)", info.field_name, v, reason)
        return coerce_amount(v)

    def to_assumptions(self) -> Assumptions:
        return Assumptions(
            average_order_value=self.average_order_value,
            ecommerce_subscription_revenue=self.ecommerce_subscription_revenue,
            wholesale_subscription_revenue=self.wholesale_subscription_revenue,
            end_user_monthly_sales_orders=self.end_user_monthly_sales_orders,
            annual_churn_rate=self.annual_churn_rate,
        )


def parse_assumptions(raw: Mapping[str, Any]) -> Assumptions:
    """Coerce a mapping of raw form values (snake_case or camelCase keys) to Assumptions."""
    return AssumptionInputs.model_validate(dict(raw)).to_assumptions()
