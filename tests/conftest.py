import pytest

from engine.records import Assumptions
from engine.runner import run_projection


@pytest.fixture
def sample_assumptions():
    """AOV 100, 10 units of eCommerce subscriptions, 5 orders a month."""
    return Assumptions(
        average_order_value=100.0,
        ecommerce_subscription_revenue=10.0,
        wholesale_subscription_revenue=0.0,
        end_user_monthly_sales_orders=5.0,
    )


@pytest.fixture
def sample_projection(sample_assumptions):
    projection, _ = run_projection(sample_assumptions)
    return projection


@pytest.fixture
def zero_projection():
    projection, _ = run_projection(Assumptions())
    return projection
