"""
Projection runner: folds the revenue streams forward over the fixed horizon.

The only state carried from one period to the next is the running value of the
two ramped lines (credit-card commissions and shipping profits). Everything
else in a record is derived from the period's own revenue values, so the twelve
records are produced strictly left to right in a single pass.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Dict, Tuple

import pandas as pd

from core.config import DEFAULT_CONFIG, ProjectionConfig
from core.schema import PROJECTION_MONTHS, RECORD_FIELDS
from streams.constant import ConstantStream
from streams.ramp import RampedStream

from .records import Assumptions, MonthlyRecord
from .statement import base_quantities, build_monthly_record

logger = logging.getLogger(__name__)


def records_to_frame(records) -> pd.DataFrame:
    """One row per period: period, month, then every record field in statement order."""
    frame = pd.DataFrame([r.to_dict() for r in records])
    return frame.loc[:, ["period", "month", *RECORD_FIELDS]]


def compute_projection(
    assumptions: Assumptions,
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> Tuple[MonthlyRecord, ...]:
    """
    Compute the 12-period pro forma for one set of assumptions.

    Pure and total: no I/O, no shared state, and defined for every finite
    non-negative input. Calling it twice with equal assumptions yields equal
    records.
    """
    base = base_quantities(assumptions, config)

    b_commerce = ConstantStream(amount=base.b_commerce)
    three_pl = ConstantStream(amount=0.0)
    credit_card = RampedStream(base=base.credit_card, increment=config.credit_card_increment)
    shipping = RampedStream(base=base.shipping, increment=config.shipping_increment)

    records = []
    cc_running = 0.0
    sp_running = 0.0
    for period in range(PROJECTION_MONTHS):
        cc_running = credit_card.step(period, cc_running)
        sp_running = shipping.step(period, sp_running)
        records.append(
            build_monthly_record(
                period,
                b_commerce_subscriptions=b_commerce.step(period, 0.0),
                credit_card_commissions=cc_running,
                shipping_profits=sp_running,
                three_pl_easy=three_pl.step(period, 0.0),
                config=config,
            )
        )

    logger.debug(
        "Projection computed: base credit card=%.4f, base shipping=%.4f, base bCommerce=%.4f",
        base.credit_card, base.shipping, base.b_commerce,
    )
    return tuple(records)


def run_projection(
    assumptions: Assumptions,
    config: ProjectionConfig = DEFAULT_CONFIG,
) -> Tuple[pd.DataFrame, Dict]:
    """
    Run the projection and return it in tabular form.

    Returns
    -------
    (projection_df, results)
    projection_df: one row per period with columns period, month and every record field
    results: dict with the raw records, the assumptions and the base quantities
    """
    records = compute_projection(assumptions, config)

    projection = records_to_frame(records)

    results = {
        "records": records,
        "assumptions": assumptions,
        "base_quantities": asdict(base_quantities(assumptions, config)),
        "n_periods": len(records),
    }
    return projection, results
