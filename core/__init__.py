"""
Core package: schema definitions, configuration, and shared utilities.
No business logic lives here.
"""

from .schema import (
    PROJECTION_MONTHS,
    MONTH_LABELS,
    RECORD_FIELDS,
    CHART_FIELDS,
    FIELD_LABELS,
)
from .config import ProjectionConfig, DEFAULT_CONFIG
from .utils import MAX_AMOUNT, coerce_amount, invalid_amount_reason, require_columns, safe_ratio

__all__ = [
    "PROJECTION_MONTHS",
    "MONTH_LABELS",
    "RECORD_FIELDS",
    "CHART_FIELDS",
    "FIELD_LABELS",
    "ProjectionConfig",
    "DEFAULT_CONFIG",
    "MAX_AMOUNT",
    "coerce_amount",
    "invalid_amount_reason",
    "require_columns",
    "safe_ratio",
]
