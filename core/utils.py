from __future__ import annotations

import math
from typing import Any, Iterable, Optional

import numpy as np
import pandas as pd

# Largest accepted input. Products of four inputs stay far inside float range.
MAX_AMOUNT = 1e12


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            return float(value.strip().replace(",", ""))
        except ValueError:
            return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        try:
            return float(value)
        except OverflowError:
            return math.inf
    return None


def invalid_amount_reason(value: Any) -> Optional[str]:
    """
    Why coerce_amount() would replace `value` with 0.0, or None when the value
    is usable as-is. Blank input (None or an empty string) is not an error.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    number = _to_number(value)
    if number is None:
        return "not a number"
    if not math.isfinite(number):
        return "not finite"
    if number < 0:
        return "negative"
    if number > MAX_AMOUNT:
        return "too large"
    return None


def coerce_amount(value: Any) -> float:
    """
    Convert a raw input value to a non-negative finite float.

    Numeric strings (thousands separators allowed) are parsed; blank,
    unparsable, non-finite, negative and above-MAX_AMOUNT values become 0.0.
    Never raises.
    """
    if invalid_amount_reason(value) is not None:
        return 0.0
    number = _to_number(value)
    if number is None or number == 0:
        return 0.0
    return number


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or 0.0 when the denominator is zero."""
    if denominator == 0:
        return 0.0
    return float(numerator) / float(denominator)
