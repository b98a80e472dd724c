"""
Projection engine: assumptions in, twelve monthly income-statement records out.
"""

from .records import Assumptions, MonthlyRecord
from .runner import compute_projection, records_to_frame, run_projection

__all__ = [
    "Assumptions",
    "MonthlyRecord",
    "compute_projection",
    "records_to_frame",
    "run_projection",
]
