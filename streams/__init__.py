"""
Revenue streams: per-period models for the individual revenue lines.
"""

from .base import RevenueStream
from .constant import ConstantStream
from .ramp import RampedStream

__all__ = [
    "RevenueStream",
    "ConstantStream",
    "RampedStream",
]
