"""
RampedStream: three-phase recurrence shared by the credit-card commission and
shipping profit lines:

    period 0:   base
    period 1:   base * 2
    period >=2: previous + increment

The increment does not depend on the base, so from period 2 on the line grows
by exactly the same amount every month whatever the assumptions are.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import RevenueStream


@dataclass(frozen=True)
class RampedStream(RevenueStream):
    base: float = 0.0
    increment: float = 0.0

    def step(self, period: int, previous: float) -> float:
        if period < 0:
            raise ValueError(f"period must be non-negative, got {period}")
        if period == 0:
            return float(self.base)
        if period == 1:
            return float(self.base) * 2
        return previous + self.increment
