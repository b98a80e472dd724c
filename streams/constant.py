"""
ConstantStream: the same amount in every period.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import RevenueStream


@dataclass(frozen=True)
class ConstantStream(RevenueStream):
    """
    Flat revenue line. Used for bCommerce subscriptions, and with amount=0
    for the reserved 3PL Easy line.
    """

    amount: float = 0.0

    def step(self, period: int, previous: float) -> float:
        return float(self.amount)
