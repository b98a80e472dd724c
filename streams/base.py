"""
Base class for revenue streams.
Just the interface, no implementations.
"""

from __future__ import annotations


class RevenueStream:
    """
    Interface for a revenue line projected one period at a time.

    Each line keeps its own history: `previous` is this stream's own value at
    `period - 1` and is ignored at period 0.
    """

    def step(self, period: int, previous: float) -> float:
        raise NotImplementedError
