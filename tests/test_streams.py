"""
Unit tests for the revenue stream models.

Run:
    pytest tests/test_streams.py -v
"""

import pytest

from streams.base import RevenueStream
from streams.constant import ConstantStream
from streams.ramp import RampedStream


def _unroll(stream, periods=12):
    values, previous = [], 0.0
    for period in range(periods):
        previous = stream.step(period, previous)
        values.append(previous)
    return values


class TestRevenueStream:
    """The base class is an interface only."""

    def test_step_not_implemented(self):
        with pytest.raises(NotImplementedError):
            RevenueStream().step(0, 0.0)


class TestConstantStream:
    """Same amount every period, regardless of history."""

    def test_constant(self):
        assert _unroll(ConstantStream(amount=4980.0)) == [4980.0] * 12

    def test_default_is_zero(self):
        assert _unroll(ConstantStream()) == [0.0] * 12

    def test_ignores_previous(self):
        assert ConstantStream(amount=7.0).step(3, 1e9) == 7.0


class TestRampedStream:
    """base, 2*base, then previous + increment."""

    def test_three_phases(self):
        assert _unroll(RampedStream(base=600.0, increment=3900.0), 4) == [600.0, 1200.0, 5100.0, 9000.0]

    def test_step_uses_own_previous(self):
        stream = RampedStream(base=1.0, increment=10.0)
        assert stream.step(7, 123.0) == 133.0

    def test_period_zero_ignores_previous(self):
        stream = RampedStream(base=35.5, increment=2340.0)
        assert stream.step(0, 999.0) == 35.5
        assert stream.step(1, 999.0) == 71.0

    def test_zero_base_still_ramps(self):
        assert _unroll(RampedStream(base=0.0, increment=2340.0), 4) == [0.0, 0.0, 2340.0, 4680.0]

    def test_negative_period_rejected(self):
        with pytest.raises(ValueError):
            RampedStream(base=1.0, increment=1.0).step(-1, 0.0)
