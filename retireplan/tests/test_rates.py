from __future__ import annotations

from math import inf, isclose

from retireplan.core.rates import (
    MAX_HORIZON_YEARS,
    clamp_horizon,
    compound,
    real_rate_of_return,
    whole_years,
)


def test_compound():
    assert isclose(compound(10.0, 2), 1.21)
    assert compound(5.0, 0) == 1.0


def test_compound_overflow_is_infinite():
    assert compound(1e20, 35) == inf


def test_real_rate_of_return():
    assert isclose(real_rate_of_return(4.0, 2.0), 1.04 / 1.02 - 1)
    assert real_rate_of_return(3.0, 3.0) == 0.0


def test_horizons():
    assert whole_years(-3) == 0
    assert whole_years(0) == 0
    assert whole_years(24.5) == 24
    assert whole_years(1e308) == MAX_HORIZON_YEARS
    assert clamp_horizon(-1.0) == 0.0
    assert clamp_horizon(35.0) == 35.0
    assert clamp_horizon(1e12) == MAX_HORIZON_YEARS
