"""Rate helpers shared by both projection phases.

All rates are percentages (``7`` means 7%).
"""

from __future__ import annotations

import math

# Longest horizon either phase will simulate; ages are human lifetimes.
MAX_HORIZON_YEARS = 150


def growth_factor(rate_percent: float) -> float:
    return 1.0 + rate_percent / 100.0


def compound(rate_percent: float, years: float) -> float:
    """(1 + rate)^years, the price level after ``years`` of ``rate``; inf when it overflows."""
    try:
        return growth_factor(rate_percent) ** years
    except OverflowError:
        return math.inf


def real_rate_of_return(nominal_percent: float, inflation_percent: float) -> float:
    """Growth net of inflation, as a fraction (0.0196 for 4% nominal / 2% inflation)."""
    return growth_factor(nominal_percent) / growth_factor(inflation_percent) - 1.0


def clamp_horizon(horizon: float) -> float:
    """Horizon limited to 0..MAX_HORIZON_YEARS."""
    return min(max(0.0, horizon), float(MAX_HORIZON_YEARS))


def whole_years(horizon: float) -> int:
    """Number of simulated years in a horizon; zero for empty or negative horizons."""
    return int(math.floor(clamp_horizon(horizon)))
