"""Working-years savings growth."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from retireplan.core.rates import MAX_HORIZON_YEARS, compound, growth_factor, whole_years

logger = logging.getLogger(__name__)


@dataclass
class AccumulationYear:
    year: int
    age: float
    income: float
    deferral_rate: float
    contribution: float
    match: float
    growth: float
    ending_balance: float


@dataclass
class AccumulationResult:
    starting_balance: float
    ending_balance: float
    total_contributions: float
    total_match: float
    years: List[AccumulationYear] = field(default_factory=list)

    @property
    def total_growth(self) -> float:
        return (
            self.ending_balance
            - self.starting_balance
            - self.total_contributions
            - self.total_match
        )


def simulate_accumulation(
    current_savings: float,
    current_income: float,
    current_deferral: float,
    current_match: float,
    asset_growth_before: float,
    inflation: float,
    working_years: float,
    auto_escalate: bool = False,
    escalation_rate: float = 0.0,
    escalation_cap: float = 0.0,
    starting_age: float = 0.0,
) -> AccumulationResult:
    """
    Compound savings over the working years.

    Order of operations (per year):
      1) Income for the year grows with inflation: income * (1 + inflation)^(year - 1).
      2) Employee contribution and employer match are percentages of that income.
      3) Growth is applied to the prior balance, THEN contribution + match are added
         (new money earns nothing in its first year).
      4) With auto-escalation on, the deferral rate steps up for next year,
         never past the cap.

    A zero or negative horizon runs no years: the balance stays at current_savings.
    """
    balance = float(current_savings)
    deferral_rate = float(current_deferral)
    total_contributions = 0.0
    total_match = 0.0
    rows: List[AccumulationYear] = []

    years = whole_years(working_years)
    if working_years < 0:
        logger.warning(
            "retirement age precedes starting age (%.1f working years); skipping accumulation",
            working_years,
        )
    elif working_years > MAX_HORIZON_YEARS:
        logger.warning(
            "%.1f working years exceeds %d; simulating %d",
            working_years,
            MAX_HORIZON_YEARS,
            years,
        )

    for year in range(1, years + 1):
        income = current_income * compound(inflation, year - 1)
        contribution = income * (deferral_rate / 100)
        match = income * (current_match / 100)
        total_contributions += contribution
        total_match += match

        growth = balance * (asset_growth_before / 100)
        balance = balance * growth_factor(asset_growth_before) + contribution + match

        rows.append(
            AccumulationYear(
                year=year,
                age=starting_age + year - 1,
                income=income,
                deferral_rate=deferral_rate,
                contribution=contribution,
                match=match,
                growth=growth,
                ending_balance=balance,
            )
        )

        if auto_escalate and deferral_rate < escalation_cap:
            deferral_rate = min(deferral_rate + escalation_rate, escalation_cap)

    logger.debug(
        "accumulation: %d years, balance %.2f -> %.2f (contributions %.2f, match %.2f)",
        years,
        current_savings,
        balance,
        total_contributions,
        total_match,
    )

    return AccumulationResult(
        starting_balance=float(current_savings),
        ending_balance=balance,
        total_contributions=total_contributions,
        total_match=total_match,
        years=rows,
    )
