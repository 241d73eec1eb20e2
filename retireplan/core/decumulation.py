"""Retirement-years withdrawals."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from retireplan.core.rates import growth_factor, real_rate_of_return, whole_years

logger = logging.getLogger(__name__)

CONSERVATIVE_WITHDRAWAL_RATE = 0.04


class WithdrawalStrategy(str, Enum):
    DEPLETION = "depletion"
    CONSERVATIVE_FIXED = "conservative"


@dataclass
class DecumulationYear:
    year: int
    age: float
    starting_balance: float
    growth: float
    withdrawal: float
    ending_balance: float


@dataclass
class DecumulationResult:
    strategy: WithdrawalStrategy
    starting_balance: float
    annual_withdrawal: float
    withdrawal_rate: float
    ending_balance: float
    years: List[DecumulationYear] = field(default_factory=list)


def depletion_withdrawal(balance: float, real_rate: float, years: float) -> float:
    """
    Level annual withdrawal that amortizes ``balance`` over ``years`` at ``real_rate``.

        W = B * r / (1 - (1 + r)^-n)

    With r == 0 the payment is the straight split B / n. No horizon, no withdrawal.
    A real rate near -100% makes (1 + r)^-n overflow; the payment then tends to 0.
    """
    if years <= 0:
        return 0.0
    try:
        discount = (1 + real_rate) ** (-years)
    except (OverflowError, ZeroDivisionError):
        discount = math.inf
    denominator = 1 - discount
    if real_rate == 0 or denominator == 0:
        return balance / years
    return balance * real_rate / denominator


def simulate_decumulation(
    balance: float,
    asset_growth_after: float,
    inflation: float,
    retirement_years: float,
    strategy: WithdrawalStrategy = WithdrawalStrategy.DEPLETION,
    retirement_age: float = 0.0,
) -> DecumulationResult:
    """
    Draw the portfolio down over the retirement years.

    DEPLETION solves for a constant nominal withdrawal using the REAL rate of
    return, then replays the years at the nominal rate. The last year's ending
    balance is set to exactly zero, the solved-for target. The withdrawal is
    solved over the whole years actually simulated.

    CONSERVATIVE_FIXED withdraws 4% of the starting balance, the same dollar
    amount every year. The ending balance is left as simulated and may go
    below zero.

    Per year: balance = balance * (1 + growth) - withdrawal.
    """
    starting_balance = float(balance)
    years = whole_years(retirement_years)

    if strategy is WithdrawalStrategy.CONSERVATIVE_FIXED:
        withdrawal_rate = CONSERVATIVE_WITHDRAWAL_RATE
        annual_withdrawal = starting_balance * withdrawal_rate
    elif years == 0:
        logger.warning(
            "no whole retirement years (%.1f); no depletion schedule",
            retirement_years,
        )
        withdrawal_rate = 0.0
        annual_withdrawal = 0.0
    else:
        real_rate = real_rate_of_return(asset_growth_after, inflation)
        annual_withdrawal = depletion_withdrawal(starting_balance, real_rate, years)
        withdrawal_rate = annual_withdrawal / starting_balance if starting_balance else 0.0

    ending = starting_balance
    rows: List[DecumulationYear] = []
    for year in range(1, years + 1):
        start = ending
        ending = ending * growth_factor(asset_growth_after) - annual_withdrawal
        if strategy is WithdrawalStrategy.DEPLETION and year == years:
            ending = 0.0
        rows.append(
            DecumulationYear(
                year=year,
                age=retirement_age + year - 1,
                starting_balance=start,
                growth=start * (asset_growth_after / 100),
                withdrawal=annual_withdrawal,
                ending_balance=ending,
            )
        )

    logger.debug(
        "decumulation (%s): %d years, withdrawal %.2f/yr, balance %.2f -> %.2f",
        strategy.value,
        years,
        annual_withdrawal,
        starting_balance,
        ending,
    )

    return DecumulationResult(
        strategy=strategy,
        starting_balance=starting_balance,
        annual_withdrawal=annual_withdrawal,
        withdrawal_rate=withdrawal_rate,
        ending_balance=ending,
        years=rows,
    )
