"""Closed-form metrics over the two simulated phases; all rounding happens here."""

from __future__ import annotations

import math
from typing import Dict, Optional

from retireplan.core.accumulation import AccumulationResult
from retireplan.core.decumulation import DecumulationResult, WithdrawalStrategy
from retireplan.core.rates import clamp_horizon, compound, real_rate_of_return
from retireplan.models import Assumptions, ProjectionResults

DISPLAY_LABELS: Dict[str, str] = {
    "yearsUntilRetirement": "Years Until Retirement",
    "retirementYears": "Retirement Duration",
    "finalWorkingIncome": "Final Working Income",
    "socialSecurityAtRetirement": "Social Security at Retirement",
    "monthlySocialSecurity": "Monthly Social Security",
    "totalContributions": "Total Contributions",
    "totalEmployerMatch": "Total Employer Match",
    "totalWorkingContributions": "Total Contributions + Match",
    "totalInvestmentGrowth": "Total Investment Growth",
    "totalSavingsAtRetirement": "Savings at Retirement",
    "savingsAtRetirementInTodayDollars": "Savings at Retirement (Today's Dollars)",
    "realRateOfReturn": "Real Rate of Return",
    "withdrawalRate": "Initial Withdrawal Rate",
    "annualWithdrawal": "Annual Withdrawal",
    "annualWithdrawalAfterTax": "Annual Withdrawal After Tax",
    "annualWithdrawalInTodayDollars": "Annual Withdrawal (Today's Dollars)",
    "annualRetirementIncome": "Annual Retirement Income",
    "monthlyRetirementIncome": "Monthly Retirement Income",
    "totalRetirementIncome": "Total Retirement Income",
    "incomeReplacementPercent": "Income Replacement Percentage",
    "endingPortfolioValue": "Projected Ending Portfolio Value",
}

STRATEGY_DESCRIPTIONS: Dict[WithdrawalStrategy, str] = {
    WithdrawalStrategy.DEPLETION: "Depletion mode - portfolio will be fully depleted by life expectancy",
    WithdrawalStrategy.CONSERVATIVE_FIXED: "Conservative mode - using 4% withdrawal rule",
}


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves toward +infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def _money(value: float) -> Optional[int]:
    """Whole currency units, or None when the figure is not finite."""
    return round_half_up(value) if math.isfinite(value) else None


def _percent(fraction: float) -> Optional[float]:
    return round(fraction * 100, 2) if math.isfinite(fraction) else None


def _ending_value(value: float) -> Optional[int]:
    # an overdrawn portfolio reports as empty
    if math.isnan(value):
        return None
    return _money(max(0.0, value))


def _inflated(amount: float, price_level: float) -> float:
    return amount * price_level if amount else 0.0


def _ratio(numerator: float, denominator: float) -> Optional[float]:
    if denominator == 0:
        return None
    value = numerator / denominator
    return value if math.isfinite(value) else None


def derive_metrics(
    assumptions: Assumptions,
    accumulation: AccumulationResult,
    decumulation: DecumulationResult,
) -> ProjectionResults:
    working_years = clamp_horizon(assumptions.working_years)
    retirement_years = clamp_horizon(assumptions.retirement_years)
    price_level = compound(assumptions.inflation, working_years)

    real_rate = real_rate_of_return(assumptions.assetGrowthAfter, assumptions.inflation)
    final_working_income = _inflated(assumptions.currentIncome, price_level)
    social_security = _inflated(assumptions.socialSecurity, price_level)

    savings = accumulation.ending_balance
    withdrawal = decumulation.annual_withdrawal
    withdrawal_after_tax = withdrawal * (1 - assumptions.retirementTaxRate / 100)
    annual_income = withdrawal_after_tax + social_security

    replacement = _ratio(annual_income, final_working_income)

    return ProjectionResults(
        yearsUntilRetirement=working_years,
        retirementYears=retirement_years,
        finalWorkingIncome=_money(final_working_income),
        socialSecurityAtRetirement=_money(social_security),
        monthlySocialSecurity=_money(social_security / 12),
        totalContributions=_money(accumulation.total_contributions),
        totalEmployerMatch=_money(accumulation.total_match),
        totalWorkingContributions=_money(accumulation.total_contributions + accumulation.total_match),
        totalInvestmentGrowth=_money(accumulation.total_growth),
        totalSavingsAtRetirement=_money(savings),
        savingsAtRetirementInTodayDollars=_money(savings / price_level),
        realRateOfReturn=_percent(real_rate),
        withdrawalRate=_percent(decumulation.withdrawal_rate),
        annualWithdrawal=_money(withdrawal),
        annualWithdrawalAfterTax=_money(withdrawal_after_tax),
        annualWithdrawalInTodayDollars=_money(withdrawal / price_level),
        annualRetirementIncome=_money(annual_income),
        monthlyRetirementIncome=_money(annual_income / 12),
        totalRetirementIncome=_money(annual_income * retirement_years),
        endingPortfolioValue=_ending_value(decumulation.ending_balance),
        incomeReplacementPercent=(
            _money(replacement * 100) if replacement is not None else None
        ),
    )


__all__ = ["DISPLAY_LABELS", "STRATEGY_DESCRIPTIONS", "round_half_up", "derive_metrics"]
