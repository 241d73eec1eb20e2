from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from retireplan.core.decumulation import WithdrawalStrategy
from retireplan.parsing import parse_flag, parse_value

NUMERIC_FIELDS = (
    "startingAge",
    "retirementAge",
    "lifeExpectancy",
    "currentSavings",
    "currentIncome",
    "currentDeferral",
    "escalationRate",
    "escalationCap",
    "currentMatch",
    "assetGrowthBefore",
    "assetGrowthAfter",
    "inflation",
    "retirementTaxRate",
    "socialSecurity",
)

# Starting values of the calculator form, as the form holds them (text).
DEFAULT_FORM: Dict[str, Any] = {
    "startingAge": "30",
    "retirementAge": "65",
    "currentSavings": "100000",
    "currentIncome": "80000",
    "currentDeferral": "10",
    "autoEscalate": False,
    "escalationRate": "1",
    "escalationCap": "15",
    "currentMatch": "5",
    "assetGrowthBefore": "7",
    "assetGrowthAfter": "4",
    "inflation": "2",
    "lifeExpectancy": "90",
    "retirementTaxRate": "20",
    "socialSecurity": "25000",
    "withdrawalStrategy": WithdrawalStrategy.DEPLETION.value,
}

_STRATEGY_ALIASES = {
    "depletion": WithdrawalStrategy.DEPLETION,
    "conservative": WithdrawalStrategy.CONSERVATIVE_FIXED,
    "conservative_fixed": WithdrawalStrategy.CONSERVATIVE_FIXED,
}


class Assumptions(BaseModel):
    """One calculation's inputs. Percent fields are percentages (7 = 7%)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    startingAge: float = 0.0
    retirementAge: float = 0.0
    lifeExpectancy: float = 0.0

    currentSavings: float = 0.0
    currentIncome: float = 0.0
    currentDeferral: float = 0.0

    autoEscalate: bool = False
    escalationRate: float = 0.0
    escalationCap: float = 0.0

    currentMatch: float = 0.0
    assetGrowthBefore: float = 0.0
    assetGrowthAfter: float = 0.0
    inflation: float = 0.0
    retirementTaxRate: float = 0.0
    socialSecurity: float = 0.0

    withdrawalStrategy: WithdrawalStrategy = WithdrawalStrategy.DEPLETION

    @model_validator(mode="before")
    @classmethod
    def _accept_depletion_toggle(cls, data: Any) -> Any:
        # older clients send the on/off toggle instead of the strategy name
        if isinstance(data, dict) and "depletionMode" in data:
            data = dict(data)
            depletion = parse_flag(data.pop("depletionMode"))
            data.setdefault(
                "withdrawalStrategy",
                WithdrawalStrategy.DEPLETION if depletion else WithdrawalStrategy.CONSERVATIVE_FIXED,
            )
        return data

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> float:
        return parse_value(value)

    @field_validator("autoEscalate", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        return parse_flag(value)

    @field_validator("withdrawalStrategy", mode="before")
    @classmethod
    def _coerce_strategy(cls, value: Any) -> Any:
        if value is None:
            return WithdrawalStrategy.DEPLETION
        if isinstance(value, str):
            return _STRATEGY_ALIASES.get(value.strip().lower(), value)
        return value

    @property
    def working_years(self) -> float:
        return self.retirementAge - self.startingAge

    @property
    def retirement_years(self) -> float:
        return self.lifeExpectancy - self.retirementAge


class ProjectionResults(BaseModel):
    """
    Rounded metrics for display.

    Money is whole currency units, rates are percentages to two decimals.
    incomeReplacementPercent is None when it cannot be computed (no income).
    Any figure that overflows on extreme inputs is None rather than inf or NaN.
    """

    model_config = ConfigDict(frozen=True)

    yearsUntilRetirement: float
    retirementYears: float

    finalWorkingIncome: Optional[int] = None
    socialSecurityAtRetirement: Optional[int] = None
    monthlySocialSecurity: Optional[int] = None

    totalContributions: Optional[int] = None
    totalEmployerMatch: Optional[int] = None
    totalWorkingContributions: Optional[int] = None
    totalInvestmentGrowth: Optional[int] = None
    totalSavingsAtRetirement: Optional[int] = None
    savingsAtRetirementInTodayDollars: Optional[int] = None

    realRateOfReturn: Optional[float] = None
    withdrawalRate: Optional[float] = None
    annualWithdrawal: Optional[int] = None
    annualWithdrawalAfterTax: Optional[int] = None
    annualWithdrawalInTodayDollars: Optional[int] = None

    annualRetirementIncome: Optional[int] = None
    monthlyRetirementIncome: Optional[int] = None
    totalRetirementIncome: Optional[int] = None

    endingPortfolioValue: Optional[int] = None
    incomeReplacementPercent: Optional[int] = None


class AccumulationRow(BaseModel):
    year: int
    age: float
    income: Optional[float] = None
    deferralRate: float
    contribution: Optional[float] = None
    employerMatch: Optional[float] = None
    growth: Optional[float] = None
    endingBalance: Optional[float] = None


class DecumulationRow(BaseModel):
    year: int
    age: float
    startingBalance: Optional[float] = None
    growth: Optional[float] = None
    withdrawal: Optional[float] = None
    endingBalance: Optional[float] = None


class ProjectionSchedule(BaseModel):
    strategy: WithdrawalStrategy
    accumulation: List[AccumulationRow] = []
    decumulation: List[DecumulationRow] = []


__all__ = [
    "NUMERIC_FIELDS",
    "DEFAULT_FORM",
    "Assumptions",
    "ProjectionResults",
    "AccumulationRow",
    "DecumulationRow",
    "ProjectionSchedule",
]
