from __future__ import annotations

import logging
import math
from typing import Optional

from retireplan.core.accumulation import AccumulationResult, simulate_accumulation
from retireplan.core.decumulation import DecumulationResult, simulate_decumulation
from retireplan.core.metrics import derive_metrics
from retireplan.models import (
    AccumulationRow,
    Assumptions,
    DecumulationRow,
    ProjectionResults,
    ProjectionSchedule,
)

logger = logging.getLogger(__name__)


def _cents(value: float) -> Optional[float]:
    return round(value, 2) if math.isfinite(value) else None


def _run_phases(assumptions: Assumptions) -> tuple[AccumulationResult, DecumulationResult]:
    accumulation = simulate_accumulation(
        current_savings=assumptions.currentSavings,
        current_income=assumptions.currentIncome,
        current_deferral=assumptions.currentDeferral,
        current_match=assumptions.currentMatch,
        asset_growth_before=assumptions.assetGrowthBefore,
        inflation=assumptions.inflation,
        working_years=assumptions.working_years,
        auto_escalate=assumptions.autoEscalate,
        escalation_rate=assumptions.escalationRate,
        escalation_cap=assumptions.escalationCap,
        starting_age=assumptions.startingAge,
    )
    decumulation = simulate_decumulation(
        balance=accumulation.ending_balance,
        asset_growth_after=assumptions.assetGrowthAfter,
        inflation=assumptions.inflation,
        retirement_years=assumptions.retirement_years,
        strategy=assumptions.withdrawalStrategy,
        retirement_age=assumptions.retirementAge,
    )
    return accumulation, decumulation


def project(assumptions: Assumptions) -> ProjectionResults:
    """
    Full projection: accumulate until retirement, draw down until life
    expectancy, then derive the rounded metrics.

    Pure: the same assumptions always give the same results.
    """
    logger.debug("projecting %s", assumptions.model_dump())
    accumulation, decumulation = _run_phases(assumptions)
    return derive_metrics(assumptions, accumulation, decumulation)


def project_schedule(assumptions: Assumptions) -> ProjectionSchedule:
    """Year-by-year rows of both phases (rounded a bit for nice output/dollar)."""
    accumulation, decumulation = _run_phases(assumptions)

    return ProjectionSchedule(
        strategy=decumulation.strategy,
        accumulation=[
            AccumulationRow(
                year=row.year,
                age=row.age,
                income=_cents(row.income),
                deferralRate=row.deferral_rate,
                contribution=_cents(row.contribution),
                employerMatch=_cents(row.match),
                growth=_cents(row.growth),
                endingBalance=_cents(row.ending_balance),
            )
            for row in accumulation.years
        ],
        decumulation=[
            DecumulationRow(
                year=row.year,
                age=row.age,
                startingBalance=_cents(row.starting_balance),
                growth=_cents(row.growth),
                withdrawal=_cents(row.withdrawal),
                endingBalance=_cents(row.ending_balance),
            )
            for row in decumulation.years
        ],
    )


__all__ = ["project", "project_schedule"]
