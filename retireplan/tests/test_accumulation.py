from __future__ import annotations

from math import isclose

from retireplan.core.accumulation import simulate_accumulation


def test_growth_applies_before_contributions():
    """
    Contributions land after the year's growth, so new money earns nothing in its first year.
    """
    result = simulate_accumulation(
        current_savings=1000.0,
        current_income=10000.0,
        current_deferral=10.0,
        current_match=5.0,
        asset_growth_before=10.0,
        inflation=0.0,
        working_years=2,
    )

    # year 1: 1000 * 1.1 + 1000 + 500 = 2600; year 2: 2600 * 1.1 + 1500 = 4360
    assert isclose(result.years[0].ending_balance, 2600.0, abs_tol=1e-6)
    assert isclose(result.ending_balance, 4360.0, abs_tol=1e-6)
    assert isclose(result.total_contributions, 2000.0, abs_tol=1e-9)
    assert isclose(result.total_match, 1000.0, abs_tol=1e-9)
    assert isclose(result.total_growth, 360.0, abs_tol=1e-6)


def test_income_grows_with_inflation():
    result = simulate_accumulation(
        current_savings=0.0,
        current_income=10000.0,
        current_deferral=10.0,
        current_match=0.0,
        asset_growth_before=0.0,
        inflation=10.0,
        working_years=3,
    )

    contributions = [row.contribution for row in result.years]
    for actual, expected in zip(contributions, [1000.0, 1100.0, 1210.0]):
        assert isclose(actual, expected, abs_tol=1e-6)
    assert isclose(result.ending_balance, 3310.0, abs_tol=1e-6)


def test_zero_horizon_keeps_starting_savings():
    result = simulate_accumulation(
        current_savings=50000.0,
        current_income=80000.0,
        current_deferral=10.0,
        current_match=5.0,
        asset_growth_before=7.0,
        inflation=2.0,
        working_years=0,
    )

    assert result.ending_balance == 50000.0
    assert result.total_contributions == 0.0
    assert result.total_match == 0.0
    assert result.years == []


def test_negative_horizon_runs_no_years():
    result = simulate_accumulation(
        current_savings=50000.0,
        current_income=80000.0,
        current_deferral=10.0,
        current_match=5.0,
        asset_growth_before=7.0,
        inflation=2.0,
        working_years=-5,
    )

    assert result.ending_balance == 50000.0
    assert result.total_contributions == 0.0
    assert result.years == []


def test_fractional_horizon_runs_whole_years_only():
    result = simulate_accumulation(
        current_savings=0.0,
        current_income=1000.0,
        current_deferral=10.0,
        current_match=0.0,
        asset_growth_before=0.0,
        inflation=0.0,
        working_years=2.5,
    )

    assert len(result.years) == 2
    assert isclose(result.ending_balance, 200.0, abs_tol=1e-9)


def test_escalation_stops_at_cap():
    result = simulate_accumulation(
        current_savings=0.0,
        current_income=10000.0,
        current_deferral=5.0,
        current_match=0.0,
        asset_growth_before=0.0,
        inflation=0.0,
        working_years=6,
        auto_escalate=True,
        escalation_rate=2.0,
        escalation_cap=10.0,
    )

    rates = [row.deferral_rate for row in result.years]
    assert rates == [5.0, 7.0, 9.0, 10.0, 10.0, 10.0]
    assert isclose(result.total_contributions, 5100.0, abs_tol=1e-6)


def test_escalation_never_exceeds_cap_and_never_drops():
    result = simulate_accumulation(
        current_savings=0.0,
        current_income=60000.0,
        current_deferral=3.0,
        current_match=0.0,
        asset_growth_before=5.0,
        inflation=2.0,
        working_years=40,
        auto_escalate=True,
        escalation_rate=1.5,
        escalation_cap=12.0,
    )

    rates = [row.deferral_rate for row in result.years]
    assert max(rates) <= 12.0
    first_at_cap = rates.index(12.0)
    assert all(rate == 12.0 for rate in rates[first_at_cap:])
    assert rates == sorted(rates)


def test_escalation_disabled_keeps_rate_flat():
    result = simulate_accumulation(
        current_savings=0.0,
        current_income=10000.0,
        current_deferral=5.0,
        current_match=0.0,
        asset_growth_before=0.0,
        inflation=0.0,
        working_years=3,
        auto_escalate=False,
        escalation_rate=2.0,
        escalation_cap=10.0,
    )

    assert [row.deferral_rate for row in result.years] == [5.0, 5.0, 5.0]


def test_rows_carry_ages():
    result = simulate_accumulation(
        current_savings=0.0,
        current_income=0.0,
        current_deferral=0.0,
        current_match=0.0,
        asset_growth_before=0.0,
        inflation=0.0,
        working_years=3,
        starting_age=40,
    )

    assert [row.age for row in result.years] == [40, 41, 42]


def test_rate_already_above_cap_is_left_alone():
    """Escalation only raises the rate toward the cap; it never lowers a rate that starts above it."""
    result = simulate_accumulation(
        current_savings=0.0,
        current_income=10000.0,
        current_deferral=20.0,
        current_match=0.0,
        asset_growth_before=0.0,
        inflation=0.0,
        working_years=4,
        auto_escalate=True,
        escalation_rate=1.0,
        escalation_cap=15.0,
    )

    assert [row.deferral_rate for row in result.years] == [20.0, 20.0, 20.0, 20.0]
    assert isclose(result.total_contributions, 8000.0, abs_tol=1e-6)


def test_inflation_overflow_does_not_raise():
    result = simulate_accumulation(
        current_savings=1000.0,
        current_income=50000.0,
        current_deferral=10.0,
        current_match=5.0,
        asset_growth_before=7.0,
        inflation=1e20,
        working_years=35,
    )

    assert len(result.years) == 35
    assert result.ending_balance == float("inf")


def test_working_years_are_capped():
    result = simulate_accumulation(
        current_savings=0.0,
        current_income=0.0,
        current_deferral=0.0,
        current_match=0.0,
        asset_growth_before=0.0,
        inflation=0.0,
        working_years=1e300,
    )

    assert len(result.years) == 150
