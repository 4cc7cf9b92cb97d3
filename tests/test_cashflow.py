from __future__ import annotations

import math

import pytest

from core.config import EngineConfig
from core.errors import InvalidHorizonError
from distributions.benchmarks import get_regional_factor
from engine.cashflow import build_yearly_schedule, project, required_monthly_contribution

US = get_regional_factor("US")


def test_reference_scenario_magnitudes(base_goals):
    det = project(base_goals, 50_000, US)

    assert det.years_to_retirement == 30
    assert det.adjusted_inflation == pytest.approx(3.0)
    assert det.adjusted_return == pytest.approx(5.46)
    assert det.future_annual_income == pytest.approx(60_000 * 1.03 ** 30)
    assert det.future_annual_income == pytest.approx(145_777, rel=0.01)
    assert det.total_needed == pytest.approx(det.future_annual_income * 25)
    assert det.total_needed == pytest.approx(3_644_425, rel=0.01)
    assert det.future_current_savings == pytest.approx(50_000 * 1.0546 ** 30)
    assert det.savings_gap == pytest.approx(3_399_949, rel=0.01)
    assert det.current_savings == 50_000


def test_monthly_contribution_closes_gap(base_goals):
    det = project(base_goals, 50_000, US)
    r = det.adjusted_return / 100 / 12
    n = 30 * 12
    fv = det.monthly_contribution_needed * ((1 + r) ** n - 1) / r
    assert fv == pytest.approx(det.savings_gap)


def test_schedule_boundaries(base_goals):
    det = project(base_goals, 50_000, US)
    schedule = det.yearly_projections

    assert len(schedule) == det.years_to_retirement + 1
    assert schedule[0].age == 35
    assert schedule[-1].age == 65
    assert schedule[0].portfolio_value == 50_000
    assert det.projected_portfolio_value == schedule[-1].portfolio_value
    assert all(row.withdrawals == 0 for row in schedule)
    assert all(row.contributions == pytest.approx(det.monthly_contribution_needed * 12) for row in schedule)


def test_schedule_growth_step():
    rows = build_yearly_schedule(
        current_age=60, years=2, starting_value=1000.0, annual_return_pct=10.0, annual_contribution=100.0
    )
    assert [r.age for r in rows] == [60, 61, 62]
    assert rows[1].portfolio_value == pytest.approx(1200.0)
    assert rows[2].portfolio_value == pytest.approx(1420.0)


@pytest.mark.parametrize("current, target", [(65, 65), (70, 65)])
def test_invalid_horizon_rejected(base_goals, current, target):
    goals = base_goals.model_copy(update={"current_age": current, "target_retirement_age": target})
    with pytest.raises(InvalidHorizonError) as exc_info:
        project(goals, 10_000, US)
    assert isinstance(exc_info.value, ValueError)


def test_more_savings_never_increases_gap_or_contribution(base_goals):
    previous = None
    for savings in [0, 10_000, 100_000, 500_000, 1_000_000, 5_000_000]:
        det = project(base_goals, savings, US)
        if previous is not None:
            assert det.savings_gap <= previous.savings_gap
            assert det.monthly_contribution_needed <= previous.monthly_contribution_needed
        previous = det


def test_zero_gap_when_savings_already_sufficient(base_goals):
    det = project(base_goals, 10_000_000, US)
    assert det.future_current_savings >= det.total_needed
    assert det.savings_gap == 0
    assert det.monthly_contribution_needed == 0


def test_zero_return_uses_linear_contribution(base_goals):
    goals = base_goals.model_copy(update={"expected_return": 0.0})
    det = project(goals, 20_000, US)

    assert det.adjusted_return == 0
    assert det.savings_gap > 0
    assert det.monthly_contribution_needed == det.savings_gap / (det.years_to_retirement * 12)
    assert math.isfinite(det.monthly_contribution_needed)


def test_required_contribution_zero_gap():
    assert required_monthly_contribution(0.0, 5.0, 10) == 0.0
    assert required_monthly_contribution(-5.0, 5.0, 10) == 0.0


def test_deterministic_path_is_repeatable(base_goals):
    first = project(base_goals, 50_000, US)
    second = project(base_goals, 50_000, US)
    assert first.yearly_projections == second.yearly_projections
    assert first == second


def test_regional_adjustments_applied(base_goals):
    goals = base_goals.model_copy(update={"region": "UK"})
    det = project(goals, 50_000, get_regional_factor("UK"))
    assert det.adjusted_inflation == pytest.approx(3 * 1.05)
    assert det.adjusted_return == pytest.approx(7 * (1 - 0.28))


def test_safe_withdrawal_multiple_configurable(base_goals):
    det = project(base_goals, 0, US, EngineConfig(safe_withdrawal_multiple=30))
    assert det.total_needed == pytest.approx(det.future_annual_income * 30)
