"""
Deterministic accumulation math — capital needed, savings gap, required
contribution, and the year-by-year balance schedule.

Key conventions:
  1. Rates are annual percentages; regional inflation is scaled, regional tax
     is applied multiplicatively to the expected return
  2. Capital needed = future annual income × safe-withdrawal multiple (4% rule → 25)
  3. Required contribution solves the future value of a monthly annuity
  4. Schedule grows annually; accumulation phase only, withdrawals are always 0
  5. Full float precision, no rounding
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from core.config import EngineConfig
from core.errors import InvalidHorizonError
from core.schema import RetirementGoals, YearlyProjection
from core.utils import annuity_factor, compound
from distributions.benchmarks import RegionalFactor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeterministicProjection:
    years_to_retirement: int
    adjusted_inflation: float
    adjusted_return: float
    future_annual_income: float
    total_needed: float
    current_savings: float
    future_current_savings: float
    savings_gap: float
    monthly_contribution_needed: float
    projected_portfolio_value: float
    yearly_projections: Tuple[YearlyProjection, ...]


def check_horizon(goals: RetirementGoals) -> int:
    years = goals.target_retirement_age - goals.current_age
    if years <= 0:
        raise InvalidHorizonError(goals.current_age, goals.target_retirement_age)
    return years


def required_monthly_contribution(gap: float, annual_return_pct: float, years: int) -> float:
    """Level monthly payment that grows to `gap` over years*12 months."""
    if gap <= 0:
        return 0.0
    n_months = years * 12
    monthly_rate = annual_return_pct / 100.0 / 12.0
    return gap / annuity_factor(monthly_rate, n_months)


def build_yearly_schedule(
    *,
    current_age: int,
    years: int,
    starting_value: float,
    annual_return_pct: float,
    annual_contribution: float,
) -> Tuple[YearlyProjection, ...]:
    """
    One entry per age from current_age to current_age + years inclusive.
    Entry 0 is the starting balance; later entries grow then add the contribution.
    """
    growth = 1.0 + annual_return_pct / 100.0
    value = float(starting_value)
    rows: List[YearlyProjection] = []
    for i in range(years + 1):
        if i > 0:
            value = value * growth + annual_contribution
        rows.append(
            YearlyProjection(
                age=current_age + i,
                portfolio_value=value,
                contributions=annual_contribution,
                withdrawals=0.0,
            )
        )
    return tuple(rows)


def project(
    goals: RetirementGoals,
    current_savings: float,
    regional_factor: RegionalFactor,
    config: Optional[EngineConfig] = None,
) -> DeterministicProjection:
    """
    Run the deterministic half of a retirement projection.

    Parameters
    ----------
    goals : RetirementGoals
        Ages, desired income (today's money), rates in percent
    current_savings : float
        Sum of retirement-account balances today
    regional_factor : RegionalFactor
        Row from distributions.benchmarks.get_regional_factor()
    config : EngineConfig, optional
        Supplies the safe-withdrawal multiple

    Raises
    ------
    InvalidHorizonError
        If target_retirement_age <= current_age
    """
    cfg = config or EngineConfig()
    years = check_horizon(goals)

    adjusted_inflation = goals.inflation_rate * regional_factor.inflation_multiplier
    adjusted_return = goals.expected_return * (1.0 - regional_factor.tax_rate)

    future_annual_income = compound(goals.desired_monthly_income * 12.0, adjusted_inflation, years)
    total_needed = future_annual_income * cfg.safe_withdrawal_multiple

    future_current_savings = compound(float(current_savings), adjusted_return, years)
    savings_gap = max(0.0, total_needed - future_current_savings)

    monthly = required_monthly_contribution(savings_gap, adjusted_return, years)

    schedule = build_yearly_schedule(
        current_age=goals.current_age,
        years=years,
        starting_value=current_savings,
        annual_return_pct=adjusted_return,
        annual_contribution=monthly * 12.0,
    )

    logger.debug(
        "Deterministic projection: years=%d adj_inflation=%.4f adj_return=%.4f "
        "total_needed=%.2f gap=%.2f monthly=%.2f",
        years, adjusted_inflation, adjusted_return, total_needed, savings_gap, monthly,
    )

    return DeterministicProjection(
        years_to_retirement=years,
        adjusted_inflation=adjusted_inflation,
        adjusted_return=adjusted_return,
        future_annual_income=future_annual_income,
        total_needed=total_needed,
        current_savings=float(current_savings),
        future_current_savings=future_current_savings,
        savings_gap=savings_gap,
        monthly_contribution_needed=monthly,
        projected_portfolio_value=schedule[-1].portfolio_value,
        yearly_projections=schedule,
    )
