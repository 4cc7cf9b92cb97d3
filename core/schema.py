"""
Engine input and output types.

Inputs are pydantic models so the calculator form payload (camelCase keys)
parses directly. Outputs are frozen dataclasses built once per run.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Tuple

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RiskTolerance(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class LifestyleLevel(str, Enum):
    BASIC = "basic"
    COMFORTABLE = "comfortable"
    LUXURY = "luxury"


class _InputModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class RetirementGoals(_InputModel):
    """
    User-supplied retirement goals.

    Rates are annual percentages (7 means 7%). The horizon check
    (current_age < target_retirement_age) is done by the engine, not here.
    """

    target_retirement_age: int = Field(ge=0)
    current_age: int = Field(ge=0)
    desired_monthly_income: float = Field(ge=0)
    inflation_rate: float
    expected_return: float
    risk_tolerance: RiskTolerance = RiskTolerance.MODERATE
    lifestyle_level: LifestyleLevel = LifestyleLevel.COMFORTABLE
    region: str = "US"

    @property
    def years_to_retirement(self) -> int:
        return self.target_retirement_age - self.current_age


class FinancialSnapshot(_InputModel):
    """Aggregate of all retirement-account balances for one user."""

    current_retirement_savings: float = Field(ge=0)


@dataclass(frozen=True)
class YearlyProjection:
    age: int
    portfolio_value: float
    contributions: float
    withdrawals: float = 0.0


@dataclass(frozen=True)
class MonteCarloResults:
    percentile10: float
    percentile50: float
    percentile90: float
    success_rate: float  # percent, 0-100
    iterations: int
    success_threshold: float


@dataclass(frozen=True)
class RetirementProjection:
    """
    Complete result of one engine run.

    success_probability (heuristic, optimism-dampened) and
    monte_carlo_results.success_rate (simulated) are two separate lenses
    and are reported side by side.
    """

    total_needed: float
    current_savings: float
    savings_gap: float
    monthly_contribution_needed: float
    projected_portfolio_value: float
    success_probability: float
    yearly_projections: Tuple[YearlyProjection, ...]
    monte_carlo_results: MonteCarloResults

    def to_dict(self) -> Dict[str, Any]:
        """Camel-cased payload for the presentation layer."""
        mc = self.monte_carlo_results
        return {
            "totalNeeded": self.total_needed,
            "currentSavings": self.current_savings,
            "savingsGap": self.savings_gap,
            "monthlyContributionNeeded": self.monthly_contribution_needed,
            "projectedPortfolioValue": self.projected_portfolio_value,
            "successProbability": self.success_probability,
            "yearlyProjections": [
                {
                    "age": y.age,
                    "portfolioValue": y.portfolio_value,
                    "contributions": y.contributions,
                    "withdrawals": y.withdrawals,
                }
                for y in self.yearly_projections
            ],
            "monteCarloResults": {
                "percentile10": mc.percentile10,
                "percentile50": mc.percentile50,
                "percentile90": mc.percentile90,
                "successRate": mc.success_rate,
            },
        }

    def yearly_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([asdict(y) for y in self.yearly_projections])
