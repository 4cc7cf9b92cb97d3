"""
Core package — schema definitions, configuration, errors, and shared numeric helpers.
No business logic lives here.
"""

from .schema import (
    FinancialSnapshot,
    LifestyleLevel,
    MonteCarloResults,
    RetirementGoals,
    RetirementProjection,
    RiskTolerance,
    YearlyProjection,
)
from .config import EngineConfig, SAFE_WITHDRAWAL_MULTIPLE
from .errors import (
    InvalidHorizonError,
    RetirementEngineError,
    SimulationCancelledError,
    UpstreamDataError,
)
from .utils import annuity_factor, compound, nearest_rank, require_columns

__all__ = [
    "FinancialSnapshot",
    "LifestyleLevel",
    "MonteCarloResults",
    "RetirementGoals",
    "RetirementProjection",
    "RiskTolerance",
    "YearlyProjection",
    "EngineConfig",
    "SAFE_WITHDRAWAL_MULTIPLE",
    "InvalidHorizonError",
    "RetirementEngineError",
    "SimulationCancelledError",
    "UpstreamDataError",
    "annuity_factor",
    "compound",
    "nearest_rank",
    "require_columns",
]
