"""
Retirement projection engine — deterministic accumulation math + Monte Carlo runner.
"""

from .cashflow import DeterministicProjection, project, required_monthly_contribution
from .runner import run_monte_carlo, simulate_final_values
from .projection import build_projection, calculate_retirement, volatility_for

__all__ = [
    "DeterministicProjection",
    "project",
    "required_monthly_contribution",
    "run_monte_carlo",
    "simulate_final_values",
    "build_projection",
    "calculate_retirement",
    "volatility_for",
]
