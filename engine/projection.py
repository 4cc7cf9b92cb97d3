"""
Projection orchestrator — one call from goals to a complete RetirementProjection.

Sequence:
  1. Fetch the retirement-savings aggregate from the financial data provider
  2. Look up the regional adjustment row
  3. Run the deterministic calculator (engine/cashflow.py)
  4. Map risk tolerance to volatility
  5. Run the Monte Carlo simulator (engine/runner.py) from the same starting
     savings and required contribution
  6. Score the heuristic success probability (pm/metrics.py)

Either a full projection is returned or an error is raised; nothing partial.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import Hashable, Optional

from pydantic import ValidationError

from core.config import EngineConfig
from core.errors import UpstreamDataError
from core.schema import FinancialSnapshot, RetirementGoals, RetirementProjection
from data_prep.provider import FinancialDataProvider
from distributions.benchmarks import get_regional_factor, get_volatility
from distributions.sampler import RandomSource
from pm.metrics import heuristic_success_probability

from .cashflow import check_horizon, project
from .runner import run_monte_carlo

logger = logging.getLogger(__name__)


def volatility_for(goals: RetirementGoals) -> float:
    return get_volatility(goals.risk_tolerance)


def fetch_snapshot(provider: FinancialDataProvider, user_id: Hashable) -> FinancialSnapshot:
    """Ask the provider for the savings aggregate; any failure is an UpstreamDataError."""
    try:
        savings = provider.fetch_current_retirement_savings(user_id)
    except UpstreamDataError:
        raise
    except Exception as exc:
        raise UpstreamDataError(user_id, str(exc) or type(exc).__name__) from exc

    try:
        savings = float(savings)
    except (TypeError, ValueError):
        raise UpstreamDataError(user_id, f"provider returned non-numeric savings {savings!r}") from None
    if not math.isfinite(savings):
        raise UpstreamDataError(user_id, f"provider returned non-finite savings {savings!r}")
    try:
        return FinancialSnapshot(current_retirement_savings=savings)
    except ValidationError:
        raise UpstreamDataError(user_id, f"provider returned invalid savings {savings!r}") from None


def build_projection(
    goals: RetirementGoals,
    current_savings: float,
    *,
    config: Optional[EngineConfig] = None,
    rng: Optional[RandomSource] = None,
    cancel_event: Optional[threading.Event] = None,
) -> RetirementProjection:
    """
    Pure computation half of the orchestrator.

    Parameters
    ----------
    goals : RetirementGoals
    current_savings : float
        Sum of retirement-account balances today
    config : EngineConfig, optional
        Iterations, seed, noise model, heuristic knobs
    rng : optional
        Random source for the Monte Carlo run; overrides config.seed
    """
    cfg = config or EngineConfig()

    regional = get_regional_factor(goals.region)
    det = project(goals, current_savings, regional, cfg)

    if cfg.success_threshold_basis == "total_needed":
        threshold = det.total_needed
    else:
        threshold = det.current_savings * cfg.safe_withdrawal_multiple

    mc = run_monte_carlo(
        det.current_savings,
        det.monthly_contribution_needed,
        det.years_to_retirement,
        det.adjusted_return,
        volatility_for(goals),
        cfg.iterations,
        rng=rng,
        seed=cfg.seed,
        noise=cfg.noise,
        success_threshold=threshold,
        cancel_event=cancel_event,
    )

    success_probability = heuristic_success_probability(
        future_current_savings=det.future_current_savings,
        monthly_contribution=det.monthly_contribution_needed,
        years=det.years_to_retirement,
        total_needed=det.total_needed,
        contribution_optimism=cfg.contribution_optimism,
        dampening=cfg.probability_dampening,
    )

    projection = RetirementProjection(
        total_needed=det.total_needed,
        current_savings=det.current_savings,
        savings_gap=det.savings_gap,
        monthly_contribution_needed=det.monthly_contribution_needed,
        projected_portfolio_value=det.projected_portfolio_value,
        success_probability=success_probability,
        yearly_projections=det.yearly_projections,
        monte_carlo_results=mc,
    )
    logger.info(
        "Projection built: region=%s years=%d total_needed=%.2f gap=%.2f "
        "success_probability=%.1f simulated_success=%.1f",
        goals.region, det.years_to_retirement, det.total_needed, det.savings_gap,
        success_probability, mc.success_rate,
    )
    return projection


def calculate_retirement(
    goals: RetirementGoals,
    provider: FinancialDataProvider,
    user_id: Hashable,
    *,
    config: Optional[EngineConfig] = None,
    rng: Optional[RandomSource] = None,
    cancel_event: Optional[threading.Event] = None,
) -> RetirementProjection:
    """
    Full projection for one user.

    Raises
    ------
    UpstreamDataError
        The provider failed or returned an unusable balance
    InvalidHorizonError
        target_retirement_age <= current_age
    """
    check_horizon(goals)
    snapshot = fetch_snapshot(provider, user_id)
    return build_projection(
        goals, snapshot.current_retirement_savings, config=config, rng=rng, cancel_event=cancel_event
    )
