"""
Monte Carlo runner — grows many randomized portfolios and reduces them to bands.

Each trial starts from the same initial value, draws one annual return per
year from the sampler, compounds, then adds twelve months of contributions:

    value = value * (1 + r / 100) + monthly_contribution * 12

Trials run in blocks that advance together one year at a time (vectorized
across the block). A cancel event is checked before each block is sampled and
between years.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

import numpy as np

from core.config import DEFAULT_ITERATIONS, SAFE_WITHDRAWAL_MULTIPLE
from core.errors import SimulationCancelledError
from core.schema import MonteCarloResults
from distributions.sampler import RandomSource, build_sampler, make_rng
from pm.aggregator import summarize_final_values

logger = logging.getLogger(__name__)

TRIAL_CHUNK_SIZE = 10_000


def simulate_final_values(
    initial_value: float,
    monthly_contribution: float,
    years: int,
    expected_return: float,
    volatility: float,
    iterations: int = DEFAULT_ITERATIONS,
    *,
    rng: Optional[RandomSource] = None,
    seed: Optional[int] = None,
    noise: str = "uniform",
    cancel_event: Optional[threading.Event] = None,
    chunk_size: int = TRIAL_CHUNK_SIZE,
) -> np.ndarray:
    """
    Final portfolio value of every trial, in trial order (unsorted).

    Trials run in blocks of `chunk_size`; each block draws its own returns, so
    memory is bounded by chunk_size × years and the draw order matches a
    single (iterations × years) sample.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")
    if years < 0:
        raise ValueError(f"years must be >= 0, got {years}")
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

    source = rng if rng is not None else make_rng(seed)
    sampler = build_sampler(noise, expected_return, volatility, source)

    annual_contribution = float(monthly_contribution) * 12.0
    finals = np.empty(iterations, dtype=float)
    for start in range(0, iterations, chunk_size):
        stop = min(start + chunk_size, iterations)
        if cancel_event is not None and cancel_event.is_set():
            raise SimulationCancelledError(f"Simulation cancelled after {start} of {iterations} trials.")
        returns = sampler.sample(stop - start, years)  # (trials in block, years)
        values = np.full(stop - start, float(initial_value), dtype=float)
        for year in range(years):
            if cancel_event is not None and cancel_event.is_set():
                raise SimulationCancelledError(
                    f"Simulation cancelled in trials {start}-{stop - 1} after {year} of {years} years."
                )
            values = values * (1.0 + returns[:, year] / 100.0) + annual_contribution
        finals[start:stop] = values
    return finals


def run_monte_carlo(
    initial_value: float,
    monthly_contribution: float,
    years: int,
    expected_return: float,
    volatility: float,
    iterations: int = DEFAULT_ITERATIONS,
    *,
    rng: Optional[RandomSource] = None,
    seed: Optional[int] = None,
    noise: str = "uniform",
    success_threshold: Optional[float] = None,
    cancel_event: Optional[threading.Event] = None,
) -> MonteCarloResults:
    """
    Run the Monte Carlo risk simulation.

    Parameters
    ----------
    initial_value : float
        Starting portfolio value for every trial
    monthly_contribution : float
        Contribution per month, added as 12× at each year end
    years : int
        Number of annual steps
    expected_return, volatility : float
        Annual percentages; uniform draws span expected ± volatility
    iterations : int
        Number of independent trials
    rng : optional
        Injected random source (numpy Generator or anything with random(size)).
        When omitted a fresh generator is created from `seed`.
    success_threshold : float, optional
        Defaults to initial_value × 25 (4% rule applied to the starting value)
    cancel_event : threading.Event, optional
        Checked between years; raises SimulationCancelledError once set

    Returns
    -------
    MonteCarloResults with nearest-rank 10/50/90 percentiles and success rate (%)
    """
    finals = simulate_final_values(
        initial_value,
        monthly_contribution,
        years,
        expected_return,
        volatility,
        iterations,
        rng=rng,
        seed=seed,
        noise=noise,
        cancel_event=cancel_event,
    )

    if success_threshold is None:
        success_threshold = float(initial_value) * SAFE_WITHDRAWAL_MULTIPLE

    results = summarize_final_values(finals, success_threshold=success_threshold)
    logger.debug(
        "Monte Carlo: iterations=%d years=%d p10=%.2f p50=%.2f p90=%.2f success=%.1f%%",
        iterations, years, results.percentile10, results.percentile50,
        results.percentile90, results.success_rate,
    )
    return results
