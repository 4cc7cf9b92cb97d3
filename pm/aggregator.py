"""
Reduce N simulated final portfolio values to percentile bands and a success rate.

Instead of: "Projected portfolio = $2.1M" (one number, no context)
The user gets: "10th pctl = $1.4M, median = $2.0M, 90th pctl = $2.9M, 62% of trials
reach the target"

Percentiles are nearest-rank on the ascending array (index floor(n*q)),
not interpolated.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import pandas as pd

from core.schema import MonteCarloResults
from core.utils import nearest_rank, pct_at_or_above


def summarize_final_values(
    final_values: np.ndarray,
    *,
    success_threshold: float,
) -> MonteCarloResults:
    """
    Parameters
    ----------
    final_values : np.ndarray
        One final portfolio value per trial (any order)
    success_threshold : float
        A trial succeeds when its final value is >= this amount
    """
    values = np.sort(np.asarray(final_values, dtype=float))
    if values.size == 0:
        raise ValueError("No simulated values to summarize.")

    return MonteCarloResults(
        percentile10=nearest_rank(values, 0.1),
        percentile50=nearest_rank(values, 0.5),
        percentile90=nearest_rank(values, 0.9),
        success_rate=pct_at_or_above(values, success_threshold),
        iterations=int(values.size),
        success_threshold=float(success_threshold),
    )


def percentile_summary(
    final_values: np.ndarray,
    *,
    percentiles: Tuple[float, ...] = (0.05, 0.10, 0.25, 0.50, 0.75, 0.90, 0.95),
) -> pd.DataFrame:
    """One-row distribution summary (mean/std/min, nearest-rank percentiles, max)."""
    values = np.sort(np.asarray(final_values, dtype=float))
    if values.size == 0:
        raise ValueError("No simulated values to summarize.")

    row = {
        "Metric": "Final Portfolio Value",
        "Mean": float(np.mean(values)),
        "Std Dev": float(np.std(values)),
        "Min": float(values[0]),
    }
    for p in percentiles:
        row[f"P{int(round(p * 100)):02d}"] = nearest_rank(values, p)
    row["Max"] = float(values[-1])
    return pd.DataFrame([row])
