from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np
import pandas as pd


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def compound(value: float, rate_pct: float, periods: int) -> float:
    """Grow value at rate_pct percent per period for the given number of periods."""
    return value * (1.0 + rate_pct / 100.0) ** periods


def annuity_factor(periodic_rate: float, n_periods: int) -> float:
    """
    Future-value-of-annuity factor ((1+r)^n - 1) / r.
    Degenerates to n when the rate is zero.
    """
    if abs(periodic_rate) < 1e-12:
        return float(n_periods)
    return ((1.0 + periodic_rate) ** n_periods - 1.0) / periodic_rate


def nearest_rank(sorted_values: Sequence[float], q: float) -> float:
    """Value at index floor(n*q) of an ascending array (no interpolation)."""
    n = len(sorted_values)
    if n == 0:
        raise ValueError("Cannot take a percentile of an empty array.")
    idx = min(int(math.floor(n * q)), n - 1)
    return float(sorted_values[idx])


def pct_at_or_above(values: np.ndarray, threshold: float) -> float:
    """Percentage of entries in values that are >= threshold."""
    values = np.asarray(values, dtype=float)
    if values.size == 0:
        return 0.0
    return float(np.count_nonzero(values >= threshold)) / values.size * 100.0
