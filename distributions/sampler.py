"""
Return samplers — turn a random source into annual portfolio returns.

Input:  expected return and volatility (both annual percentages)
Output: (n_trials × n_years) matrix of annual returns, in percent

Draws fill the matrix row by row, so trial 0 consumes the first n_years
draws, trial 1 the next n_years, and so on. A fixed random source therefore
fixes every trial's path.

The random source is anything exposing numpy's Generator.random(size); the
Gaussian sampler also needs standard_normal(size). Each sampler holds its own
source; nothing is shared between runs.

Samplers:
  UniformReturnSampler — expected ± volatility, uniformly distributed (default)
  NormalReturnSampler  — Gaussian noise with sd = volatility (opt-in)
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple

import numpy as np


class RandomSource(Protocol):
    def random(self, size=None): ...


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Fresh generator local to the caller."""
    return np.random.default_rng(seed)


class ReturnSampler:
    """Interface for generating annual return draws."""

    def __init__(self, expected_return: float, volatility: float, rng: RandomSource):
        self.expected_return = float(expected_return)
        self.volatility = float(volatility)
        self.rng = rng

    def sample(self, n_trials: int, n_years: int) -> np.ndarray:
        raise NotImplementedError


class UniformReturnSampler(ReturnSampler):
    """
    random_return = expected + (u - 0.5) * volatility * 2,  u ~ U[0, 1)

    Returns are spread uniformly across ±volatility around the expected return.
    """

    def sample(self, n_trials: int, n_years: int) -> np.ndarray:
        shape: Tuple[int, int] = (n_trials, n_years)
        u = np.asarray(self.rng.random(shape), dtype=float).reshape(shape)
        return self.expected_return + (u - 0.5) * self.volatility * 2.0


class NormalReturnSampler(ReturnSampler):
    """
    Gaussian alternative: random_return ~ N(expected, volatility).

    Needs a numpy Generator (uses standard_normal). Not the default because
    it changes percentile bands relative to the uniform model.
    """

    def sample(self, n_trials: int, n_years: int) -> np.ndarray:
        z = self.rng.standard_normal((n_trials, n_years))
        return self.expected_return + self.volatility * np.asarray(z, dtype=float)


def build_sampler(
    noise: str,
    expected_return: float,
    volatility: float,
    rng: RandomSource,
) -> ReturnSampler:
    if noise == "uniform":
        return UniformReturnSampler(expected_return, volatility, rng)
    if noise == "normal":
        if not callable(getattr(rng, "standard_normal", None)):
            raise ValueError(
                f"noise='normal' needs a random source with standard_normal(size); "
                f"{type(rng).__name__} only provides random(size)"
            )
        return NormalReturnSampler(expected_return, volatility, rng)
    raise ValueError(f"Unknown noise model {noise!r}. Available: 'uniform', 'normal'")
