"""
Distributions package — static assumption tables and annual return samplers.

  1. benchmarks.py — regional adjustment rows and risk-tolerance volatility presets
  2. sampler.py    — uniform (default) and Gaussian annual return draws
"""

from .benchmarks import (
    DEFAULT_REGION,
    REGIONAL_FACTORS,
    RISK_VOLATILITY,
    RegionalFactor,
    available_regions,
    get_regional_factor,
    get_volatility,
    regional_factors_table,
)
from .sampler import (
    NormalReturnSampler,
    ReturnSampler,
    UniformReturnSampler,
    build_sampler,
    make_rng,
)

__all__ = [
    "DEFAULT_REGION",
    "REGIONAL_FACTORS",
    "RISK_VOLATILITY",
    "RegionalFactor",
    "available_regions",
    "get_regional_factor",
    "get_volatility",
    "regional_factors_table",
    "NormalReturnSampler",
    "ReturnSampler",
    "UniformReturnSampler",
    "build_sampler",
    "make_rng",
]
