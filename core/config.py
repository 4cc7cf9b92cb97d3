"""
Engine configuration.
Regional rows and volatility presets live in distributions/benchmarks.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

# 4% safe withdrawal rule: capital = 25x the annual income need
SAFE_WITHDRAWAL_MULTIPLE: float = 25.0

DEFAULT_ITERATIONS: int = 1000


@dataclass(frozen=True)
class EngineConfig:
    iterations: int = DEFAULT_ITERATIONS
    seed: Optional[int] = None

    # "normal" replaces the uniform +/- volatility band with Gaussian noise
    noise: Literal["uniform", "normal"] = "uniform"

    safe_withdrawal_multiple: float = SAFE_WITHDRAWAL_MULTIPLE

    # heuristic success probability knobs
    contribution_optimism: float = 1.5
    probability_dampening: float = 0.8

    # Monte Carlo success bar: initial_value * multiple, or the deterministic total_needed
    success_threshold_basis: Literal["initial_value", "total_needed"] = "initial_value"

    def __post_init__(self) -> None:
        if self.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {self.iterations}")
        if self.noise not in ("uniform", "normal"):
            raise ValueError(f"Unknown noise model {self.noise!r}. Available: 'uniform', 'normal'")
        if self.success_threshold_basis not in ("initial_value", "total_needed"):
            raise ValueError(
                f"Unknown success_threshold_basis {self.success_threshold_basis!r}. "
                f"Available: 'initial_value', 'total_needed'"
            )
        if self.safe_withdrawal_multiple <= 0:
            raise ValueError("safe_withdrawal_multiple must be positive.")
