from __future__ import annotations

import numpy as np
import pytest

from core.schema import RetirementGoals


class SequenceRandom:
    """Random source that hands out a fixed sequence of uniforms, in order."""

    def __init__(self, values):
        self.values = np.asarray(values, dtype=float)
        self.calls = 0
        self.position = 0

    def random(self, size=None):
        self.calls += 1
        n = int(np.prod(size))
        remaining = self.values.size - self.position
        if n > remaining:
            raise ValueError(f"Asked for {n} draws, only {remaining} left.")
        out = self.values[self.position:self.position + n].reshape(size)
        self.position += n
        return out


@pytest.fixture
def sequence_random():
    return SequenceRandom


@pytest.fixture
def base_goals() -> RetirementGoals:
    return RetirementGoals(
        current_age=35,
        target_retirement_age=65,
        desired_monthly_income=5000,
        inflation_rate=3,
        expected_return=7,
        risk_tolerance="moderate",
        lifestyle_level="comfortable",
        region="US",
    )
