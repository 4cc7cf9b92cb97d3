"""
Input validation for retirement goals before they reach the engine.

Catches problems early:
- Retirement age not after current age
- Zero desired income
- Rates outside plausible bounds
- Region codes without a regional row
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from core.schema import RetirementGoals
from distributions.benchmarks import DEFAULT_REGION, is_known_region, normalize_region


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a set of goals."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_goals(goals: RetirementGoals) -> ValidationResult:
    """
    Run all checks on a set of goals.
    Errors block the projection; warnings are informational.
    """
    result = ValidationResult()

    # --- Horizon ---
    if goals.target_retirement_age <= goals.current_age:
        result.errors.append(
            f"Target retirement age ({goals.target_retirement_age}) must be greater "
            f"than current age ({goals.current_age})."
        )

    # --- Income ---
    if goals.desired_monthly_income == 0:
        result.warnings.append("Desired monthly income is 0; nothing to save for.")

    # --- Rates (percent form, e.g. 7 not 0.07) ---
    for label, value in [("Inflation rate", goals.inflation_rate), ("Expected return", goals.expected_return)]:
        if value < 0 or value >= 100:
            result.warnings.append(f"{label} {value} is outside [0, 100); check units.")
        elif 0 < value < 1:
            result.warnings.append(
                f"{label} {value} looks like a fraction; rates are in percent (7 means 7%)."
            )

    # --- Region ---
    if not is_known_region(goals.region):
        message = f"Unknown region {goals.region!r}; {DEFAULT_REGION} adjustments will be used."
        suggestion = normalize_region(goals.region)
        if is_known_region(suggestion):
            message += f" Did you mean {suggestion!r}?"
        result.warnings.append(message)

    return result
