"""
Heuristic success probability for a deterministic projection.

This is the optimistic lens shown next to the simulated success rate:
contributions are credited at a flat 1.5× (rough allowance for growth on
contributions) and the ratio is dampened by 0.8, then capped at 100.
"""

from __future__ import annotations


def heuristic_success_probability(
    *,
    future_current_savings: float,
    monthly_contribution: float,
    years: int,
    total_needed: float,
    contribution_optimism: float = 1.5,
    dampening: float = 0.8,
) -> float:
    """
    min(100, (fv_savings + monthly*12*years*optimism) / total_needed * 100 * dampening)

    Returns a percentage in [0, 100]. Nothing needed means fully funded (100).
    """
    if total_needed <= 0:
        return 100.0
    projected = future_current_savings + monthly_contribution * 12.0 * years * contribution_optimism
    probability = projected / total_needed * 100.0 * dampening
    return max(0.0, min(100.0, probability))
