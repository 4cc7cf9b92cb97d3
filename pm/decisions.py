"""
Readiness decision support — status buckets, ratios, and flags for one projection.

Translates a RetirementProjection into answers a saver can act on:
  Q1: "Am I on track?"              → status from the success probability
  Q2: "How far off am I?"           → funded ratio and savings gap
  Q3: "How wide is the range?"      → spread between 10th and 90th percentile
  Q4: "Do the two lenses agree?"    → heuristic probability vs simulated success rate
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pandas as pd

from core.schema import RetirementProjection

ON_TRACK_THRESHOLD = 80.0
ATTENTION_THRESHOLD = 60.0


@dataclass
class ReadinessReport:
    """Structured readiness output."""
    status: str  # "on_track", "needs_attention", "at_risk"

    success_probability: float
    simulated_success_rate: float

    total_needed: float
    projected_portfolio_value: float
    funded_ratio: float  # projected_portfolio_value / total_needed
    savings_gap: float
    monthly_contribution_needed: float

    # Monte Carlo spread
    percentile10: float
    percentile50: float
    percentile90: float
    percentile_spread: float  # P90 - P10

    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Status", "Value": self.status, "Unit": ""},
            {"Metric": "Success Probability", "Value": f"{self.success_probability:.0f}", "Unit": "%"},
            {"Metric": "Simulated Success Rate", "Value": f"{self.simulated_success_rate:.1f}", "Unit": "%"},
            {"Metric": "Total Needed", "Value": f"{self.total_needed:,.0f}", "Unit": "currency"},
            {"Metric": "Projected Portfolio", "Value": f"{self.projected_portfolio_value:,.0f}", "Unit": "currency"},
            {"Metric": "Funded Ratio", "Value": f"{self.funded_ratio:.2f}", "Unit": "x"},
            {"Metric": "Savings Gap", "Value": f"{self.savings_gap:,.0f}", "Unit": "currency"},
            {"Metric": "Monthly Contribution Needed", "Value": f"{self.monthly_contribution_needed:,.2f}", "Unit": "currency"},
            {"Metric": "10th Pctl Outcome", "Value": f"{self.percentile10:,.0f}", "Unit": "currency"},
            {"Metric": "Median Outcome", "Value": f"{self.percentile50:,.0f}", "Unit": "currency"},
            {"Metric": "90th Pctl Outcome", "Value": f"{self.percentile90:,.0f}", "Unit": "currency"},
        ]
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags), "Unit": ""})
        return pd.DataFrame(rows)


def readiness_status(success_probability: float) -> str:
    if success_probability >= ON_TRACK_THRESHOLD:
        return "on_track"
    if success_probability >= ATTENTION_THRESHOLD:
        return "needs_attention"
    return "at_risk"


def generate_readiness_report(projection: RetirementProjection) -> ReadinessReport:
    """Build a readiness report from a finished projection."""
    mc = projection.monte_carlo_results
    total = projection.total_needed
    funded_ratio = projection.projected_portfolio_value / total if total > 0 else float("inf")
    spread = mc.percentile90 - mc.percentile10

    flags = []
    if total > 0 and projection.savings_gap > 0.5 * total:
        flags.append("LARGE_GAP: current savings cover less than half of the target")
    if mc.percentile50 > 0 and spread > mc.percentile50:
        flags.append("WIDE_RANGE: P10-P90 spread exceeds the median outcome")
    if abs(projection.success_probability - mc.success_rate) > 25.0:
        flags.append(
            f"DIVERGENT_ESTIMATES: heuristic {projection.success_probability:.0f}% "
            f"vs simulated {mc.success_rate:.0f}%"
        )

    return ReadinessReport(
        status=readiness_status(projection.success_probability),
        success_probability=projection.success_probability,
        simulated_success_rate=mc.success_rate,
        total_needed=total,
        projected_portfolio_value=projection.projected_portfolio_value,
        funded_ratio=funded_ratio,
        savings_gap=projection.savings_gap,
        monthly_contribution_needed=projection.monthly_contribution_needed,
        percentile10=mc.percentile10,
        percentile50=mc.percentile50,
        percentile90=mc.percentile90,
        percentile_spread=spread,
        flags=flags,
    )
