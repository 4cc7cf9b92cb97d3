"""
PM outputs — simulation aggregation, probability metrics, and readiness decision support.
"""

from .aggregator import percentile_summary, summarize_final_values
from .metrics import heuristic_success_probability
from .decisions import ReadinessReport, generate_readiness_report, readiness_status

__all__ = [
    "percentile_summary",
    "summarize_final_values",
    "heuristic_success_probability",
    "ReadinessReport",
    "generate_readiness_report",
    "readiness_status",
]
