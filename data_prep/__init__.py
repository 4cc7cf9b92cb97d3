"""
Data preparation — financial data providers, record loading, summaries, validation.
"""

from .loader import load_records
from .provider import (
    FinancialDataProvider,
    InMemoryFinancialDataProvider,
    RecordsFinancialDataProvider,
)
from .summary import (
    FinancialData,
    FinancialSummary,
    calculate_age,
    calculate_financial_summary,
    retirement_readiness_score,
)
from .validators import ValidationResult, validate_goals

__all__ = [
    "load_records",
    "FinancialDataProvider",
    "InMemoryFinancialDataProvider",
    "RecordsFinancialDataProvider",
    "FinancialData",
    "FinancialSummary",
    "calculate_age",
    "calculate_financial_summary",
    "retirement_readiness_score",
    "ValidationResult",
    "validate_goals",
]
