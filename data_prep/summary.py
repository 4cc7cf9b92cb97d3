"""
Financial summary — totals, normalized monthly flows, and a 0-100 readiness score
computed from a user's income, asset, debt and retirement-account records.

Record tables (pandas DataFrames, or lists of dicts):
  income_sources      amount, frequency
  assets              amount
  debts               balance, monthly_payment
  retirement_savings  balance, contribution_amount, contribution_frequency

Missing columns and null amounts count as zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Optional, Union

import pandas as pd
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

DEFAULT_AGE = 35

# Multipliers to a monthly amount
FREQUENCY_TO_MONTHLY: Dict[str, float] = {
    "weekly": 4.33,
    "biweekly": 2.17,
    "monthly": 1.0,
    "quarterly": 1.0 / 3.0,
    "annually": 1.0 / 12.0,
}

Records = Union[pd.DataFrame, list, None]


def _frame(records: Records) -> pd.DataFrame:
    if records is None:
        return pd.DataFrame()
    if isinstance(records, pd.DataFrame):
        return records
    return pd.DataFrame(list(records))


def _amounts(df: pd.DataFrame, col: str) -> pd.Series:
    if col not in df.columns:
        return pd.Series(0.0, index=df.index, dtype=float)
    return pd.to_numeric(df[col], errors="coerce").fillna(0.0)


def _monthly_total(df: pd.DataFrame, amount_col: str, frequency_col: str) -> float:
    amounts = _amounts(df, amount_col)
    if frequency_col in df.columns:
        freq = df[frequency_col].astype(str).str.strip().str.lower()
        factors = freq.map(FREQUENCY_TO_MONTHLY).fillna(1.0)  # unknown → monthly
    else:
        factors = pd.Series(1.0, index=df.index)
    return float((amounts * factors).sum())


@dataclass
class FinancialData:
    income_sources: pd.DataFrame = field(default_factory=pd.DataFrame)
    assets: pd.DataFrame = field(default_factory=pd.DataFrame)
    debts: pd.DataFrame = field(default_factory=pd.DataFrame)
    retirement_savings: pd.DataFrame = field(default_factory=pd.DataFrame)
    date_of_birth: Optional[Union[str, date]] = None

    @classmethod
    def from_records(
        cls,
        *,
        income_sources: Records = None,
        assets: Records = None,
        debts: Records = None,
        retirement_savings: Records = None,
        date_of_birth: Optional[Union[str, date]] = None,
    ) -> "FinancialData":
        return cls(
            income_sources=_frame(income_sources),
            assets=_frame(assets),
            debts=_frame(debts),
            retirement_savings=_frame(retirement_savings),
            date_of_birth=date_of_birth,
        )


@dataclass(frozen=True)
class FinancialSummary:
    total_assets: float
    total_retirement: float
    total_debts: float
    net_worth: float
    monthly_income: float
    monthly_savings: float
    debt_to_income_ratio: float  # percent
    retirement_readiness_score: int  # 0-100


def calculate_age(date_of_birth: Optional[Union[str, date]], today: Optional[date] = None) -> int:
    """Whole years since date_of_birth. Missing birth date → DEFAULT_AGE."""
    if date_of_birth is None or (isinstance(date_of_birth, str) and not date_of_birth.strip()):
        return DEFAULT_AGE
    if isinstance(date_of_birth, str):
        dob = date_parser.parse(date_of_birth).date()
    elif isinstance(date_of_birth, datetime):
        dob = date_of_birth.date()
    else:
        dob = date_of_birth
    return relativedelta(today or date.today(), dob).years


def retirement_readiness_score(
    *,
    total_retirement: float,
    monthly_income: float,
    monthly_savings: float,
    debt_to_income_ratio: float,
    age: int,
) -> int:
    """
    Points out of 100:
      retirement savings vs 15%-of-income benchmark  0-40
      savings rate                                   0-25
      debt-to-income                                 0-20
      age (time left to save)                        0-15
    """
    score = 0.0

    recommended = monthly_income * 12 * max(age - 25, 0) * 0.15
    score += min(total_retirement / max(recommended, 1.0) * 40.0, 40.0)

    savings_rate = monthly_savings / monthly_income * 100.0 if monthly_income > 0 else 0.0
    if savings_rate >= 15:
        score += 25
    elif savings_rate >= 10:
        score += 20
    elif savings_rate >= 5:
        score += 10
    else:
        score += savings_rate * 2

    if debt_to_income_ratio <= 20:
        score += 20
    elif debt_to_income_ratio <= 36:
        score += 15
    elif debt_to_income_ratio <= 50:
        score += 10
    else:
        score += max(0.0, 10 - (debt_to_income_ratio - 50) / 5)

    if age <= 30:
        score += 15
    elif age <= 40:
        score += 12
    elif age <= 50:
        score += 8
    elif age <= 60:
        score += 5
    else:
        score += 2

    # half-up rounding
    return int(math.floor(min(max(score, 0.0), 100.0) + 0.5))


def calculate_financial_summary(data: FinancialData, *, today: Optional[date] = None) -> FinancialSummary:
    total_assets = float(_amounts(data.assets, "amount").sum())
    total_retirement = float(_amounts(data.retirement_savings, "balance").sum())
    total_debts = float(_amounts(data.debts, "balance").sum())

    monthly_income = _monthly_total(data.income_sources, "amount", "frequency")
    monthly_savings = _monthly_total(
        data.retirement_savings, "contribution_amount", "contribution_frequency"
    )

    monthly_debt_payments = float(_amounts(data.debts, "monthly_payment").sum())
    dti = monthly_debt_payments / monthly_income * 100.0 if monthly_income > 0 else 0.0

    score = retirement_readiness_score(
        total_retirement=total_retirement,
        monthly_income=monthly_income,
        monthly_savings=monthly_savings,
        debt_to_income_ratio=dti,
        age=calculate_age(data.date_of_birth, today),
    )

    return FinancialSummary(
        total_assets=total_assets,
        total_retirement=total_retirement,
        total_debts=total_debts,
        net_worth=total_assets + total_retirement - total_debts,
        monthly_income=monthly_income,
        monthly_savings=monthly_savings,
        debt_to_income_ratio=dti,
        retirement_readiness_score=score,
    )
