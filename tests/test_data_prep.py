from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from data_prep.loader import load_records
from data_prep.provider import InMemoryFinancialDataProvider, RecordsFinancialDataProvider
from data_prep.summary import (
    FinancialData,
    calculate_age,
    calculate_financial_summary,
    retirement_readiness_score,
)
from data_prep.validators import validate_goals


def test_in_memory_provider_sums_accounts():
    provider = InMemoryFinancialDataProvider({"a": [1000, 2500.5], "b": []})
    assert provider.fetch_current_retirement_savings("a") == 3500.5
    assert provider.fetch_current_retirement_savings("b") == 0.0
    with pytest.raises(KeyError):
        provider.fetch_current_retirement_savings("c")


def test_records_provider_treats_null_balance_as_zero():
    records = pd.DataFrame({"user_id": ["a", "a", "b"], "balance": [1000.0, None, 50.0]})
    provider = RecordsFinancialDataProvider(records)
    assert provider.fetch_current_retirement_savings("a") == 1000.0
    assert provider.fetch_current_retirement_savings("b") == 50.0
    with pytest.raises(KeyError):
        provider.fetch_current_retirement_savings("zzz")


def test_records_provider_requires_columns():
    with pytest.raises(ValueError, match="Missing required columns"):
        RecordsFinancialDataProvider(pd.DataFrame({"user_id": ["a"]}))


def test_load_records_csv(tmp_path):
    path = tmp_path / "accounts.csv"
    pd.DataFrame({"user_id": ["a", "b"], "balance": [10.0, 20.0]}).to_csv(path, index=False)
    loaded = load_records(path)
    assert list(loaded.columns) == ["user_id", "balance"]
    assert RecordsFinancialDataProvider(loaded).fetch_current_retirement_savings("b") == 20.0


def test_calculate_age():
    assert calculate_age("1990-06-15", today=date(2025, 6, 14)) == 34
    assert calculate_age(date(1990, 6, 15), today=date(2025, 6, 15)) == 35
    assert calculate_age(None) == 35
    assert calculate_age("") == 35


def test_financial_summary():
    data = FinancialData.from_records(
        income_sources=[
            {"amount": 1000, "frequency": "weekly"},
            {"amount": 12000, "frequency": "annually"},
            {"amount": 300, "frequency": "sometimes"},
        ],
        assets=[{"amount": 20000}, {"amount": None}],
        debts=[{"balance": 15000, "monthly_payment": 500}],
        retirement_savings=[{"balance": 100000, "contribution_amount": 500, "contribution_frequency": "monthly"}],
        date_of_birth="1990-06-15",
    )
    summary = calculate_financial_summary(data, today=date(2025, 6, 14))

    assert summary.monthly_income == pytest.approx(4330 + 1000 + 300)
    assert summary.total_assets == 20000
    assert summary.total_retirement == 100000
    assert summary.total_debts == 15000
    assert summary.net_worth == pytest.approx(105000)
    assert summary.monthly_savings == pytest.approx(500)
    assert summary.debt_to_income_ratio == pytest.approx(500 / 5630 * 100)
    assert 0 <= summary.retirement_readiness_score <= 100


def test_readiness_score_components():
    # 40 (savings above benchmark) + 20 (10% rate) + 20 (DTI 20) + 12 (age 34)
    score = retirement_readiness_score(
        total_retirement=100_000, monthly_income=5000, monthly_savings=500,
        debt_to_income_ratio=20, age=34,
    )
    assert score == 92


def test_readiness_score_with_no_income():
    score = retirement_readiness_score(
        total_retirement=0, monthly_income=0, monthly_savings=0, debt_to_income_ratio=0, age=70,
    )
    assert score == 22  # 0 + 0 + 20 + 2


def test_empty_financial_data():
    summary = calculate_financial_summary(FinancialData(), today=date(2025, 1, 1))
    assert summary.net_worth == 0
    assert summary.debt_to_income_ratio == 0


def test_validate_good_goals(base_goals):
    result = validate_goals(base_goals)
    assert result.is_valid
    assert result.warnings == []
    assert "All checks passed" in result.summary()


def test_validate_flags_problems(base_goals):
    goals = base_goals.model_copy(
        update={"current_age": 70, "inflation_rate": 0.03, "expected_return": 120, "region": "XX"}
    )
    result = validate_goals(goals)
    assert not result.is_valid
    assert len(result.errors) == 1
    assert len(result.warnings) == 3
    assert "ERRORS (1)" in result.summary()


def test_validate_suggests_region_spelling(base_goals):
    result = validate_goals(base_goals.model_copy(update={"region": "uk"}))
    assert result.is_valid
    assert len(result.warnings) == 1
    assert "US adjustments will be used" in result.warnings[0]
    assert "Did you mean 'UK'?" in result.warnings[0]
