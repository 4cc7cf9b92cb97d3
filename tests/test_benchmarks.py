from __future__ import annotations

import pytest

from core.schema import RiskTolerance
from distributions.benchmarks import (
    REGIONAL_FACTORS,
    available_regions,
    get_regional_factor,
    get_volatility,
    regional_factors_table,
)


@pytest.mark.parametrize(
    "region, inflation, tax",
    [
        ("US", 1.00, 0.22),
        ("CA", 1.02, 0.26),
        ("UK", 1.05, 0.28),
        ("AU", 1.03, 0.24),
        ("EU", 1.04, 0.30),
    ],
)
def test_regional_rows(region, inflation, tax):
    row = get_regional_factor(region)
    assert row.inflation_multiplier == inflation
    assert row.tax_rate == tax
    assert 0 < row.social_security_replacement_ratio < 1


@pytest.mark.parametrize("code", ["XX", "", None, "mars"])
def test_unknown_region_falls_back_to_us(code):
    assert get_regional_factor(code) is REGIONAL_FACTORS["US"]


@pytest.mark.parametrize("code", ["uk", " UK ", "Us"])
def test_region_codes_match_exactly(code):
    assert get_regional_factor(code) is REGIONAL_FACTORS["US"]


def test_region_listing():
    assert available_regions() == ["US", "CA", "UK", "AU", "EU"]
    table = regional_factors_table()
    assert list(table["Region"]) == available_regions()
    assert "tax_rate" in table.columns


@pytest.mark.parametrize(
    "risk, expected",
    [("conservative", 8.0), ("moderate", 12.0), ("aggressive", 18.0), (RiskTolerance.MODERATE, 12.0)],
)
def test_volatility_presets(risk, expected):
    assert get_volatility(risk) == expected


def test_unknown_risk_tolerance():
    with pytest.raises(KeyError, match="Available"):
        get_volatility("reckless")
