"""
Static assumption tables for retirement projections.

Regional rows approximate how a region's inflation and taxation drag on real
returns differ from the US baseline. Volatility presets map a user's risk
tolerance to the annual return spread used by the Monte Carlo simulator.

Both tables are read-only data; lookups return frozen rows.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Union

import pandas as pd

from core.schema import RiskTolerance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegionalFactor:
    """One regional adjustment row."""
    inflation_multiplier: float
    tax_rate: float  # fraction, e.g. 0.22
    social_security_replacement_ratio: float  # not used by the calculation yet


DEFAULT_REGION = "US"

REGIONAL_FACTORS: Dict[str, RegionalFactor] = {
    "US": RegionalFactor(inflation_multiplier=1.00, tax_rate=0.22, social_security_replacement_ratio=0.40),
    "CA": RegionalFactor(inflation_multiplier=1.02, tax_rate=0.26, social_security_replacement_ratio=0.35),
    "UK": RegionalFactor(inflation_multiplier=1.05, tax_rate=0.28, social_security_replacement_ratio=0.30),
    "AU": RegionalFactor(inflation_multiplier=1.03, tax_rate=0.24, social_security_replacement_ratio=0.25),
    "EU": RegionalFactor(inflation_multiplier=1.04, tax_rate=0.30, social_security_replacement_ratio=0.45),
}

# Annual return spread (percentage points) per risk tolerance
RISK_VOLATILITY: Dict[RiskTolerance, float] = {
    RiskTolerance.CONSERVATIVE: 8.0,
    RiskTolerance.MODERATE: 12.0,
    RiskTolerance.AGGRESSIVE: 18.0,
}


def normalize_region(region: str) -> str:
    return str(region or "").strip().upper()


def is_known_region(region: str) -> bool:
    return region in REGIONAL_FACTORS


def get_regional_factor(region: str) -> RegionalFactor:
    """
    Return the adjustment row for a region code.

    Codes are matched exactly. Never fails: unknown or empty codes (including
    "uk" or " US ") resolve to the US row.
    """
    factor = REGIONAL_FACTORS.get(region)
    if factor is None:
        logger.debug("Unknown region %r, falling back to %s", region, DEFAULT_REGION)
        return REGIONAL_FACTORS[DEFAULT_REGION]
    return factor


def available_regions() -> List[str]:
    return list(REGIONAL_FACTORS.keys())


def regional_factors_table() -> pd.DataFrame:
    """All regional rows as a display table."""
    return pd.DataFrame(
        [{"Region": code, **asdict(row)} for code, row in REGIONAL_FACTORS.items()]
    )


def get_volatility(risk_tolerance: Union[RiskTolerance, str]) -> float:
    """
    Return the simulated return volatility for a risk tolerance.

    Parameters
    ----------
    risk_tolerance : RiskTolerance or str
        One of "conservative", "moderate", "aggressive"
    """
    try:
        key = RiskTolerance(risk_tolerance)
    except ValueError:
        raise KeyError(
            f"Unknown risk tolerance '{risk_tolerance}'. "
            f"Available: {[r.value for r in RISK_VOLATILITY]}"
        ) from None
    return RISK_VOLATILITY[key]
