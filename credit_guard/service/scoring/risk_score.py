"""
Risk Score Calculation for the CoopCredit Guard risk engine.

This module turns the factor points into the default probability and derives
everything that is a pure function of it: credit score, risk level and
recommendation.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable

from .models import FactorScore, RiskLevel


CREDIT_SCORE_MAX = 850
CREDIT_SCORE_MIN = 300
CREDIT_SCORE_RANGE = CREDIT_SCORE_MAX - CREDIT_SCORE_MIN

RECOMMENDATIONS: Dict[RiskLevel, str] = {
    RiskLevel.LOW: (
        "Approve — the member demonstrates strong creditworthiness with a "
        "favorable debt-to-income ratio and stable profile."
    ),
    RiskLevel.MEDIUM: (
        "Conditional approval — consider requiring a co-maker or reducing the "
        "loan amount to mitigate moderate risk exposure."
    ),
    RiskLevel.HIGH: (
        "Further review required — the high risk indicators suggest the loan "
        "committee should evaluate additional collateral or alternative "
        "repayment terms."
    ),
    RiskLevel.CRITICAL: (
        "Decline or restructure — critical risk level detected. Recommend "
        "financial counseling before reapplication."
    ),
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (0.5 -> 1)."""
    return int(math.floor(value + 0.5))


def to_fixed(value: float, places: int) -> str:
    """
    Format with a fixed number of decimals, rounding halves up.

    Decimal(float) is exact, so 0.125 becomes "0.13" rather than the
    half-to-even "0.12" that format specs produce.
    """
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate_default_probability(factor_scores: Iterable[FactorScore]) -> int:
    """
    Sum the factor points into a default probability.

    The worst case across all nine factors exceeds 100, so the total is
    clamped to 0-100. Saturation at the boundary is kept as-is.

    Args:
        factor_scores: Points per factor

    Returns:
        Default probability from 0-100 (higher = riskier)
    """
    total = sum(factor.points for factor in factor_scores)
    return max(0, min(100, round_half_up(total)))


def score_to_credit_score(default_probability: int) -> int:
    """
    Map a default probability to a 300-850 credit score.

    Linear and strictly decreasing: 0 maps to 850 and 100 maps to 300.
    Halves round up.

    Args:
        default_probability: Default probability (0-100)

    Returns:
        Credit score from 300-850
    """
    if default_probability < 0:
        default_probability = 0
    elif default_probability > 100:
        default_probability = 100

    return round_half_up(CREDIT_SCORE_MAX - (default_probability / 100) * CREDIT_SCORE_RANGE)


def get_risk_level(default_probability: int) -> RiskLevel:
    """
    Bucket a default probability into a risk tier.

    Bands (inclusive upper bounds):
        0-25   Low
        26-50  Medium
        51-75  High
        76-100 Critical
    """
    if default_probability <= 25:
        return RiskLevel.LOW
    elif default_probability <= 50:
        return RiskLevel.MEDIUM
    elif default_probability <= 75:
        return RiskLevel.HIGH
    return RiskLevel.CRITICAL


def get_recommendation(risk_level: RiskLevel) -> str:
    return RECOMMENDATIONS[risk_level]
