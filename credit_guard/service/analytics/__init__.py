"""
History Analytics Module for the CoopCredit Guard dashboard
"""

from .models import (
    NO_DATA,
    AnalyticsSummary,
    FactorWeight,
    GroupBreakdown,
    ModelConfiguration,
)
from .aggregator import (
    AGE_BANDS,
    aggregate,
    breakdown_by_age,
    breakdown_by_education,
    breakdown_by_employment,
    breakdown_by_loan_type,
    count_risk_levels,
    get_age_band,
    get_factor_weights,
)

__all__ = [
    # Models
    "NO_DATA",
    "AnalyticsSummary",
    "FactorWeight",
    "GroupBreakdown",
    "ModelConfiguration",
    # Aggregation
    "AGE_BANDS",
    "aggregate",
    "breakdown_by_age",
    "breakdown_by_education",
    "breakdown_by_employment",
    "breakdown_by_loan_type",
    "count_risk_levels",
    "get_age_band",
    "get_factor_weights",
]
