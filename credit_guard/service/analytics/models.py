"""
Data models for history analytics.

Everything here is computed from a snapshot of the history log and is
immutable once produced.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from credit_guard.service.scoring.models import RiskLevel
from credit_guard.service.scoring.risk_score import round_half_up, to_fixed


NO_DATA = "—"


@dataclass(frozen=True)
class GroupBreakdown:
    """
    Entry count and mean default probability for one group.

    Attributes:
        name: Group label (age band, employment status, ...)
        count: Number of entries in the group (always > 0)
        average_default_probability: Arithmetic mean over the group
    """
    name: str
    count: int
    average_default_probability: float

    @property
    def display_average(self) -> int:
        """Mean risk rounded to a whole percentage for charts."""
        return round_half_up(self.average_default_probability)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "count": self.count,
            "averageDefaultProbability": self.average_default_probability,
            "avgRisk": self.display_average,
        }


@dataclass(frozen=True)
class FactorWeight:
    """Documented share of the risk scale carried by one scoring factor."""
    name: str
    weight: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "weight": self.weight}


@dataclass(frozen=True)
class ModelConfiguration:
    """Static description of the scoring model."""
    model_type: str = "Weighted Heuristic (Random Forest-inspired)"
    feature_count: int = 11
    risk_factor_count: int = 9
    output_range: Tuple[int, int] = (0, 100)
    credit_score_range: Tuple[int, int] = (300, 850)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "modelType": self.model_type,
            "featureCount": self.feature_count,
            "riskFactorCount": self.risk_factor_count,
            "outputRange": list(self.output_range),
            "creditScoreRange": list(self.credit_score_range),
        }


@dataclass(frozen=True)
class AnalyticsSummary:
    """
    Aggregate statistics over the history log.

    Averaged metrics are None when the log is empty; counts are zero.

    Attributes:
        total_predictions: Number of history entries
        average_default_probability: Mean default probability
        average_credit_score: Mean credit score
        approval_rate: Fraction (0-1) of Low or Medium risk entries
        risk_level_counts: Occurrences per risk level, all four present
        by_age_group: Present age bands, in band order
        by_employment_status: Present statuses, highest mean risk first
        by_education_level: Present levels, highest mean risk first
        by_loan_type: Present loan types, highest mean risk first
        factor_weights: Static factor weights for display
        model_configuration: Static model description
    """
    total_predictions: int
    average_default_probability: Optional[float]
    average_credit_score: Optional[float]
    approval_rate: Optional[float]
    risk_level_counts: Dict[RiskLevel, int]
    by_age_group: Tuple[GroupBreakdown, ...] = ()
    by_employment_status: Tuple[GroupBreakdown, ...] = ()
    by_education_level: Tuple[GroupBreakdown, ...] = ()
    by_loan_type: Tuple[GroupBreakdown, ...] = ()
    factor_weights: Tuple[FactorWeight, ...] = ()
    model_configuration: ModelConfiguration = field(default_factory=ModelConfiguration)

    @property
    def has_data(self) -> bool:
        return self.total_predictions > 0

    @property
    def high_or_critical_count(self) -> int:
        return (
            self.risk_level_counts[RiskLevel.HIGH]
            + self.risk_level_counts[RiskLevel.CRITICAL]
        )

    @property
    def risk_distribution(self) -> Dict[RiskLevel, int]:
        """Non-zero risk level counts, Low to Critical."""
        return {
            level: count
            for level, count in self.risk_level_counts.items()
            if count > 0
        }

    @property
    def display_average_default_probability(self) -> str:
        if self.average_default_probability is None:
            return NO_DATA
        return to_fixed(self.average_default_probability, 1)

    @property
    def display_average_credit_score(self) -> str:
        if self.average_credit_score is None:
            return NO_DATA
        return str(round_half_up(self.average_credit_score))

    @property
    def display_approval_rate(self) -> str:
        if self.approval_rate is None:
            return NO_DATA
        return to_fixed(self.approval_rate * 100, 1)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase API layout."""
        return {
            "totalPredictions": self.total_predictions,
            "averageDefaultProbability": self.average_default_probability,
            "averageCreditScore": self.average_credit_score,
            "approvalRate": self.approval_rate,
            "riskLevelCounts": {
                level.value: count for level, count in self.risk_level_counts.items()
            },
            "riskDistribution": {
                level.value: count for level, count in self.risk_distribution.items()
            },
            "highOrCriticalCount": self.high_or_critical_count,
            "byAgeGroup": [g.to_dict() for g in self.by_age_group],
            "byEmploymentStatus": [g.to_dict() for g in self.by_employment_status],
            "byEducationLevel": [g.to_dict() for g in self.by_education_level],
            "byLoanType": [g.to_dict() for g in self.by_loan_type],
            "factorWeights": [w.to_dict() for w in self.factor_weights],
            "modelConfiguration": self.model_configuration.to_dict(),
            "display": {
                "averageDefaultProbability": self.display_average_default_probability,
                "averageCreditScore": self.display_average_credit_score,
                "approvalRate": self.display_approval_rate,
            },
        }
