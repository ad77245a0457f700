"""Analytics-related Pydantic schemas."""

from typing import Dict, List, Optional

from pydantic import Field

from credit_guard.service.analytics import AnalyticsSummary

from .base import CamelModel


class GroupBreakdownSchema(CamelModel):
    name: str
    count: int = Field(..., gt=0)
    average_default_probability: float = Field(..., ge=0, le=100)
    avg_risk: int = Field(..., ge=0, le=100, description="Mean risk rounded for display")


class FactorWeightSchema(CamelModel):
    name: str
    weight: int = Field(..., description="Share of the risk scale, in percent")


class ModelConfigurationSchema(CamelModel):
    model_type: str
    feature_count: int
    risk_factor_count: int
    output_range: List[int]
    credit_score_range: List[int]


class DisplayValuesSchema(CamelModel):
    """Rounded strings for summary cards; an em dash when there is no data."""

    average_default_probability: str
    average_credit_score: str
    approval_rate: str


class AnalyticsSummarySchema(CamelModel):
    """Schema for GET /v1/analytics response."""

    total_predictions: int = Field(..., ge=0)
    average_default_probability: Optional[float] = Field(
        None,
        description="Mean default probability (null when there is no history)",
    )
    average_credit_score: Optional[float] = Field(
        None,
        description="Mean credit score (null when there is no history)",
    )
    approval_rate: Optional[float] = Field(
        None,
        description="Fraction of Low or Medium risk entries (null when there is no history)",
    )
    risk_level_counts: Dict[str, int]
    risk_distribution: Dict[str, int]
    high_or_critical_count: int
    by_age_group: List[GroupBreakdownSchema]
    by_employment_status: List[GroupBreakdownSchema]
    by_education_level: List[GroupBreakdownSchema]
    by_loan_type: List[GroupBreakdownSchema]
    factor_weights: List[FactorWeightSchema]
    model_configuration: ModelConfigurationSchema
    display: DisplayValuesSchema

    @classmethod
    def from_summary(cls, summary: AnalyticsSummary) -> "AnalyticsSummarySchema":
        return cls.model_validate(summary.to_dict())


class ModelInfoSchema(CamelModel):
    """Schema for GET /v1/analytics/model response."""

    factor_weights: List[FactorWeightSchema]
    model_configuration: ModelConfigurationSchema
