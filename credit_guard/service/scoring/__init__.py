"""
Risk Scoring Module for the CoopCredit Guard loan default predictor
"""

from .models import (
    ApplicantRecord,
    EducationLevel,
    EmploymentStatus,
    FactorScore,
    Gender,
    LoanAppType,
    LoanType,
    MaritalStatus,
    ModeOfPayment,
    PredictionResult,
    RiskLevel,
    SignificantFactor,
)
from .settings import ScoringSettings, scoring_settings
from .risk_factors import (
    FACTOR_WEIGHTS,
    calculate_debt_to_income,
    score_factors,
)
from .risk_score import (
    RECOMMENDATIONS,
    calculate_default_probability,
    get_recommendation,
    get_risk_level,
    score_to_credit_score,
)
from .significant_factors import extract_significant_factors
from .prediction import explain_prediction, score, validate_applicant

__all__ = [
    # Settings
    "ScoringSettings",
    "scoring_settings",
    # Models
    "ApplicantRecord",
    "EducationLevel",
    "EmploymentStatus",
    "FactorScore",
    "Gender",
    "LoanAppType",
    "LoanType",
    "MaritalStatus",
    "ModeOfPayment",
    "PredictionResult",
    "RiskLevel",
    "SignificantFactor",
    # Risk Factors
    "FACTOR_WEIGHTS",
    "calculate_debt_to_income",
    "score_factors",
    # Scoring
    "RECOMMENDATIONS",
    "calculate_default_probability",
    "get_recommendation",
    "get_risk_level",
    "score_to_credit_score",
    # Significant Factors
    "extract_significant_factors",
    # Prediction
    "explain_prediction",
    "score",
    "validate_applicant",
]
