"""
Prediction Engine for the CoopCredit Guard risk engine.

This module orchestrates the complete scoring process:
1. Validate the applicant record
2. Score the nine risk factors
3. Sum and clamp them into a default probability
4. Derive credit score, risk level and recommendation
5. Rank the significant factors

This is the main entry point for the scoring module. It is pure: no I/O,
no clock, no randomness. Any presentation delay belongs to the caller.
"""

import math
from typing import List

from credit_guard.domain.exceptions import InvalidInputException

from .models import ApplicantRecord, PredictionResult, label_of
from .risk_factors import score_factors
from .risk_score import (
    calculate_default_probability,
    get_recommendation,
    get_risk_level,
    score_to_credit_score,
)
from .settings import ScoringSettings, scoring_settings
from .significant_factors import extract_significant_factors


# Fields that may be zero when strict validation is off; the DTI
# denominator floor keeps them safe.
_FLOORABLE_FIELDS = ("loan_amount", "income", "loan_term")
_NUMERIC_FIELDS = ("age",) + _FLOORABLE_FIELDS
_CATEGORICAL_FIELDS = (
    "education",
    "marital_status",
    "employment_status",
    "loan_type",
    "gender",
    "loan_app_type",
    "mode_of_payment",
)


def validate_applicant(
    applicant: ApplicantRecord,
    settings: ScoringSettings = scoring_settings,
) -> None:
    """
    Check the structural invariants of an applicant record.

    Rules:
        - Numeric fields must be finite numbers and never negative
        - age must be positive
        - loan_amount, income and loan_term must be positive under strict
          validation; otherwise zero is accepted
        - Categorical fields must be non-empty. Unrecognized values are
          accepted and scored through each factor's default branch.

    Raises:
        InvalidInputException: listing every offending field
    """
    errors: List[str] = []
    fields: List[str] = []

    for name in _NUMERIC_FIELDS:
        value = getattr(applicant, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"{name} must be a number")
            fields.append(name)
            continue
        if not math.isfinite(value):
            errors.append(f"{name} must be finite")
            fields.append(name)
            continue

        zero_allowed = name in _FLOORABLE_FIELDS and not settings.strict_validation
        if value < 0 or (value == 0 and not zero_allowed):
            errors.append(f"{name} must be positive")
            fields.append(name)

    for name in _CATEGORICAL_FIELDS:
        value = getattr(applicant, name)
        if value is None or not label_of(value).strip():
            errors.append(f"{name} is required")
            fields.append(name)

    if errors:
        raise InvalidInputException("; ".join(errors), fields=fields)


def score(
    applicant: ApplicantRecord,
    settings: ScoringSettings = scoring_settings,
) -> PredictionResult:
    """
    Score a loan applicant.

    Identical input always yields an identical result.

    Args:
        applicant: The applicant record
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        PredictionResult with probability, credit score, tier, factors
        and recommendation

    Raises:
        InvalidInputException: If the record violates a required invariant
    """
    validate_applicant(applicant, settings)

    default_probability = calculate_default_probability(score_factors(applicant, settings))
    risk_level = get_risk_level(default_probability)

    return PredictionResult(
        default_probability=default_probability,
        credit_score=score_to_credit_score(default_probability),
        risk_level=risk_level,
        significant_factors=tuple(extract_significant_factors(applicant, settings)),
        recommendation=get_recommendation(risk_level),
    )


def explain_prediction(result: PredictionResult) -> str:
    """
    Generate a human-readable explanation of a prediction.

    This can be used for:
    - Logging and debugging
    - Loan committee reference

    Args:
        result: The prediction to explain

    Returns:
        Human-readable explanation string
    """
    lines = [
        f"Risk Level: {result.risk_level.value.upper()}",
        f"Default Probability: {result.default_probability}%",
        f"Safe Performance: {result.safe_performance}%",
        f"Credit Score: {result.credit_score}",
        "",
        "Significant Factors:",
    ]
    lines.extend(f"  - {factor}" for factor in result.significant_factors)
    lines.append("")
    lines.append(f"Recommendation: {result.recommendation}")

    return "\n".join(lines)
