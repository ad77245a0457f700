"""
Significant Factor extraction for the CoopCredit Guard risk engine.

Explains a prediction with five labeled observations about the application.
Each observation carries a local severity tier (1-3) that is independent of
the points the same attribute contributes to the default probability; the
two weighting schemes are intentionally kept apart.
"""

from typing import List

from .models import ApplicantRecord, SignificantFactor, label_of
from .risk_factors import (
    EDUCATION_DEFAULT_POINTS,
    calculate_debt_to_income,
    is_renewal,
    is_stable_employment,
    score_education,
)
from .risk_score import to_fixed
from .settings import ScoringSettings, scoring_settings


SIGNIFICANT_FACTOR_COUNT = 3


def format_amount(amount: float) -> str:
    """Format a currency amount with thousands separators and up to 3 decimals."""
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,.3f}".rstrip("0").rstrip(".")


def _dti_factor(dti: float) -> SignificantFactor:
    if dti > 0.4:
        band, weight = "high", 3
    elif dti > 0.25:
        band, weight = "moderate", 2
    else:
        band, weight = "healthy", 1
    return SignificantFactor(f"Debt-to-income ratio is {to_fixed(dti, 2)} ({band})", weight)


def _employment_factor(employment_status) -> SignificantFactor:
    stable = is_stable_employment(employment_status)
    stability = "stable" if stable else "moderate risk"
    return SignificantFactor(
        f"Employment: {label_of(employment_status)} ({stability})",
        1 if stable else 2,
    )


def _application_type_factor(loan_app_type) -> SignificantFactor:
    if is_renewal(loan_app_type):
        return SignificantFactor("Renewal application — positive repayment history", 1)
    return SignificantFactor("New application — no prior repayment history", 2)


def _education_factor(education) -> SignificantFactor:
    weight = 2 if score_education(education) > EDUCATION_DEFAULT_POINTS else 1
    return SignificantFactor(f"Education level: {label_of(education)}", weight)


def _loan_size_factor(loan_amount: float, loan_term: int) -> SignificantFactor:
    return SignificantFactor(
        f"Loan amount ₱{format_amount(loan_amount)} over {loan_term} months",
        2 if loan_amount > 100_000 else 1,
    )


def build_factor_candidates(
    applicant: ApplicantRecord,
    settings: ScoringSettings = scoring_settings,
) -> List[SignificantFactor]:
    """
    Build the five candidate observations in their fixed construction order.

    Order: DTI band, employment, application type, education, loan size.
    """
    dti = calculate_debt_to_income(
        applicant.loan_amount,
        applicant.income,
        applicant.loan_term,
        settings,
    )
    return [
        _dti_factor(dti),
        _employment_factor(applicant.employment_status),
        _application_type_factor(applicant.loan_app_type),
        _education_factor(applicant.education),
        _loan_size_factor(applicant.loan_amount, applicant.loan_term),
    ]


def rank_factors(
    candidates: List[SignificantFactor],
    limit: int = SIGNIFICANT_FACTOR_COUNT,
) -> List[SignificantFactor]:
    """
    Order candidates by weight, highest first, and keep the top ``limit``.

    sorted() is stable, so candidates with equal weight keep their
    construction order.
    """
    return sorted(candidates, key=lambda f: f.weight, reverse=True)[:limit]


def extract_significant_factors(
    applicant: ApplicantRecord,
    settings: ScoringSettings = scoring_settings,
) -> List[str]:
    """Return the labels of the three most significant observations."""
    ranked = rank_factors(build_factor_candidates(applicant, settings))
    return [factor.label for factor in ranked]
