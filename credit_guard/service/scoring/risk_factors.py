"""
Risk Factor Calculations for the CoopCredit Guard risk engine.

This module scores the nine risk factors derived from a loan application:
- Debt-to-Income Ratio (DTI)
- Age
- Employment Stability
- Education Level
- Loan Amount
- Application Type
- Loan Term
- Mode of Payment
- Marital Status

Each factor contributes a non-negative number of points to the cumulative
risk total. The point tables are lending policy, not fitted to data, and
are kept here as constants so they can be audited in one place.
"""

from typing import Any, Dict, FrozenSet, List

from .models import (
    ApplicantRecord,
    EducationLevel,
    EmploymentStatus,
    FactorScore,
    LoanAppType,
    MaritalStatus,
    ModeOfPayment,
    as_member,
)
from .settings import ScoringSettings, scoring_settings


STABLE_EMPLOYMENT: FrozenSet[EmploymentStatus] = frozenset({
    EmploymentStatus.EMPLOYED_GOVERNMENT,
    EmploymentStatus.EMPLOYED_PRIVATE,
    EmploymentStatus.LICENSED_PROFESSIONAL,
})

MODERATE_EMPLOYMENT: FrozenSet[EmploymentStatus] = frozenset({
    EmploymentStatus.SELF_EMPLOYED,
    EmploymentStatus.SEAMAN_OFW,
})

EDUCATION_POINTS: Dict[EducationLevel, int] = {
    EducationLevel.DOCTORAL: 1,
    EducationLevel.MASTERAL: 2,
    EducationLevel.BACHELOR: 4,
    EducationLevel.HIGH_SCHOOL: 8,
    EducationLevel.ELEMENTARY: 10,
}
EDUCATION_DEFAULT_POINTS = 5

MARITAL_STATUS_POINTS: Dict[MaritalStatus, int] = {
    MaritalStatus.MARRIED: 1,
    MaritalStatus.SINGLE: 4,
}
MARITAL_STATUS_DEFAULT_POINTS = 3

PAYMENT_MODE_POINTS: Dict[ModeOfPayment, int] = {
    ModeOfPayment.WEEKLY: 1,
    ModeOfPayment.MONTHLY: 3,
}
PAYMENT_MODE_DEFAULT_POINTS = 5

# Display weights (percent of the risk scale) as documented for members.
# Static, never derived from scored history.
FACTOR_WEIGHTS: List[Dict[str, Any]] = [
    {"name": "Debt-to-Income Ratio", "weight": 30},
    {"name": "Employment Stability", "weight": 15},
    {"name": "Age", "weight": 10},
    {"name": "Education Level", "weight": 10},
    {"name": "Loan Amount", "weight": 10},
    {"name": "Application Type", "weight": 8},
    {"name": "Loan Term", "weight": 7},
    {"name": "Mode of Payment", "weight": 5},
    {"name": "Marital Status", "weight": 5},
]


def calculate_debt_to_income(
    loan_amount: float,
    income: float,
    loan_term: int,
    settings: ScoringSettings = scoring_settings,
) -> float:
    """
    Calculate the debt-to-income ratio for the whole loan term.

    Algorithm:
        dti = loan_amount / (monthly income * loan term in months)

    A zero denominator (zero income or zero term) is replaced by
    settings.dti_denominator_floor, so the ratio is always finite.

    Args:
        loan_amount: Requested principal
        income: Monthly income
        loan_term: Term in months
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        The DTI ratio (0.0 or higher for valid input)
    """
    denominator = income * loan_term
    if denominator == 0:
        denominator = settings.dti_denominator_floor
    return loan_amount / denominator


def score_debt_to_income(dti: float) -> int:
    """
    Convert the DTI ratio to risk points.

    DTI is the strongest predictor, so it carries the widest point range.
    """
    if dti > 0.6:
        return 30
    elif dti > 0.4:
        return 20
    elif dti > 0.25:
        return 10
    return 3


def score_age(age: int) -> int:
    """Members aged 30-55 are the lowest risk; the young and the old score higher."""
    if age < 25:
        return 10
    elif age < 30:
        return 6
    elif age <= 55:
        return 2
    return 7


def is_stable_employment(employment_status: Any) -> bool:
    return as_member(EmploymentStatus, employment_status) in STABLE_EMPLOYMENT


def score_employment(employment_status: Any) -> int:
    """
    Convert employment status to risk points.

    Stable employment scores 2, moderate 8, anything else (e.g. Retired
    or an unrecognized status) 15.
    """
    member = as_member(EmploymentStatus, employment_status)
    if member in STABLE_EMPLOYMENT:
        return 2
    elif member in MODERATE_EMPLOYMENT:
        return 8
    return 15


def score_education(education: Any) -> int:
    member = as_member(EducationLevel, education)
    return EDUCATION_POINTS.get(member, EDUCATION_DEFAULT_POINTS)


def score_loan_amount(loan_amount: float) -> int:
    """Larger loans carry more risk."""
    if loan_amount > 200_000:
        return 10
    elif loan_amount > 100_000:
        return 6
    elif loan_amount > 50_000:
        return 3
    return 1


def is_renewal(loan_app_type: Any) -> bool:
    return as_member(LoanAppType, loan_app_type) == LoanAppType.RENEWAL


def score_application_type(loan_app_type: Any) -> int:
    """A renewal implies a positive repayment history; anything else is scored as new."""
    return 1 if is_renewal(loan_app_type) else 8


def score_loan_term(loan_term: int) -> int:
    if loan_term > 36:
        return 7
    elif loan_term > 18:
        return 4
    return 1


def score_mode_of_payment(mode_of_payment: Any) -> int:
    member = as_member(ModeOfPayment, mode_of_payment)
    return PAYMENT_MODE_POINTS.get(member, PAYMENT_MODE_DEFAULT_POINTS)


def score_marital_status(marital_status: Any) -> int:
    member = as_member(MaritalStatus, marital_status)
    return MARITAL_STATUS_POINTS.get(member, MARITAL_STATUS_DEFAULT_POINTS)


def score_factors(
    applicant: ApplicantRecord,
    settings: ScoringSettings = scoring_settings,
) -> List[FactorScore]:
    """
    Score all nine factors for an applicant, in policy order.

    Args:
        applicant: The applicant record (assumed validated)
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        One FactorScore per factor, in the order the factors are documented
    """
    dti = calculate_debt_to_income(
        applicant.loan_amount,
        applicant.income,
        applicant.loan_term,
        settings,
    )

    return [
        FactorScore("Debt-to-Income Ratio", score_debt_to_income(dti)),
        FactorScore("Age", score_age(applicant.age)),
        FactorScore("Employment Stability", score_employment(applicant.employment_status)),
        FactorScore("Education Level", score_education(applicant.education)),
        FactorScore("Loan Amount", score_loan_amount(applicant.loan_amount)),
        FactorScore("Application Type", score_application_type(applicant.loan_app_type)),
        FactorScore("Loan Term", score_loan_term(applicant.loan_term)),
        FactorScore("Mode of Payment", score_mode_of_payment(applicant.mode_of_payment)),
        FactorScore("Marital Status", score_marital_status(applicant.marital_status)),
    ]
