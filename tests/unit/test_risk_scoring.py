"""
Unit Tests for the CoopCredit Guard Risk Scoring Module.

These tests verify:
1. Risk factor calculations (DTI, point tables, default branches)
2. Default probability, credit score and risk level mapping
3. Significant factor ranking
4. Applicant validation (strict and lenient)
5. Complete scoring flow

Test Categories:
- test_dti_*: Debt-to-income calculation tests
- test_score_*: Per-factor point tests
- test_credit_score_*: Credit score mapping tests
- test_risk_level_*: Tier boundary tests
- test_significant_*: Significant factor tests
- test_validation_*: Applicant validation tests
- test_prediction_*: End-to-end scoring tests
"""

import pytest

from credit_guard.domain.exceptions import InvalidInputException
from credit_guard.service.scoring.models import (
    ApplicantRecord,
    EducationLevel,
    EmploymentStatus,
    FactorScore,
    Gender,
    LoanAppType,
    LoanType,
    MaritalStatus,
    ModeOfPayment,
    RiskLevel,
    SignificantFactor,
)
from credit_guard.service.scoring.risk_factors import (
    FACTOR_WEIGHTS,
    calculate_debt_to_income,
    score_age,
    score_application_type,
    score_debt_to_income,
    score_education,
    score_employment,
    score_factors,
    score_loan_amount,
    score_loan_term,
    score_marital_status,
    score_mode_of_payment,
)
from credit_guard.service.scoring.risk_score import (
    RECOMMENDATIONS,
    calculate_default_probability,
    get_recommendation,
    get_risk_level,
    round_half_up,
    score_to_credit_score,
    to_fixed,
)
from credit_guard.service.scoring.settings import ScoringSettings
from credit_guard.service.scoring.significant_factors import (
    extract_significant_factors,
    format_amount,
    rank_factors,
)
from credit_guard.service.scoring.prediction import (
    explain_prediction,
    score,
    validate_applicant,
)


# =============================================================================
# Test Fixtures
# =============================================================================

def make_applicant(**overrides) -> ApplicantRecord:
    """A low-risk baseline applicant; override any field per test."""
    fields = dict(
        age=35,
        loan_amount=50000,
        loan_term=12,
        income=25000,
        education=EducationLevel.BACHELOR,
        marital_status=MaritalStatus.SINGLE,
        employment_status=EmploymentStatus.LICENSED_PROFESSIONAL,
        loan_type=LoanType.REGULAR,
        gender=Gender.FEMALE,
        loan_app_type=LoanAppType.NEW,
        mode_of_payment=ModeOfPayment.MONTHLY,
    )
    fields.update(overrides)
    return ApplicantRecord(**fields)


def make_high_risk_applicant(**overrides) -> ApplicantRecord:
    fields = dict(
        age=60,
        loan_amount=300000,
        loan_term=48,
        income=20000,
        education=EducationLevel.ELEMENTARY,
        marital_status=MaritalStatus.WIDOWED,
        employment_status=EmploymentStatus.RETIRED,
        loan_type=LoanType.COLLATERAL,
        gender=Gender.MALE,
        loan_app_type=LoanAppType.NEW,
        mode_of_payment=ModeOfPayment.QUARTERLY,
    )
    fields.update(overrides)
    return make_applicant(**fields)


LENIENT = ScoringSettings(strict_validation=False)


# =============================================================================
# Debt-to-Income Tests
# =============================================================================

class TestDebtToIncome:
    """Tests for the DTI ratio and its points."""

    def test_dti_uses_whole_term_income(self):
        assert calculate_debt_to_income(60000, 5000, 12) == pytest.approx(1.0)

    def test_dti_zero_denominator_uses_floor(self):
        assert calculate_debt_to_income(1000, 0, 12) == 1000
        assert calculate_debt_to_income(1000, 5000, 0) == 1000

    def test_dti_custom_floor(self):
        settings = ScoringSettings(dti_denominator_floor=4.0)
        assert calculate_debt_to_income(1000, 0, 12, settings) == 250

    def test_dti_floor_only_applies_to_zero_product(self):
        # A small but non-zero product is used as-is
        assert calculate_debt_to_income(10, 0.5, 1) == 20

    @pytest.mark.parametrize(
        "dti,expected",
        [
            (0.0, 3),
            (0.25, 3),
            (0.2501, 10),
            (0.4, 10),
            (0.41, 20),
            (0.6, 20),
            (0.61, 30),
            (5.0, 30),
        ],
    )
    def test_score_debt_to_income_bands(self, dti, expected):
        assert score_debt_to_income(dti) == expected


# =============================================================================
# Factor Point Tests
# =============================================================================

class TestFactorPoints:
    """Tests for the individual factor point tables."""

    @pytest.mark.parametrize(
        "age,expected",
        [(18, 10), (24, 10), (25, 6), (29, 6), (30, 2), (55, 2), (56, 7), (80, 7)],
    )
    def test_score_age(self, age, expected):
        assert score_age(age) == expected

    def test_score_employment_stable(self):
        assert score_employment(EmploymentStatus.EMPLOYED_GOVERNMENT) == 2
        assert score_employment(EmploymentStatus.EMPLOYED_PRIVATE) == 2
        assert score_employment(EmploymentStatus.LICENSED_PROFESSIONAL) == 2

    def test_score_employment_moderate(self):
        assert score_employment(EmploymentStatus.SELF_EMPLOYED) == 8
        assert score_employment(EmploymentStatus.SEAMAN_OFW) == 8

    def test_score_employment_other(self):
        assert score_employment(EmploymentStatus.RETIRED) == 15
        assert score_employment("Unemployed") == 15

    def test_score_employment_accepts_raw_strings(self):
        assert score_employment("Licensed Professional") == 2
        assert score_employment("Seaman/OFW") == 8

    @pytest.mark.parametrize(
        "education,expected",
        [
            (EducationLevel.DOCTORAL, 1),
            (EducationLevel.MASTERAL, 2),
            (EducationLevel.BACHELOR, 4),
            (EducationLevel.HIGH_SCHOOL, 8),
            (EducationLevel.ELEMENTARY, 10),
            ("Vocational", 5),
        ],
    )
    def test_score_education(self, education, expected):
        assert score_education(education) == expected

    @pytest.mark.parametrize(
        "amount,expected",
        [(50000, 1), (50001, 3), (100000, 3), (100001, 6), (200000, 6), (200001, 10)],
    )
    def test_score_loan_amount(self, amount, expected):
        assert score_loan_amount(amount) == expected

    def test_score_application_type(self):
        assert score_application_type(LoanAppType.RENEWAL) == 1
        assert score_application_type(LoanAppType.NEW) == 8
        assert score_application_type("Restructure") == 8

    @pytest.mark.parametrize(
        "term,expected",
        [(1, 1), (18, 1), (19, 4), (36, 4), (37, 7)],
    )
    def test_score_loan_term(self, term, expected):
        assert score_loan_term(term) == expected

    def test_score_mode_of_payment(self):
        assert score_mode_of_payment(ModeOfPayment.WEEKLY) == 1
        assert score_mode_of_payment(ModeOfPayment.MONTHLY) == 3
        assert score_mode_of_payment(ModeOfPayment.QUARTERLY) == 5
        assert score_mode_of_payment("Annually") == 5

    def test_score_marital_status(self):
        assert score_marital_status(MaritalStatus.MARRIED) == 1
        assert score_marital_status(MaritalStatus.SINGLE) == 4
        assert score_marital_status(MaritalStatus.WIDOWED) == 3
        assert score_marital_status(MaritalStatus.PARTNERED) == 3

    def test_score_factors_lists_nine_factors_in_order(self):
        factors = score_factors(make_applicant())

        assert [f.name for f in factors] == [
            "Debt-to-Income Ratio",
            "Age",
            "Employment Stability",
            "Education Level",
            "Loan Amount",
            "Application Type",
            "Loan Term",
            "Mode of Payment",
            "Marital Status",
        ]
        assert [f.points for f in factors] == [3, 2, 2, 4, 1, 8, 1, 3, 4]

    def test_factor_weights_sum_to_100(self):
        assert len(FACTOR_WEIGHTS) == 9
        assert sum(w["weight"] for w in FACTOR_WEIGHTS) == 100


# =============================================================================
# Default Probability / Credit Score / Risk Level Tests
# =============================================================================

class TestRiskScore:
    """Tests for the derived outputs of the default probability."""

    def test_default_probability_is_sum_of_points(self):
        factors = [FactorScore("a", 10), FactorScore("b", 15)]
        assert calculate_default_probability(factors) == 25

    def test_default_probability_clamped_to_100(self):
        factors = [FactorScore("a", 70), FactorScore("b", 50)]
        assert calculate_default_probability(factors) == 100

    def test_default_probability_of_nothing_is_zero(self):
        assert calculate_default_probability([]) == 0

    def test_credit_score_endpoints(self):
        assert score_to_credit_score(0) == 850
        assert score_to_credit_score(100) == 300

    def test_credit_score_rounds_half_up(self):
        # 850 - 5.5 = 844.5
        assert score_to_credit_score(1) == 845
        # 850 - 522.5 = 327.5
        assert score_to_credit_score(95) == 328

    @pytest.mark.parametrize(
        "value,places,expected",
        [
            (0.125, 2, "0.13"),
            (0.375, 2, "0.38"),
            (0.3125, 2, "0.31"),
            (12.25, 1, "12.3"),
            (50.0, 1, "50.0"),
            (2 / 3, 2, "0.67"),
        ],
    )
    def test_to_fixed_rounds_half_up(self, value, places, expected):
        assert to_fixed(value, places) == expected

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2

    def test_credit_score_examples(self):
        assert score_to_credit_score(28) == 696
        assert score_to_credit_score(75) == 438

    def test_credit_score_strictly_decreasing(self):
        scores = [score_to_credit_score(p) for p in range(101)]
        assert all(a > b for a, b in zip(scores, scores[1:]))
        assert all(300 <= s <= 850 for s in scores)

    @pytest.mark.parametrize(
        "probability,expected",
        [
            (0, RiskLevel.LOW),
            (25, RiskLevel.LOW),
            (26, RiskLevel.MEDIUM),
            (50, RiskLevel.MEDIUM),
            (51, RiskLevel.HIGH),
            (75, RiskLevel.HIGH),
            (76, RiskLevel.CRITICAL),
            (100, RiskLevel.CRITICAL),
        ],
    )
    def test_risk_level_boundaries(self, probability, expected):
        assert get_risk_level(probability) == expected

    def test_risk_level_is_monotonic(self):
        order = list(RiskLevel)
        levels = [order.index(get_risk_level(p)) for p in range(101)]
        assert levels == sorted(levels)

    def test_every_risk_level_has_recommendation(self):
        for level in RiskLevel:
            assert get_recommendation(level) == RECOMMENDATIONS[level]
        assert get_recommendation(RiskLevel.LOW).startswith("Approve")
        assert get_recommendation(RiskLevel.CRITICAL).startswith("Decline or restructure")


# =============================================================================
# Significant Factor Tests
# =============================================================================

class TestSignificantFactors:
    """Tests for significant factor extraction."""

    def test_significant_factors_low_risk_applicant(self):
        factors = extract_significant_factors(make_applicant())

        assert factors == [
            "New application — no prior repayment history",
            "Debt-to-income ratio is 0.17 (healthy)",
            "Employment: Licensed Professional (stable)",
        ]

    def test_significant_ties_keep_construction_order(self):
        # Every candidate has weight 2: DTI, employment, application type win
        factors = extract_significant_factors(make_high_risk_applicant())

        assert len(factors) == 3
        assert factors[0].startswith("Debt-to-income ratio is ")
        assert factors[0].endswith("(moderate)")
        assert factors[1] == "Employment: Retired (moderate risk)"
        assert factors[2] == "New application — no prior repayment history"

    def test_significant_high_dti_ranks_first(self):
        applicant = make_applicant(
            loan_app_type=LoanAppType.RENEWAL,
            income=5000,
        )
        factors = extract_significant_factors(applicant)

        assert factors[0] == "Debt-to-income ratio is 0.83 (high)"

    def test_significant_education_and_loan_size(self):
        applicant = make_applicant(
            loan_app_type=LoanAppType.RENEWAL,
            education=EducationLevel.HIGH_SCHOOL,
            loan_amount=120000,
            income=100000,
        )
        factors = extract_significant_factors(applicant)

        assert factors == [
            "Education level: High School",
            "Loan amount ₱120,000 over 12 months",
            "Debt-to-income ratio is 0.10 (healthy)",
        ]

    def test_significant_dti_label_rounds_half_up(self):
        # 1500 / (1000 * 12) = 0.125 exactly
        applicant = make_applicant(loan_amount=1500, income=1000)
        factors = extract_significant_factors(applicant)

        assert "Debt-to-income ratio is 0.13 (healthy)" in factors

    def test_significant_always_three(self):
        for applicant in (make_applicant(), make_high_risk_applicant()):
            assert len(extract_significant_factors(applicant)) == 3

    def test_rank_factors_stable_descending(self):
        candidates = [
            SignificantFactor("a", 1),
            SignificantFactor("b", 3),
            SignificantFactor("c", 1),
            SignificantFactor("d", 3),
        ]
        assert [f.label for f in rank_factors(candidates)] == ["b", "d", "a"]

    def test_format_amount(self):
        assert format_amount(50000) == "50,000"
        assert format_amount(1234567.0) == "1,234,567"
        assert format_amount(1500.5) == "1,500.5"


# =============================================================================
# Validation Tests
# =============================================================================

class TestValidation:
    """Tests for applicant validation."""

    def test_validation_accepts_valid_applicant(self):
        validate_applicant(make_applicant())

    @pytest.mark.parametrize("field", ["income", "loan_term", "loan_amount"])
    def test_validation_strict_rejects_zero(self, field):
        with pytest.raises(InvalidInputException) as exc_info:
            validate_applicant(make_applicant(**{field: 0}))

        assert exc_info.value.code == "INVALID_INPUT"
        assert exc_info.value.fields == [field]

    @pytest.mark.parametrize("field", ["income", "loan_term", "loan_amount"])
    def test_validation_lenient_accepts_zero(self, field):
        validate_applicant(make_applicant(**{field: 0}), LENIENT)

    def test_validation_rejects_negative_even_when_lenient(self):
        with pytest.raises(InvalidInputException):
            validate_applicant(make_applicant(income=-1), LENIENT)

    def test_validation_rejects_zero_age(self):
        with pytest.raises(InvalidInputException):
            validate_applicant(make_applicant(age=0), LENIENT)

    def test_validation_rejects_non_finite(self):
        with pytest.raises(InvalidInputException):
            validate_applicant(make_applicant(income=float("nan")))
        with pytest.raises(InvalidInputException):
            validate_applicant(make_applicant(loan_amount=float("inf")))

    def test_validation_rejects_non_numbers(self):
        with pytest.raises(InvalidInputException) as exc_info:
            validate_applicant(make_applicant(age="35", income=True))

        assert exc_info.value.fields == ["age", "income"]

    def test_validation_rejects_empty_categorical(self):
        with pytest.raises(InvalidInputException) as exc_info:
            validate_applicant(make_applicant(education="", gender="  "))

        assert exc_info.value.fields == ["education", "gender"]

    def test_validation_reports_every_field(self):
        with pytest.raises(InvalidInputException) as exc_info:
            validate_applicant(make_applicant(income=0, loan_term=0))

        assert exc_info.value.fields == ["income", "loan_term"]


# =============================================================================
# Complete Prediction Tests
# =============================================================================

class TestPrediction:
    """Tests for the complete scoring flow."""

    def test_prediction_low_risk_applicant(self):
        result = score(make_applicant())

        assert result.default_probability == 28
        assert result.risk_level == RiskLevel.MEDIUM
        assert result.credit_score == 696
        assert result.safe_performance == 72
        assert result.is_approvable is True
        assert result.recommendation == RECOMMENDATIONS[RiskLevel.MEDIUM]
        assert len(result.significant_factors) == 3

    def test_prediction_high_risk_applicant(self):
        # dti 0.3125 lands in the 10-point band: 10+7+15+10+10+8+7+5+3
        result = score(make_high_risk_applicant())

        assert result.default_probability == 75
        assert result.risk_level == RiskLevel.HIGH
        assert result.credit_score == 438
        assert result.is_approvable is False

    def test_prediction_critical_applicant(self):
        result = score(make_high_risk_applicant(income=5000))

        assert result.default_probability == 95
        assert result.risk_level == RiskLevel.CRITICAL
        assert result.credit_score == 328
        assert result.recommendation.startswith("Decline or restructure")

    def test_prediction_best_case_is_low(self):
        applicant = make_applicant(
            age=40,
            loan_amount=10000,
            income=50000,
            education=EducationLevel.DOCTORAL,
            marital_status=MaritalStatus.MARRIED,
            employment_status=EmploymentStatus.EMPLOYED_GOVERNMENT,
            loan_app_type=LoanAppType.RENEWAL,
            mode_of_payment=ModeOfPayment.WEEKLY,
        )
        result = score(applicant)

        # 3+2+2+1+1+1+1+1+1
        assert result.default_probability == 13
        assert result.risk_level == RiskLevel.LOW

    def test_prediction_is_deterministic(self):
        applicant = make_high_risk_applicant()
        assert score(applicant) == score(applicant)

    def test_prediction_accepts_unknown_categoricals(self):
        applicant = make_applicant(
            employment_status="Freelancer",
            education="Vocational",
            mode_of_payment="Annually",
            marital_status="Separated",
            loan_type="Housing",
        )
        result = score(applicant)

        # 3+2+15+5+1+8+1+5+3
        assert result.default_probability == 43
        assert "Employment: Freelancer (moderate risk)" in result.significant_factors

    def test_prediction_raw_strings_match_enums(self):
        as_strings = make_applicant(
            education="Bachelor",
            marital_status="Single",
            employment_status="Licensed Professional",
            loan_app_type="New",
            mode_of_payment="Monthly",
        )
        assert score(as_strings) == score(make_applicant())

    def test_prediction_zero_income_lenient(self):
        result = score(make_applicant(income=0), LENIENT)

        # floored denominator: dti = 50000 -> 30 points instead of 3
        assert result.default_probability == 55
        assert result.risk_level == RiskLevel.HIGH

    def test_prediction_zero_income_strict_raises(self):
        with pytest.raises(InvalidInputException):
            score(make_applicant(income=0))

    def test_explain_prediction(self):
        result = score(make_applicant())
        explanation = explain_prediction(result)

        assert "Risk Level: MEDIUM" in explanation
        assert "Default Probability: 28%" in explanation
        assert "Safe Performance: 72%" in explanation
        assert "Credit Score: 696" in explanation
        assert "Significant Factors:" in explanation
        assert f"Recommendation: {result.recommendation}" in explanation
