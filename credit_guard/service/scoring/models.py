"""
Data models for risk scoring.

These models represent the data structures used throughout the scoring pipeline,
from the applicant's self-reported attributes to the final prediction.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple, Type, TypeVar, Union


class EducationLevel(str, Enum):
    """Highest education level attained."""
    ELEMENTARY = "Elementary"
    HIGH_SCHOOL = "High School"
    BACHELOR = "Bachelor"
    MASTERAL = "Masteral"
    DOCTORAL = "Doctoral"


class MaritalStatus(str, Enum):
    SINGLE = "Single"
    MARRIED = "Married"
    PARTNERED = "Partnered"
    WIDOWED = "Widowed"


class EmploymentStatus(str, Enum):
    """Employment status as reported on the loan application."""
    EMPLOYED_GOVERNMENT = "Employed-Government"
    EMPLOYED_PRIVATE = "Employed-Private"
    LICENSED_PROFESSIONAL = "Licensed Professional"
    RETIRED = "Retired"
    SEAMAN_OFW = "Seaman/OFW"
    SELF_EMPLOYED = "Self-employed"


class LoanType(str, Enum):
    """Cooperative loan product."""
    COLLATERAL = "Collateral"
    MARKET = "Market"
    MID_YEAR = "Mid-Year"
    QUICK = "Quick"
    REGULAR = "Regular"
    SALARY = "Salary"
    OTHERS = "Others"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class LoanAppType(str, Enum):
    """Whether the member is applying for the first time or renewing."""
    NEW = "New"
    RENEWAL = "Renewal"


class ModeOfPayment(str, Enum):
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    WEEKLY = "Weekly"


class RiskLevel(str, Enum):
    """Risk tier bucketed from the default probability."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


E = TypeVar("E", bound=Enum)

# Categorical fields accept the enum member or, for values outside the
# closed domain, the raw string. Unknown strings are routed to each
# factor's default branch instead of failing.
Categorical = Union[E, str]


def as_member(enum_cls: Type[E], value: Any) -> Union[E, None]:
    """Return the enum member for ``value`` or None when it is not in the domain."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _coerce(enum_cls: Type[E], value: Any) -> Categorical:
    member = as_member(enum_cls, value)
    return member if member is not None else value


def label_of(value: Any) -> str:
    """Human-readable label for a categorical value (enum or raw string)."""
    if isinstance(value, Enum):
        return value.value
    return str(value)


@dataclass(frozen=True)
class ApplicantRecord:
    """
    The normalized input for a single scoring request.

    Attributes:
        age: Applicant age in years
        loan_amount: Requested principal, in currency units
        loan_term: Loan term in months (used as a denominator)
        income: Monthly income, in currency units
        education: Highest education level attained
        marital_status: Civil status
        employment_status: Employment status
        loan_type: Cooperative loan product applied for
        gender: Applicant gender
        loan_app_type: New application or renewal
        mode_of_payment: Repayment frequency
    """
    age: int
    loan_amount: float
    loan_term: int
    income: float
    education: Categorical[EducationLevel]
    marital_status: Categorical[MaritalStatus]
    employment_status: Categorical[EmploymentStatus]
    loan_type: Categorical[LoanType]
    gender: Categorical[Gender]
    loan_app_type: Categorical[LoanAppType]
    mode_of_payment: Categorical[ModeOfPayment]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ApplicantRecord":
        """Build a record from the camelCase wire/persistence layout."""
        return cls(
            age=data["age"],
            loan_amount=data["loanAmount"],
            loan_term=data["loanTerm"],
            income=data["income"],
            education=_coerce(EducationLevel, data["education"]),
            marital_status=_coerce(MaritalStatus, data["maritalStatus"]),
            employment_status=_coerce(EmploymentStatus, data["employmentStatus"]),
            loan_type=_coerce(LoanType, data["loanType"]),
            gender=_coerce(Gender, data["gender"]),
            loan_app_type=_coerce(LoanAppType, data["loanAppType"]),
            mode_of_payment=_coerce(ModeOfPayment, data["modeOfPayment"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase wire/persistence layout."""
        return {
            "age": self.age,
            "loanAmount": self.loan_amount,
            "loanTerm": self.loan_term,
            "income": self.income,
            "education": label_of(self.education),
            "gender": label_of(self.gender),
            "maritalStatus": label_of(self.marital_status),
            "employmentStatus": label_of(self.employment_status),
            "loanType": label_of(self.loan_type),
            "loanAppType": label_of(self.loan_app_type),
            "modeOfPayment": label_of(self.mode_of_payment),
        }


@dataclass(frozen=True)
class FactorScore:
    """Points contributed by one of the nine scoring factors."""
    name: str
    points: int


@dataclass(frozen=True)
class SignificantFactor:
    """
    A labeled observation used to explain a prediction.

    The weight is a local severity tier (1-3) and is unrelated to the
    points the same attribute contributes to the default probability.
    """
    label: str
    weight: int


@dataclass(frozen=True)
class PredictionResult:
    """
    The outcome of scoring one applicant.

    Attributes:
        default_probability: Clamped risk total, 0-100
        credit_score: 300-850, decreasing as default_probability increases
        risk_level: Tier derived from default_probability
        significant_factors: Exactly three labels, highest weight first
        recommendation: Fixed sentence for the risk level
    """
    default_probability: int
    credit_score: int
    risk_level: RiskLevel
    significant_factors: Tuple[str, ...] = field(default_factory=tuple)
    recommendation: str = ""

    @property
    def safe_performance(self) -> int:
        """Complement of the default probability, as shown next to it."""
        return 100 - self.default_probability

    @property
    def is_approvable(self) -> bool:
        """Low and Medium risk count toward the approval rate."""
        return self.risk_level in (RiskLevel.LOW, RiskLevel.MEDIUM)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PredictionResult":
        return cls(
            default_probability=int(data["defaultProbability"]),
            credit_score=int(data["creditScore"]),
            risk_level=RiskLevel(data["riskLevel"]),
            significant_factors=tuple(data["significantFactors"]),
            recommendation=data["recommendation"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase wire/persistence layout."""
        return {
            "defaultProbability": self.default_probability,
            "creditScore": self.credit_score,
            "riskLevel": self.risk_level.value,
            "significantFactors": list(self.significant_factors),
            "recommendation": self.recommendation,
        }
