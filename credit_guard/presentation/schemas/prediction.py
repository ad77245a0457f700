"""Prediction-related Pydantic schemas."""

from typing import List

from pydantic import ConfigDict, Field

from credit_guard.domain.entities import HistoryEntry
from credit_guard.service.scoring import ApplicantRecord

from .base import CamelModel


_APPLICANT_EXAMPLE = {
    "age": 35,
    "loanAmount": 50000,
    "loanTerm": 12,
    "income": 25000,
    "education": "Bachelor",
    "gender": "Female",
    "maritalStatus": "Single",
    "employmentStatus": "Licensed Professional",
    "loanType": "Regular",
    "loanAppType": "New",
    "modeOfPayment": "Monthly",
}


class ApplicantSchema(CamelModel):
    """
    Schema for an applicant record.

    Positivity is enforced by the scoring engine (400 INVALID_INPUT), not
    here, so that the engine's validation mode applies to API callers too.
    Categorical values outside the documented sets are accepted and scored
    through each factor's default branch.
    """

    model_config = ConfigDict(
        json_schema_extra={"examples": [_APPLICANT_EXAMPLE]},
    )

    age: int = Field(..., description="Applicant age in years", examples=[35])
    loan_amount: float = Field(..., description="Requested principal", examples=[50000])
    loan_term: int = Field(..., description="Loan term in months", examples=[12])
    income: float = Field(..., description="Monthly income", examples=[25000])
    education: str = Field(
        ...,
        description="Elementary, High School, Bachelor, Masteral or Doctoral",
        examples=["Bachelor"],
    )
    gender: str = Field(..., description="Male or Female", examples=["Female"])
    marital_status: str = Field(
        ...,
        description="Single, Married, Partnered or Widowed",
        examples=["Single"],
    )
    employment_status: str = Field(
        ...,
        description=(
            "Employed-Government, Employed-Private, Licensed Professional, "
            "Retired, Seaman/OFW or Self-employed"
        ),
        examples=["Licensed Professional"],
    )
    loan_type: str = Field(
        ...,
        description="Collateral, Market, Mid-Year, Quick, Regular, Salary or Others",
        examples=["Regular"],
    )
    loan_app_type: str = Field(..., description="New or Renewal", examples=["New"])
    mode_of_payment: str = Field(
        ...,
        description="Monthly, Quarterly or Weekly",
        examples=["Monthly"],
    )

    def to_record(self) -> ApplicantRecord:
        """Convert to the scoring engine's applicant record."""
        return ApplicantRecord.from_dict(self.model_dump(by_alias=True))


class PredictionResultSchema(CamelModel):
    """Schema for a prediction result."""

    default_probability: int = Field(
        ...,
        ge=0,
        le=100,
        description="Probability of default, 0-100",
        examples=[28],
    )
    credit_score: int = Field(
        ...,
        ge=300,
        le=850,
        description="Derived credit score, 300-850",
        examples=[696],
    )
    risk_level: str = Field(
        ...,
        description="Low, Medium, High or Critical",
        examples=["Medium"],
    )
    significant_factors: List[str] = Field(
        ...,
        min_length=3,
        max_length=3,
        description="Top three contributing observations, most significant first",
    )
    recommendation: str = Field(..., description="Recommendation for the loan committee")


class HistoryEntrySchema(CamelModel):
    """Schema for one history entry (POST /v1/predictions response)."""

    id: str = Field(..., description="Unique entry identifier")
    timestamp: str = Field(..., description="ISO 8601 timestamp of the prediction")
    input: ApplicantSchema
    result: PredictionResultSchema

    @classmethod
    def from_entity(cls, entry: HistoryEntry) -> "HistoryEntrySchema":
        return cls.model_validate(entry.to_dict())


class HistoryListResponseSchema(CamelModel):
    """Schema for GET /v1/predictions/history response."""

    total: int = Field(..., ge=0, description="Entries in the whole log")
    entries: List[HistoryEntrySchema] = Field(
        ...,
        description="Most recent entries, newest first",
    )


class ClearHistoryResponseSchema(CamelModel):
    """Schema for DELETE /v1/predictions/history response."""

    removed: int = Field(..., ge=0, description="Number of entries removed")
