"""
Scoring Settings for the CoopCredit Guard risk engine.

The factor point tables are lending policy and live as constants next to the
factors (see risk_factors.py). What can be tuned per deployment is how the
engine treats inputs that violate the applicant invariants.

Environment variables use the SCORING_ prefix:
    SCORING_STRICT_VALIDATION=false
    SCORING_DTI_DENOMINATOR_FLOOR=1.0

Usage:
    from credit_guard.service.scoring.settings import scoring_settings

    # Use default settings (loaded from env)
    strict = scoring_settings.strict_validation

    # Or create custom settings for testing
    lenient = ScoringSettings(strict_validation=False)
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringSettings(BaseSettings):
    """
    Configurable parameters for the risk scoring engine.

    All settings can be overridden via environment variables with SCORING_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    strict_validation: bool = Field(
        default=True,
        description=(
            "Reject zero loan amount, income or loan term. When disabled, zeros "
            "are scored with the floored DTI denominator; negatives still fail."
        ),
    )
    dti_denominator_floor: float = Field(
        default=1.0,
        gt=0.0,
        description="Replaces income * loan_term in the DTI ratio when that product is zero",
    )


@lru_cache
def get_scoring_settings() -> ScoringSettings:
    """Get cached scoring settings instance."""
    return ScoringSettings()


scoring_settings = get_scoring_settings()
