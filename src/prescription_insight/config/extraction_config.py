# ============================================================================
# src/prescription_insight/config/extraction_config.py
# ============================================================================
"""
Extraction Settings
- Context window around medication mentions
- Result caps
- Accepted lengths for free-text captures
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.exceptions import ConfigurationError


class ExtractionSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    CONTEXT_CHARS_BEFORE: int = Field(
        default=50,
        ge=0, le=500,
        description="Characters kept before a medication mention when extracting dosage/frequency"
    )
    CONTEXT_CHARS_AFTER: int = Field(
        default=150,
        ge=0, le=1000,
        description="Characters kept after a medication mention. Instructions usually follow the drug name, so this is wider."
    )
    MAX_MEDICATIONS: int = Field(
        default=10,
        ge=1,
        description="Maximum medications reported per analysis"
    )
    FALLBACK_MATCHES_PER_PATTERN: int = Field(
        default=5,
        ge=1,
        description="Candidates each generic fallback pattern may contribute"
    )
    FALLBACK_NAME_MIN_LENGTH: int = Field(
        default=2,
        ge=0,
        description="Fallback candidates must be strictly longer than this"
    )
    FALLBACK_NAME_MAX_LENGTH: int = Field(
        default=50,
        ge=1,
        description="Fallback candidates must be strictly shorter than this"
    )
    SYMPTOM_LABEL_MIN_LENGTH: int = Field(
        default=2,
        ge=0,
        description="Minimum length of a labelled symptom/diagnosis phrase"
    )
    SYMPTOM_LABEL_MAX_LENGTH: int = Field(
        default=100,
        ge=1,
        description="Maximum length of a labelled symptom/diagnosis phrase"
    )

    @model_validator(mode="after")
    def check_length_bounds(self):
        if self.FALLBACK_NAME_MIN_LENGTH >= self.FALLBACK_NAME_MAX_LENGTH:
            raise ConfigurationError("FALLBACK_NAME_MIN_LENGTH must be below FALLBACK_NAME_MAX_LENGTH")
        if self.SYMPTOM_LABEL_MIN_LENGTH > self.SYMPTOM_LABEL_MAX_LENGTH:
            raise ConfigurationError("SYMPTOM_LABEL_MIN_LENGTH must not exceed SYMPTOM_LABEL_MAX_LENGTH")
        return self


extraction_settings = ExtractionSettings()
