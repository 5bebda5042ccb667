# ============================================================================
# src/prescription_insight/config/thresholds_config.py
# ============================================================================
"""
Confidence Thresholds
- Minimum usable text
- OCR confidence floor
- Diagnosis confidence levels
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.exceptions import ConfigurationError


class ThresholdSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    MIN_TEXT_LENGTH: int = Field(
        default=10,
        ge=1,
        description="Cleaned OCR text shorter than this is rejected"
    )
    OCR_CONFIDENCE_FLOOR: float = Field(
        default=0.5,
        ge=0.0, le=1.0,
        description="Reported OCR confidence never drops below this value"
    )
    DEFAULT_DIAGNOSIS_CONFIDENCE: float = Field(
        default=0.75,
        ge=0.0, le=1.0,
        description="Confidence attached to the General Health Maintenance fallback"
    )
    HIGH_CONFIDENCE: float = Field(
        default=0.85,
        ge=0.0, le=1.0,
        description="Diagnosis confidence at or above this is reported as high"
    )
    MEDIUM_CONFIDENCE: float = Field(
        default=0.70,
        ge=0.0, le=1.0,
        description="Diagnosis confidence at or above this is reported as medium"
    )

    @model_validator(mode="after")
    def check_levels(self):
        if self.MEDIUM_CONFIDENCE >= self.HIGH_CONFIDENCE:
            raise ConfigurationError("MEDIUM_CONFIDENCE must be below HIGH_CONFIDENCE")
        return self


threshold_settings = ThresholdSettings()
