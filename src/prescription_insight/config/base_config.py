# ============================================================================
# src/prescription_insight/config/base_config.py
# ============================================================================
"""
Base Configuration
- Knowledge directory
- Knowledge file names
"""

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseSettingsConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Bundled knowledge files live next to the package modules
    KNOWLEDGE_DIR: Path = Field(
        default_factory=lambda: Path(__file__).parent.parent / "knowledge",
        description="Directory containing the medication and clinical knowledge files"
    )

    MEDICATION_DB_FILE: str = Field(
        default="medications.json",
        description="Versioned medication knowledge base"
    )

    CLINICAL_PROFILES_FILE: str = Field(
        default="clinical_profiles.json",
        description="Risk factor, complication, prognosis and recommendation tables"
    )

    def medication_db_path(self) -> Path:
        return self.KNOWLEDGE_DIR / self.MEDICATION_DB_FILE

    def clinical_profiles_path(self) -> Path:
        return self.KNOWLEDGE_DIR / self.CLINICAL_PROFILES_FILE


# Global instance
base_settings = BaseSettingsConfig()
