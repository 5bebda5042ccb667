# ============================================================================
# src/prescription_insight/constants/clinical_tables.py
# ============================================================================
"""
Clinical Lookup Tables
- Risk factors, complications, prognosis per primary diagnosis
- Diagnosis-specific recommendation blocks
- Baseline recommendations

Loaded from knowledge/clinical_profiles.json. Unknown diagnoses resolve to
the General Health Maintenance profile; no lookup raises.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from ..utils.exceptions import KnowledgeBaseError

logger = logging.getLogger(__name__)

DEFAULT_DIAGNOSIS = "General Health Maintenance"


class DiagnosisProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    risk_factors: Tuple[str, ...] = ()
    complications: Tuple[str, ...] = ()
    prognosis: str = ""
    recommendations: Tuple[str, ...] = ()


class ClinicalProfilesFile(BaseModel):
    version: str
    default_diagnosis: str = DEFAULT_DIAGNOSIS
    baseline_recommendations: Tuple[str, ...]
    profiles: Dict[str, DiagnosisProfile]

    @model_validator(mode="after")
    def default_profile_present(self):
        if self.default_diagnosis not in self.profiles:
            raise ValueError(f"profiles must include the default diagnosis {self.default_diagnosis!r}")
        return self


class ClinicalTables:
    """Read-only per-diagnosis tables with a default fallback."""

    def __init__(
        self,
        profiles: Dict[str, DiagnosisProfile],
        baseline_recommendations: Tuple[str, ...],
        default_diagnosis: str = DEFAULT_DIAGNOSIS,
        version: str = "unversioned"
    ):
        self._profiles = MappingProxyType(dict(profiles))
        self.baseline_recommendations = tuple(baseline_recommendations)
        self.default_diagnosis = default_diagnosis
        self.version = version

    def has_profile(self, diagnosis: str) -> bool:
        return diagnosis in self._profiles

    def profile(self, diagnosis: str) -> DiagnosisProfile:
        """Profile for a diagnosis, falling back to the default entry."""
        found = self._profiles.get(diagnosis)
        if found is None:
            logger.debug(f"No clinical profile for '{diagnosis}', using {self.default_diagnosis}")
            return self._profiles[self.default_diagnosis]
        return found

    def risk_factors(self, diagnosis: str) -> Tuple[str, ...]:
        return self.profile(diagnosis).risk_factors

    def complications(self, diagnosis: str) -> Tuple[str, ...]:
        return self.profile(diagnosis).complications

    def prognosis(self, diagnosis: str) -> str:
        return self.profile(diagnosis).prognosis

    def recommendations(self, diagnosis: str) -> Tuple[str, ...]:
        """Diagnosis-specific recommendations; empty when the diagnosis has no entry."""
        found: Optional[DiagnosisProfile] = self._profiles.get(diagnosis)
        return found.recommendations if found else ()


def load_clinical_tables(path: Path) -> ClinicalTables:
    """
    Load and validate the clinical profile file.

    Raises:
        KnowledgeBaseError: missing file, invalid JSON, or schema violation
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise KnowledgeBaseError(f"Cannot read clinical profiles {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise KnowledgeBaseError(f"Invalid JSON in {path}: {e}") from e

    try:
        parsed = ClinicalProfilesFile.model_validate(raw)
    except ValidationError as e:
        raise KnowledgeBaseError(f"Invalid clinical profiles {path}: {e}") from e

    logger.info(f"Loaded clinical profiles v{parsed.version} ({len(parsed.profiles)} diagnoses)")
    return ClinicalTables(
        profiles=parsed.profiles,
        baseline_recommendations=parsed.baseline_recommendations,
        default_diagnosis=parsed.default_diagnosis,
        version=parsed.version,
    )


@lru_cache(maxsize=1)
def get_clinical_tables() -> ClinicalTables:
    """Get the process-wide clinical tables, loading them on first use."""
    from ..config import base_settings
    return load_clinical_tables(base_settings.clinical_profiles_path())
