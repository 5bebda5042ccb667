# ============================================================================
# src/prescription_insight/core/context/enums.py
# ============================================================================
"""
Processing Enums
- Confidence levels
- Medication match sources
- Pipeline stages
"""

from enum import Enum


class ConfidenceLevel(str, Enum):
    HIGH = "high"       # >= 0.85
    MEDIUM = "medium"   # 0.70 - 0.85
    LOW = "low"         # < 0.70


class MatchSource(str, Enum):
    KNOWLEDGE_BASE = "knowledge_base"
    GENERIC_PATTERN = "generic_pattern"


class PipelineStage(str, Enum):
    OCR = "OCR"
    MEDICATION_IDENTIFICATION = "Medicine Identification"
    SYMPTOM_EXTRACTION = "Symptom Extraction"
    DIAGNOSIS = "Diagnosis"
    RECOMMENDATIONS = "Recommendations"
