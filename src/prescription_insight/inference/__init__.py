# ============================================================================
# src/prescription_insight/inference/__init__.py
# ============================================================================
"""
Inference Package

Rule-based reasoning over extracted prescription data:
- Diagnosis inference (ordered medication rules + symptom pass)
- Recommendation generation
"""

from .diagnosis_engine import (
    DiagnosisEngine,
    DiagnosisRule,
    DIAGNOSIS_RULES,
    infer_diagnosis,
)
from .recommendations import RecommendationGenerator, generate_recommendations

__all__ = [
    'DiagnosisEngine',
    'DiagnosisRule',
    'DIAGNOSIS_RULES',
    'infer_diagnosis',
    'RecommendationGenerator',
    'generate_recommendations',
]
