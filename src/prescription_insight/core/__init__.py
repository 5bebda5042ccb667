# ============================================================================
# src/prescription_insight/core/__init__.py
# ============================================================================
"""
Core components: result model and confidence helpers.

The pipeline lives in core.pipeline and is re-exported from the package root.
"""

from .context import (
    AnalysisResult,
    ConfidenceLevel,
    Diagnosis,
    MatchSource,
    PipelineStage,
    ProcessingStep,
    RecognizedMedication,
)
from .confidence import ConfidenceThresholds, apply_confidence_floor, clamp

__all__ = [
    'AnalysisResult',
    'ConfidenceLevel',
    'Diagnosis',
    'MatchSource',
    'PipelineStage',
    'ProcessingStep',
    'RecognizedMedication',
    'ConfidenceThresholds',
    'apply_confidence_floor',
    'clamp',
]
