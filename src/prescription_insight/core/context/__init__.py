# src/prescription_insight/core/context/__init__.py

from .enums import ConfidenceLevel, MatchSource, PipelineStage
from .recognized_medication import (
    RecognizedMedication,
    DEFAULT_DOSAGE,
    DEFAULT_FREQUENCY,
)
from .diagnosis import Diagnosis
from .analysis_result import AnalysisResult, ProcessingStep

__all__ = [
    "ConfidenceLevel",
    "MatchSource",
    "PipelineStage",
    "RecognizedMedication",
    "DEFAULT_DOSAGE",
    "DEFAULT_FREQUENCY",
    "Diagnosis",
    "AnalysisResult",
    "ProcessingStep",
]
