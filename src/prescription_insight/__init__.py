# ============================================================================
# src/prescription_insight/__init__.py
# ============================================================================
"""
Prescription Insight

Turns OCR text from a prescription into medications, symptoms, an inferred
diagnosis and recommendations using a medication knowledge base and
deterministic rules.
"""

__version__ = "1.0.0"

from .core.pipeline import PrescriptionPipeline, analyze_prescription, get_pipeline
from .core.context import (
    AnalysisResult,
    Diagnosis,
    RecognizedMedication,
)
from .constants.medication_db import get_knowledge_base, get_medicine_info
from .utils.exceptions import (
    PrescriptionInsightError,
    InsufficientTextError,
    KnowledgeBaseError,
    MedicineNotFoundError,
)

__all__ = [
    "PrescriptionPipeline",
    "analyze_prescription",
    "get_pipeline",
    "AnalysisResult",
    "Diagnosis",
    "RecognizedMedication",
    "get_knowledge_base",
    "get_medicine_info",
    "PrescriptionInsightError",
    "InsufficientTextError",
    "KnowledgeBaseError",
    "MedicineNotFoundError",
]
