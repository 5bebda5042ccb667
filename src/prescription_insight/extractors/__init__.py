# ============================================================================
# src/prescription_insight/extractors/__init__.py
# ============================================================================
"""
Text extractors: attributes, medications, symptoms.
"""

from .patterns import PatternRule, first_match
from .attribute_extractor import (
    AttributeExtractor,
    DOSAGE_RULES,
    FREQUENCY_RULES,
    FREQUENCY_ABBREVIATIONS,
    extract_dosage,
    extract_frequency,
)
from .medication_recognizer import MedicationRecognizer, GENERIC_PATTERNS
from .symptom_extractor import SymptomExtractor, extract_symptoms

__all__ = [
    'PatternRule',
    'first_match',
    'AttributeExtractor',
    'DOSAGE_RULES',
    'FREQUENCY_RULES',
    'FREQUENCY_ABBREVIATIONS',
    'extract_dosage',
    'extract_frequency',
    'MedicationRecognizer',
    'GENERIC_PATTERNS',
    'SymptomExtractor',
    'extract_symptoms',
]
