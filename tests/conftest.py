# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import pytest

from prescription_insight.constants.medication_db import get_knowledge_base
from prescription_insight.constants.clinical_tables import get_clinical_tables
from prescription_insight.core.context import RecognizedMedication
from prescription_insight.core.pipeline import PrescriptionPipeline


@pytest.fixture
def knowledge_base():
    """Bundled medication knowledge base"""
    return get_knowledge_base()


@pytest.fixture
def clinical_tables():
    """Bundled clinical profile tables"""
    return get_clinical_tables()


@pytest.fixture
def pipeline():
    """Pipeline built from default settings"""
    return PrescriptionPipeline()


@pytest.fixture
def make_medications(knowledge_base):
    """Build recognized medications from knowledge base keys"""
    def _make(*keys):
        return [RecognizedMedication.from_entry(knowledge_base.lookup(key)) for key in keys]
    return _make


@pytest.fixture
def sample_prescription_text():
    """Typical OCR output from a clinic prescription"""
    return """
    City Care Clinic

    Patient: R. Sharma    Age: 52

    Dx: Type 2 diabetes with hypertension.

    Rx:
    1. Metformin 500mg twice daily after meals
    2. Amlodipine 5mg once daily in the morning
    3. Atorvastatin 10mg at bedtime

    Review after 4 weeks
    """
