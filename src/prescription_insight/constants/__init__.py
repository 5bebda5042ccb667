# ============================================================================
# src/prescription_insight/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .medication_categories import (
    MedicationCategory,
    ANTIHYPERTENSIVE_CATEGORIES,
    PAIN_RELIEF_CATEGORIES,
)
from .medication_db import (
    MedicationEntry,
    MedicineMonograph,
    MedicationKnowledgeBase,
    load_knowledge_base,
    get_knowledge_base,
    lookup_medication,
    get_medicine_info,
)
from .clinical_tables import (
    DEFAULT_DIAGNOSIS,
    DiagnosisProfile,
    ClinicalTables,
    load_clinical_tables,
    get_clinical_tables,
)
from .symptom_terms import (
    SYMPTOM_KEYWORDS,
    SYMPTOM_LABEL_PATTERNS,
    DEFAULT_SYMPTOM,
    DIABETES_TERMS,
    HYPERTENSION_TERMS,
)
