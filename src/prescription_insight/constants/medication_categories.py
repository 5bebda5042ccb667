# ============================================================================
# src/prescription_insight/constants/medication_categories.py
# ============================================================================
"""
Medication Categories
- Closed set of therapeutic categories used by the knowledge base
- Groups consumed by the diagnosis rules
"""

from enum import Enum


class MedicationCategory(str, Enum):
    """
    Therapeutic categories a knowledge base entry may carry.
    Every category except GENERIC feeds a diagnosis rule.
    """
    ANALGESIC = "Analgesic"
    NSAID = "NSAID"
    ANTIBIOTIC = "Antibiotic"
    ANTIDIABETIC = "Antidiabetic"
    ACE_INHIBITOR = "ACE Inhibitor"
    CALCIUM_CHANNEL_BLOCKER = "Calcium Channel Blocker"
    ARB = "ARB"
    DIURETIC = "Diuretic"
    STATIN = "Statin"
    PROTON_PUMP_INHIBITOR = "Proton Pump Inhibitor"
    THYROID_HORMONE = "Thyroid Hormone"
    SSRI = "SSRI Antidepressant"
    GENERIC = "Prescription medication"  # generic-pattern fallback only


ANTIHYPERTENSIVE_CATEGORIES = frozenset({
    MedicationCategory.ACE_INHIBITOR,
    MedicationCategory.CALCIUM_CHANNEL_BLOCKER,
    MedicationCategory.ARB,
    MedicationCategory.DIURETIC,
})

PAIN_RELIEF_CATEGORIES = frozenset({
    MedicationCategory.ANALGESIC,
    MedicationCategory.NSAID,
})
