# ============================================================================
# src/prescription_insight/inference/diagnosis_engine.py
# ============================================================================
"""
Rule-Based Diagnosis Inference

Deterministic, ordered rules over the recognized medications:
1. Antidiabetic -> Type 2 Diabetes Mellitus (adds Metabolic Syndrome)
2. Antihypertensive -> Essential Hypertension
3. Statin -> Hyperlipidemia
4. Antibiotic -> Bacterial Infection
5. Thyroid hormone -> Hypothyroidism
6. SSRI -> Depression/Anxiety Disorder
7. Analgesic / NSAID -> Pain Management
8. Proton pump inhibitor -> GERD (secondary label "Gastric Issues")

A rule sets the primary diagnosis only while it is still the default
"General Health Maintenance"; afterwards it contributes a secondary
condition. A symptom pass then adjusts for diabetes and hypertension
mentions, and the clinical tables fill risk factors, complications and
prognosis for the final primary diagnosis.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Tuple

from ..constants.clinical_tables import ClinicalTables, DEFAULT_DIAGNOSIS
from ..constants.medication_categories import (
    MedicationCategory,
    ANTIHYPERTENSIVE_CATEGORIES,
    PAIN_RELIEF_CATEGORIES,
)
from ..constants.medication_db import MedicationKnowledgeBase
from ..constants.symptom_terms import DIABETES_TERMS, HYPERTENSION_TERMS
from ..core.confidence import ConfidenceThresholds
from ..core.context.diagnosis import Diagnosis
from ..core.context.recognized_medication import RecognizedMedication

TYPE_2_DIABETES = "Type 2 Diabetes Mellitus"
METABOLIC_SYNDROME = "Metabolic Syndrome"
ESSENTIAL_HYPERTENSION = "Essential Hypertension"
HYPERLIPIDEMIA = "Hyperlipidemia"
BACTERIAL_INFECTION = "Bacterial Infection"
HYPOTHYROIDISM = "Hypothyroidism"
DEPRESSION_ANXIETY = "Depression/Anxiety Disorder"
PAIN_MANAGEMENT = "Pain Management"
GERD = "Gastroesophageal Reflux Disease (GERD)"
GASTRIC_ISSUES = "Gastric Issues"

# Minimum confidence once diabetes is inferred from symptoms
SYMPTOM_DIABETES_CONFIDENCE = 0.88


@dataclass(frozen=True)
class DiagnosisRule:
    name: str
    categories: FrozenSet[MedicationCategory]
    diagnosis: str
    confidence: float
    secondary_label: Optional[str] = None  # reported when primary is taken
    also_adds: Tuple[str, ...] = ()         # secondary conditions added on every match

    @property
    def label_when_not_primary(self) -> str:
        return self.secondary_label or self.diagnosis


DIAGNOSIS_RULES: Tuple[DiagnosisRule, ...] = (
    DiagnosisRule(
        "antidiabetic", frozenset({MedicationCategory.ANTIDIABETIC}),
        TYPE_2_DIABETES, 0.92, also_adds=(METABOLIC_SYNDROME,)
    ),
    DiagnosisRule("antihypertensive", ANTIHYPERTENSIVE_CATEGORIES, ESSENTIAL_HYPERTENSION, 0.89),
    DiagnosisRule("statin", frozenset({MedicationCategory.STATIN}), HYPERLIPIDEMIA, 0.87),
    DiagnosisRule("antibiotic", frozenset({MedicationCategory.ANTIBIOTIC}), BACTERIAL_INFECTION, 0.85),
    DiagnosisRule("thyroid_hormone", frozenset({MedicationCategory.THYROID_HORMONE}), HYPOTHYROIDISM, 0.90),
    DiagnosisRule("ssri", frozenset({MedicationCategory.SSRI}), DEPRESSION_ANXIETY, 0.88),
    DiagnosisRule("pain_relief", PAIN_RELIEF_CATEGORIES, PAIN_MANAGEMENT, 0.80),
    DiagnosisRule(
        "proton_pump_inhibitor", frozenset({MedicationCategory.PROTON_PUMP_INHIBITOR}),
        GERD, 0.85, secondary_label=GASTRIC_ISSUES
    ),
)


class DiagnosisEngine:
    """
    Infers a diagnosis from recognized medications and symptoms.

    Each rule's signature is the set of lowercase knowledge base names in its
    categories; a rule fires when any signature term appears in the joined
    display names of the recognized medications.
    """

    def __init__(
        self,
        knowledge_base: Optional[MedicationKnowledgeBase] = None,
        clinical_tables: Optional[ClinicalTables] = None,
        settings=None,
        rules: Sequence[DiagnosisRule] = DIAGNOSIS_RULES,
        logger: Optional[logging.Logger] = None
    ):
        if knowledge_base is None:
            from ..constants.medication_db import get_knowledge_base
            knowledge_base = get_knowledge_base()
        if clinical_tables is None:
            from ..constants.clinical_tables import get_clinical_tables
            clinical_tables = get_clinical_tables()
        if settings is None:
            from ..config import threshold_settings as settings

        self.clinical_tables = clinical_tables
        self.default_confidence = settings.DEFAULT_DIAGNOSIS_CONFIDENCE
        self.thresholds = ConfidenceThresholds.from_settings(settings)
        self.logger = logger or logging.getLogger(__name__)
        self._signatures: List[Tuple[DiagnosisRule, Tuple[str, ...]]] = [
            (rule, knowledge_base.names_for_categories(rule.categories)) for rule in rules
        ]

    def infer(
        self,
        symptoms: Sequence[str],
        medications: Sequence[RecognizedMedication]
    ) -> Diagnosis:
        """
        Infer primary/secondary diagnosis.

        Args:
            symptoms: Output of the symptom extractor
            medications: Output of the medication recognizer

        Returns:
            Diagnosis with clinical table details filled in
        """
        diagnosis = Diagnosis(primary=DEFAULT_DIAGNOSIS, confidence=self.default_confidence)

        names = " ".join(m.name for m in medications).lower()
        for rule, signature in self._signatures:
            if names and any(term in names for term in signature):
                self._apply_rule(rule, diagnosis)

        self._apply_symptoms(symptoms, diagnosis)

        primary = diagnosis.primary
        diagnosis.risk_factors = list(self.clinical_tables.risk_factors(primary))
        diagnosis.complications = list(self.clinical_tables.complications(primary))
        diagnosis.prognosis = self.clinical_tables.prognosis(primary)
        diagnosis.confidence_level = self.thresholds.get_level(diagnosis.confidence)

        self.logger.info(
            f"Diagnosis: {diagnosis.primary} ({diagnosis.confidence:.2f}), "
            f"secondary={diagnosis.secondary}"
        )
        return diagnosis

    def _is_default(self, diagnosis: Diagnosis) -> bool:
        return diagnosis.primary == DEFAULT_DIAGNOSIS

    def _apply_rule(self, rule: DiagnosisRule, diagnosis: Diagnosis) -> None:
        if self._is_default(diagnosis):
            diagnosis.primary = rule.diagnosis
            diagnosis.confidence = rule.confidence
            self.logger.debug(f"Rule {rule.name} set primary diagnosis {rule.diagnosis}")
        else:
            diagnosis.add_secondary(rule.label_when_not_primary)
            self.logger.debug(f"Rule {rule.name} added secondary {rule.label_when_not_primary}")

        for condition in rule.also_adds:
            diagnosis.add_secondary(condition)

    def _apply_symptoms(self, symptoms: Sequence[str], diagnosis: Diagnosis) -> None:
        symptom_text = " ".join(symptoms).lower()

        if any(term in symptom_text for term in DIABETES_TERMS):
            if not diagnosis.mentions("diabetes"):
                displaced = diagnosis.primary
                diagnosis.primary = TYPE_2_DIABETES
                if displaced != DEFAULT_DIAGNOSIS:
                    diagnosis.add_secondary(displaced)
                if TYPE_2_DIABETES in diagnosis.secondary:
                    diagnosis.secondary.remove(TYPE_2_DIABETES)
                self.logger.debug("Diabetes symptoms set primary diagnosis")
            diagnosis.confidence = max(diagnosis.confidence, SYMPTOM_DIABETES_CONFIDENCE)

        if any(term in symptom_text for term in HYPERTENSION_TERMS):
            if diagnosis.primary != ESSENTIAL_HYPERTENSION:
                diagnosis.add_secondary(ESSENTIAL_HYPERTENSION)


def infer_diagnosis(
    symptoms: Sequence[str],
    medications: Sequence[RecognizedMedication]
) -> Diagnosis:
    """Infer a diagnosis with the shared knowledge base and tables."""
    return DiagnosisEngine().infer(symptoms, medications)
