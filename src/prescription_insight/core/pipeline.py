# ============================================================================
# src/prescription_insight/core/pipeline.py
# ============================================================================
"""
Prescription Analysis Pipeline

Turns OCR text into a structured summary:

    raw text -> normalize -> medications -> symptoms -> diagnosis
             -> recommendations -> AnalysisResult

Every stage is a pure function of its inputs and the read-only knowledge
files, so one pipeline instance can serve concurrent callers. The only
failure is the insufficient-text precondition at entry.

Usage:
    from prescription_insight import analyze_prescription

    result = analyze_prescription(ocr_text, ocr_confidence=0.82)
    print(result.diagnosis.primary)
"""

import logging
from functools import lru_cache
from typing import Optional

from .confidence import apply_confidence_floor
from .context import AnalysisResult, PipelineStage, ProcessingStep
from ..constants.clinical_tables import ClinicalTables
from ..constants.medication_db import MedicationKnowledgeBase
from ..extractors.attribute_extractor import AttributeExtractor
from ..extractors.medication_recognizer import MedicationRecognizer
from ..extractors.symptom_extractor import SymptomExtractor
from ..inference.diagnosis_engine import DiagnosisEngine
from ..inference.recommendations import RecommendationGenerator
from ..utils.exceptions import InsufficientTextError
from ..utils.logging import log_performance
from ..utils.text_normalizer import normalize_whitespace


class PrescriptionPipeline:
    """
    Orchestrates the analysis stages in fixed order.

    Collaborators default to the shared knowledge base, clinical tables and
    settings; pass them explicitly to test against other data. The logger is
    injected into every stage.
    """

    def __init__(
        self,
        knowledge_base: Optional[MedicationKnowledgeBase] = None,
        clinical_tables: Optional[ClinicalTables] = None,
        extraction_settings=None,
        threshold_settings=None,
        logger: Optional[logging.Logger] = None
    ):
        if knowledge_base is None:
            from ..constants.medication_db import get_knowledge_base
            knowledge_base = get_knowledge_base()
        if clinical_tables is None:
            from ..constants.clinical_tables import get_clinical_tables
            clinical_tables = get_clinical_tables()
        if extraction_settings is None:
            from ..config import extraction_settings
        if threshold_settings is None:
            from ..config import threshold_settings

        self.logger = logger or logging.getLogger(__name__)
        self.min_text_length = threshold_settings.MIN_TEXT_LENGTH
        self.confidence_floor = threshold_settings.OCR_CONFIDENCE_FLOOR

        self.medication_recognizer = MedicationRecognizer(
            knowledge_base=knowledge_base,
            attribute_extractor=AttributeExtractor(extraction_settings, logger=self.logger),
            settings=extraction_settings,
            logger=self.logger,
        )
        self.symptom_extractor = SymptomExtractor(extraction_settings, logger=self.logger)
        self.diagnosis_engine = DiagnosisEngine(
            knowledge_base=knowledge_base,
            clinical_tables=clinical_tables,
            settings=threshold_settings,
            logger=self.logger,
        )
        self.recommendation_generator = RecommendationGenerator(
            clinical_tables=clinical_tables,
            logger=self.logger,
        )

    def clean_text(self, raw_text: Optional[str]) -> str:
        """
        Normalize whitespace and enforce the minimum length.

        Raises:
            InsufficientTextError: cleaned text is empty or too short
        """
        cleaned = normalize_whitespace(raw_text or "")
        if len(cleaned) < self.min_text_length:
            raise InsufficientTextError(
                "Insufficient text extracted from the document. Please ensure the "
                "image is clear and contains readable text.",
                min_length=self.min_text_length,
                actual_length=len(cleaned),
            )
        return cleaned

    @log_performance(None, "Prescription analysis")
    def run(self, raw_text: Optional[str], ocr_confidence: Optional[float]) -> AnalysisResult:
        """
        Analyze OCR text.

        Args:
            raw_text: Text produced by the OCR engine
            ocr_confidence: OCR confidence in [0, 1]

        Returns:
            AnalysisResult

        Raises:
            InsufficientTextError: cleaned text shorter than MIN_TEXT_LENGTH
        """
        text = self.clean_text(raw_text)
        confidence = apply_confidence_floor(ocr_confidence, self.confidence_floor)
        self.logger.info(f"Analyzing {len(text)} characters (OCR confidence {confidence:.2f})")

        medicines = self.medication_recognizer.recognize(text)
        symptoms = self.symptom_extractor.extract(text)
        diagnosis = self.diagnosis_engine.infer(symptoms, medicines)
        recommendations = self.recommendation_generator.generate(diagnosis)

        self.logger.info(
            f"Identified {len(medicines)} medication(s), {len(symptoms)} symptom(s); "
            f"primary diagnosis {diagnosis.primary}",
            extra={"context": {
                "medicines": [m.name for m in medicines],
                "primary_diagnosis": diagnosis.primary,
                "diagnosis_confidence": diagnosis.confidence,
                "ocr_confidence": confidence,
            }}
        )

        return AnalysisResult(
            medicines=medicines,
            symptoms=symptoms,
            diagnosis=diagnosis,
            recommendations=recommendations,
            extracted_text=text,
            ocr_confidence=confidence,
            doctor_notes=(
                f"Analysis completed. {len(medicines)} medication(s) identified "
                f"with {round(confidence * 100)}% OCR confidence."
            ),
            processing_steps=[
                ProcessingStep(PipelineStage.OCR, confidence=confidence),
                ProcessingStep(PipelineStage.MEDICATION_IDENTIFICATION),
                ProcessingStep(PipelineStage.SYMPTOM_EXTRACTION),
                ProcessingStep(PipelineStage.DIAGNOSIS, confidence=diagnosis.confidence),
                ProcessingStep(PipelineStage.RECOMMENDATIONS),
            ],
        )


@lru_cache(maxsize=1)
def get_pipeline() -> PrescriptionPipeline:
    """Get the shared pipeline built from default settings."""
    return PrescriptionPipeline()


def analyze_prescription(raw_text: Optional[str], ocr_confidence: Optional[float]) -> AnalysisResult:
    """Run the shared pipeline on OCR text."""
    return get_pipeline().run(raw_text, ocr_confidence)
