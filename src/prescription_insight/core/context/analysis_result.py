# ============================================================================
# src/prescription_insight/core/context/analysis_result.py
# ============================================================================
"""
Analysis result returned by the pipeline
- Medications, symptoms, diagnosis, recommendations
- Cleaned text and floored OCR confidence
- Processing steps and a short summary note
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .diagnosis import Diagnosis
from .enums import PipelineStage
from .recognized_medication import RecognizedMedication


@dataclass
class ProcessingStep:
    stage: PipelineStage
    completed: bool = True
    confidence: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stage": self.stage.value,
            "completed": self.completed,
            "confidence": self.confidence,
        }


@dataclass
class AnalysisResult:
    medicines: List[RecognizedMedication]
    symptoms: List[str]
    diagnosis: Diagnosis
    recommendations: List[str]

    extracted_text: str = ""
    ocr_confidence: float = 0.0
    doctor_notes: str = ""
    processing_steps: List[ProcessingStep] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict for serialization by the transport layer."""
        return {
            "extracted_text": self.extracted_text,
            "ocr_confidence": self.ocr_confidence,
            "medicines": [m.to_dict() for m in self.medicines],
            "symptoms": list(self.symptoms),
            "diagnosis": self.diagnosis.to_dict(),
            "recommendations": list(self.recommendations),
            "doctor_notes": self.doctor_notes,
            "processing_steps": [s.to_dict() for s in self.processing_steps],
        }
