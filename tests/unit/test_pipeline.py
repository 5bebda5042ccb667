# ============================================================================
# FILE: tests/unit/test_pipeline.py
# ============================================================================
"""
End-to-end tests for the analysis pipeline
"""

import json
import logging

import pytest

from prescription_insight import analyze_prescription
from prescription_insight.core.context import PipelineStage
from prescription_insight.core.pipeline import PrescriptionPipeline, get_pipeline
from prescription_insight.utils.exceptions import InsufficientTextError


def test_single_antidiabetic(pipeline):
    result = pipeline.run("Metformin 500mg twice daily", 0.82)

    assert [m.name for m in result.medicines] == ["Metformin"]
    assert "500mg" in result.medicines[0].dosage
    assert "twice" in result.medicines[0].frequency
    assert result.diagnosis.primary == "Type 2 Diabetes Mellitus"
    assert result.diagnosis.confidence == 0.92
    assert result.symptoms == ["General health maintenance"]
    assert result.ocr_confidence == 0.82


def test_antibiotic_with_symptom(pipeline):
    result = pipeline.run("Take Amoxicillin 250mg three times daily for infection", 0.9)

    assert [m.name for m in result.medicines] == ["Amoxicillin"]
    assert result.medicines[0].dosage == "250mg"
    assert result.symptoms == ["Infection"]
    assert result.diagnosis.primary == "Bacterial Infection"
    assert result.diagnosis.confidence == 0.85
    assert "Complete the full antibiotic course even if symptoms improve" in result.recommendations


def test_insufficient_text(pipeline):
    with pytest.raises(InsufficientTextError) as exc_info:
        pipeline.run("abcde", 0.9)

    assert exc_info.value.actual_length == 5
    assert exc_info.value.min_length == 10


@pytest.mark.parametrize("text", [None, "", "   \n\n   ", "   abc   def   "])
def test_insufficient_after_cleaning(pipeline, text):
    """Test length is checked on cleaned text"""
    with pytest.raises(InsufficientTextError):
        pipeline.run(text, 0.9)


def test_no_medications(pipeline):
    result = pipeline.run("patient feeling fine", 0.9)

    assert result.medicines == []
    assert result.symptoms == ["General health maintenance"]
    assert result.diagnosis.primary == "General Health Maintenance"
    assert result.diagnosis.confidence == 0.75
    assert len(result.recommendations) == 5


def test_diabetes_outranks_hypertension(pipeline):
    result = pipeline.run("Metformin 500mg and Amlodipine 5mg daily", 0.9)

    assert result.diagnosis.primary == "Type 2 Diabetes Mellitus"
    assert "Essential Hypertension" in result.diagnosis.secondary


def test_full_prescription(pipeline, sample_prescription_text):
    result = pipeline.run(sample_prescription_text, 0.88)

    assert [m.name for m in result.medicines] == ["Metformin", "Amlodipine", "Atorvastatin"]
    assert result.diagnosis.primary == "Type 2 Diabetes Mellitus"
    assert "Essential Hypertension" in result.diagnosis.secondary
    assert "Hyperlipidemia" in result.diagnosis.secondary
    assert "Diabetes" in result.symptoms


# ============================================================================
# OCR CONFIDENCE
# ============================================================================

@pytest.mark.parametrize("reported", [0.0, 0.2, 0.5, 0.73, 1.0])
def test_confidence_floor(pipeline, reported):
    result = pipeline.run("Metformin 500mg twice daily", reported)

    assert result.ocr_confidence == max(reported, 0.5)


@pytest.mark.parametrize("reported,expected", [(1.7, 1.0), (-0.3, 0.5), (None, 0.5)])
def test_confidence_clamped(pipeline, reported, expected):
    assert pipeline.run("Metformin 500mg twice daily", reported).ocr_confidence == expected


# ============================================================================
# RESULT SHAPE
# ============================================================================

def test_whitespace_normalized(pipeline):
    result = pipeline.run("Metformin\n\n500mg    twice\tdaily", 0.9)

    assert result.extracted_text == "Metformin 500mg twice daily"


def test_processing_steps_and_notes(pipeline):
    result = pipeline.run("Metformin 500mg twice daily", 0.3)

    assert [step.stage for step in result.processing_steps] == list(PipelineStage)
    assert all(step.completed for step in result.processing_steps)
    assert result.processing_steps[0].confidence == 0.5
    assert result.doctor_notes == (
        "Analysis completed. 1 medication(s) identified with 50% OCR confidence."
    )


def test_idempotent(pipeline):
    """Test identical input gives identical output"""
    text = "Take Amoxicillin 250mg three times daily for infection. Pantoprazole 40mg before meals"

    first = pipeline.run(text, 0.8).to_dict()
    second = pipeline.run(text, 0.8).to_dict()

    assert first == second
    assert json.dumps(first) == json.dumps(second)


def test_result_serializes(pipeline, sample_prescription_text):
    payload = json.loads(json.dumps(pipeline.run(sample_prescription_text, 0.9).to_dict()))

    assert payload["diagnosis"]["primary"] == "Type 2 Diabetes Mellitus"
    assert payload["medicines"][0]["name"] == "Metformin"


def test_injected_logger(caplog):
    logger = logging.getLogger("tests.pipeline")
    pipeline = PrescriptionPipeline(logger=logger)

    with caplog.at_level(logging.INFO, logger="tests.pipeline"):
        pipeline.run("Metformin 500mg twice daily", 0.9)

    assert any(record.name == "tests.pipeline" for record in caplog.records)


def test_shared_pipeline():
    result = analyze_prescription("Metformin 500mg twice daily", 0.9)

    assert result.diagnosis.primary == "Type 2 Diabetes Mellitus"


def test_injected_logger_receives_timing(caplog):
    """Test the analysis timing record goes to the injected logger"""
    logger = logging.getLogger("tests.pipeline.timing")
    pipeline = PrescriptionPipeline(logger=logger)

    with caplog.at_level(logging.DEBUG, logger="tests.pipeline.timing"):
        pipeline.run("Metformin 500mg twice daily", 0.9)

    timing = [r for r in caplog.records if "Prescription analysis completed" in r.getMessage()]
    assert [r.name for r in timing] == ["tests.pipeline.timing"]
    assert timing[0].context["operation"] == "Prescription analysis"


def test_injected_logger_receives_failure(caplog):
    logger = logging.getLogger("tests.pipeline.failure")
    pipeline = PrescriptionPipeline(logger=logger)

    with caplog.at_level(logging.ERROR, logger="tests.pipeline.failure"):
        with pytest.raises(InsufficientTextError):
            pipeline.run("abc", 0.9)

    assert any(
        r.name == "tests.pipeline.failure" and "Prescription analysis failed" in r.getMessage()
        for r in caplog.records
    )


def test_shared_pipeline_is_single_instance():
    assert get_pipeline() is get_pipeline()
