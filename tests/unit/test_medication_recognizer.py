# ============================================================================
# FILE: tests/unit/test_medication_recognizer.py
# ============================================================================
"""
Unit tests for medication recognition
"""

import pytest

from prescription_insight.config import ExtractionSettings
from prescription_insight.core.context import MatchSource
from prescription_insight.extractors.medication_recognizer import MedicationRecognizer


@pytest.fixture
def recognizer(knowledge_base):
    return MedicationRecognizer(knowledge_base)


def test_known_medication(recognizer):
    """Test a knowledge base medication with its attributes"""
    medications = recognizer.recognize("Metformin 500mg twice daily")

    assert len(medications) == 1
    medication = medications[0]
    assert medication.name == "Metformin"
    assert medication.category == "Antidiabetic"
    assert medication.dosage == "500mg"
    assert medication.frequency == "twice daily"
    assert medication.match_source == MatchSource.KNOWLEDGE_BASE
    assert medication.side_effects


def test_case_insensitive_match(recognizer):
    """Test uppercase OCR output"""
    medications = recognizer.recognize("METFORMIN 500 MG")

    assert [m.name for m in medications] == ["Metformin"]
    assert medications[0].dosage == "500 MG"


def test_whole_word_match(recognizer):
    """Test keys are not matched inside longer words"""
    medications = recognizer.recognize("metforminx 500mg")

    assert all(m.category != "Antidiabetic" for m in medications)


def test_knowledge_base_order(recognizer):
    """Test results follow knowledge base order rather than text order"""
    medications = recognizer.recognize("Amlodipine 5mg and Metformin 500mg")

    assert [m.name for m in medications] == ["Metformin", "Amlodipine"]


def test_brand_and_generic_both_reported(recognizer):
    """Test brand and generic keys matching the same mention both stay"""
    medications = recognizer.recognize("Crocin (Paracetamol) 500mg")

    assert [m.name for m in medications] == ["Paracetamol", "Crocin"]
    assert medications[0].category == medications[1].category


def test_result_cap(recognizer, knowledge_base):
    """Test at most ten medications are reported"""
    text = ", ".join(knowledge_base.keys()[:12])

    assert len(recognizer.recognize(text)) == 10


def test_configurable_cap(knowledge_base):
    recognizer = MedicationRecognizer(knowledge_base, settings=ExtractionSettings(MAX_MEDICATIONS=2))
    text = ", ".join(knowledge_base.keys()[:5])

    assert len(recognizer.recognize(text)) == 2


def test_empty_text(recognizer):
    assert recognizer.recognize("") == []


def test_no_medications(recognizer):
    """Test plain prose yields nothing"""
    assert recognizer.recognize("patient feeling fine") == []


# ============================================================================
# GENERIC FALLBACK
# ============================================================================

def test_fallback_label_marker(recognizer):
    """Test "Rx:" label fallback"""
    medications = recognizer.recognize("Rx: Glucophage 500mg")

    assert len(medications) == 1
    medication = medications[0]
    assert medication.name == "Glucophage"
    assert medication.dosage == "500mg"
    assert medication.frequency == "As directed"
    assert medication.category == "Prescription medication"
    assert medication.match_source == MatchSource.GENERIC_PATTERN


def test_fallback_dosage_form(recognizer):
    """Test "Tab X" fallback"""
    medications = recognizer.recognize("Tab Zyloric")

    assert [m.name for m in medications] == ["Zyloric"]
    assert medications[0].dosage == "As prescribed"


def test_fallback_rejects_instruction_words(recognizer):
    """Test instructions are not mistaken for drug names"""
    assert recognizer.recognize("Take 500mg twice") == []


def test_fallback_rejects_long_candidates(recognizer):
    assert recognizer.recognize("Rx: " + "a" * 60) == []


def test_fallback_rejects_short_candidates(recognizer):
    assert recognizer.recognize("Rx: ab") == []


def test_fallback_matches_per_pattern(recognizer):
    """Test each loose pattern contributes at most five candidates"""
    text = "Tab Alpha Tab Bravo Tab Charlie Tab Delta Tab Echo Tab Foxtrot Tab Golf"

    medications = recognizer.recognize(text)

    assert [m.name for m in medications] == ["Alpha", "Bravo", "Charlie", "Delta", "Echo"]


def test_fallback_not_used_when_knowledge_base_matches(recognizer):
    """Test loose patterns are skipped once a known medication is found"""
    medications = recognizer.recognize("Tab Zyloric and Metformin 500mg")

    assert [m.name for m in medications] == ["Metformin"]


def test_fallback_total_cap(recognizer):
    """Test candidates from several loose patterns stop at ten in discovery order"""
    labelled = ", ".join(f"Rx: Med{c}" for c in "abcdef")
    strengths = ", ".join(f"Zolo{c} 5mg" for c in "abcdef")
    forms = ", ".join(f"Tab Vex{c}" for c in "abcde")

    medications = recognizer.recognize(f"{labelled}, {strengths}, {forms}")

    assert [m.name for m in medications] == [
        "Meda", "Medb", "Medc", "Medd", "Mede",
        "Zoloa", "Zolob", "Zoloc", "Zolod", "Zoloe",
    ]
    assert medications[5].dosage == "5mg"


@pytest.mark.parametrize("length,accepted", [(2, False), (3, True), (49, True), (50, False)])
def test_fallback_length_boundaries(recognizer, length, accepted):
    """Test fallback names must be strictly between 2 and 50 characters"""
    medications = recognizer.recognize("Rx: " + "a" * length)

    assert len(medications) == (1 if accepted else 0)
    if accepted:
        assert len(medications[0].name) == length


def test_attributes_follow_their_own_mention(recognizer):
    """Test a previous line's instructions do not leak into the next medication"""
    medications = recognizer.recognize(
        "Metformin 500mg twice daily after meals. Amlodipine 5mg once daily"
    )

    by_name = {m.name: (m.dosage, m.frequency) for m in medications}
    assert by_name["Metformin"] == ("500mg", "twice daily")
    assert by_name["Amlodipine"] == ("5mg", "once daily")
