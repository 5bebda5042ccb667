# ============================================================================
# FILE: tests/unit/test_attribute_extractor.py
# ============================================================================
"""
Unit tests for dosage and frequency extraction
"""

import pytest

from prescription_insight.config import ExtractionSettings
from prescription_insight.extractors.attribute_extractor import (
    AttributeExtractor,
    extract_dosage,
    extract_frequency,
)


# ============================================================================
# DOSAGE
# ============================================================================

@pytest.mark.parametrize("window,expected", [
    ("Metformin 500mg twice daily", "500mg"),
    ("Paracetamol 650 mg after food", "650 mg"),
    ("Levothyroxine 50 mcg empty stomach", "50 mcg"),
    ("Syrup 5 ml thrice daily", "5 ml"),
    ("Insulin 10 units before dinner", "10 units"),
    ("Amoxicillin 250 milligrams", "250 milligrams"),
    ("Thyronorm 100 micrograms", "100 micrograms"),
])
def test_dosage_rules(window, expected):
    """Test each dosage rule"""
    assert extract_dosage(window) == expected


def test_dosage_rule_priority_over_position():
    """Test the first rule wins even when a later rule matches earlier in text"""
    assert extract_dosage("Amoxicillin 250 milligrams or 5ml syrup") == "5ml"


def test_dosage_count_unit():
    """Test tablet counts are read as a dosage"""
    assert extract_dosage("Take 2 tablets after food") == "2 tablets"


def test_dosage_default():
    """Test default when nothing matches"""
    assert extract_dosage("Metformin as advised") == "As prescribed"
    assert extract_dosage("") == "As prescribed"


# ============================================================================
# FREQUENCY
# ============================================================================

@pytest.mark.parametrize("window,expected", [
    ("Metformin 500mg 2 times daily", "2 times daily"),
    ("Metformin 500mg twice daily", "twice daily"),
    ("Vitamin D once a day", "once a day"),
    ("Atorvastatin 10mg at bedtime", "bedtime"),
    ("Pantoprazole 40mg before meals", "before meals"),
    ("Ibuprofen 400mg every 8 hours", "every 8 hours"),
    ("Dolo 650 1 tablet", "1 tablet"),
])
def test_frequency_rules(window, expected):
    """Test each frequency rule"""
    assert extract_frequency(window) == expected


def test_frequency_sig_instruction():
    """Test Sig: lines are taken verbatim"""
    assert extract_frequency("Sig: 1 tab BID") == "1 tab BID"


def test_frequency_take_instruction():
    """Test take instructions run up to the timing word"""
    assert extract_frequency("Take one tablet twice daily after meals") == "Take one tablet twice daily"


@pytest.mark.parametrize("window,expected", [
    ("Azithromycin 500mg OD", "once daily (OD)"),
    ("Amoxicillin 250mg TDS", "three times daily (TDS)"),
    ("Paracetamol 500mg prn", "as needed (PRN)"),
])
def test_frequency_abbreviations(window, expected):
    """Test pharmacy shorthand is expanded"""
    assert extract_frequency(window) == expected


def test_frequency_rule_priority():
    """Test times-per-day outranks timing words"""
    assert extract_frequency("2 times daily in the morning") == "2 times daily"


def test_frequency_default():
    """Test default when nothing matches"""
    assert extract_frequency("Metformin 500mg") == "As directed"


# ============================================================================
# CONTEXT WINDOW
# ============================================================================

def test_context_window_bounds():
    """Test window slices before and after the mention"""
    extractor = AttributeExtractor(
        ExtractionSettings(CONTEXT_CHARS_BEFORE=5, CONTEXT_CHARS_AFTER=10)
    )
    text = "0123456789ABCDEFGHIJ"

    assert extractor.context_window(text, 10) == "56789ABCDEFGHIJ"
    assert extractor.context_window(text, 2) == "0123456789AB"


def test_extract_returns_pair():
    extractor = AttributeExtractor()
    assert extractor.extract("Metformin 500mg twice daily") == ("500mg", "twice daily")


def test_extract_at_prefers_following_text():
    """Test attributes come from text after the mention before the wider window"""
    extractor = AttributeExtractor()
    text = "Metformin 500mg twice daily after meals. Amlodipine 5mg once daily"

    assert extractor.extract_at(text, text.index("Amlodipine")) == ("5mg", "once daily")
    assert extractor.extract_at(text, 0) == ("500mg", "twice daily")


def test_extract_at_falls_back_to_window():
    """Test instructions written before the name are still found"""
    extractor = AttributeExtractor()
    text = "Twice daily 500mg Metformin"

    assert extractor.extract_at(text, text.index("Metformin")) == ("500mg", "Twice daily")


def test_extract_at_defaults():
    extractor = AttributeExtractor()

    assert extractor.extract_at("Metformin as advised", 0) == ("As prescribed", "As directed")
