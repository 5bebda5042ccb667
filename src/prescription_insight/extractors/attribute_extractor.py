# ============================================================================
# src/prescription_insight/extractors/attribute_extractor.py
# ============================================================================
"""
Attribute Extractor

Pulls dosage and frequency out of the text surrounding a medication mention.
Both attributes are evaluated as ordered rule lists where the first matching
rule wins; when nothing matches the documented default is returned.
"""

import logging
from typing import Optional, Tuple

from .patterns import PatternRule, first_match
from ..core.context.recognized_medication import DEFAULT_DOSAGE, DEFAULT_FREQUENCY

DOSAGE_UNITS = r'(?:mcg|mg|ml|g|units?|iu|tablets?|tabs?|capsules?|caps?)'
COUNT_UNITS = r'(?:tablets?|tabs?|capsules?|caps?)'
TIMING_WORDS = (
    r'(?:daily|a\s+day|per\s+day|at\s+night|at\s+bedtime|bedtime|in\s+the\s+morning|'
    r'in\s+the\s+evening|morning|evening|night|hours|hourly|'
    r'(?:with|before|after)\s+(?:meals?|food)|as\s+needed)'
)

# Latin / pharmacy shorthand found on prescriptions
FREQUENCY_ABBREVIATIONS = {
    'od': 'once daily',
    'qd': 'once daily',
    'bd': 'twice daily',
    'bid': 'twice daily',
    'tds': 'three times daily',
    'tid': 'three times daily',
    'qds': 'four times daily',
    'qid': 'four times daily',
    'qhs': 'at bedtime',
    'hs': 'at bedtime',
    'prn': 'as needed',
    'sos': 'as needed',
    'ac': 'before meals',
    'pc': 'after meals',
}


def _render_abbreviation(match) -> str:
    abbreviation = match.group(1)
    return f"{FREQUENCY_ABBREVIATIONS[abbreviation.lower()]} ({abbreviation.upper()})"


def _render_group(match) -> str:
    return match.group(1).strip(" ,")


DOSAGE_RULES = (
    PatternRule.compile("unit_amount", rf'\b\d+(?:\.\d+)?\s*{DOSAGE_UNITS}\b'),
    PatternRule.compile("milligrams", r'\b\d+(?:\.\d+)?\s*milligrams?\b'),
    PatternRule.compile("micrograms", r'\b\d+(?:\.\d+)?\s*micrograms?\b'),
)

FREQUENCY_RULES = (
    PatternRule.compile("sig_instruction", r'\bsig\s*[:.]\s*([^.;:]{2,60})', _render_group),
    PatternRule.compile("take_instruction", rf'\btake\b[^.;:]{{0,60}}?\b{TIMING_WORDS}\b'),
    PatternRule.compile("times_per_day", r'\b\d+\s*(?:times?|x)\s*(?:daily|a\s+day|per\s+day)\b'),
    PatternRule.compile(
        "spelled_out",
        r'\b(?:once|twice|thrice|three\s+times|four\s+times)\s*(?:daily|a\s+day|per\s+day)\b'
    ),
    PatternRule.compile(
        "timing_words",
        r'\b(?:morning|evening|night|bedtime|(?:with|before|after)\s+(?:meals?|food))\b'
    ),
    PatternRule.compile("interval", r'\bevery\s+\d+\s*(?:hours?|hrs?|h)\b'),
    PatternRule.compile(
        "tablet_count",
        rf'\b\d+\s*{COUNT_UNITS}\b(?:\s+(?:daily|a\s+day|per\s+day|at\s+night))?'
    ),
    PatternRule.compile(
        "abbreviation",
        r'\b(' + '|'.join(sorted(FREQUENCY_ABBREVIATIONS, key=len, reverse=True)) + r')\b',
        _render_abbreviation
    ),
)


class AttributeExtractor:
    """
    Extracts dosage and frequency from a context window.

    Pure with respect to its inputs: the same window always yields the same
    attributes and nothing is retained between calls.
    """

    def __init__(self, settings=None, logger: Optional[logging.Logger] = None):
        if settings is None:
            from ..config import extraction_settings as settings
        self.chars_before = settings.CONTEXT_CHARS_BEFORE
        self.chars_after = settings.CONTEXT_CHARS_AFTER
        self.logger = logger or logging.getLogger(__name__)

    def context_window(self, text: str, offset: int) -> str:
        """
        Slice of `text` around a mention starting at `offset`.

        The window is wider after the mention than before it, since dosage
        and frequency instructions follow the drug name on prescriptions.
        """
        start = max(0, offset - self.chars_before)
        end = min(len(text), offset + self.chars_after)
        return text[start:end]

    def extract_dosage(self, window: str) -> str:
        found = first_match(DOSAGE_RULES, window)
        if found is None:
            return DEFAULT_DOSAGE
        rule, value = found
        self.logger.debug(f"Dosage '{value}' matched by rule {rule}")
        return value

    def extract_frequency(self, window: str) -> str:
        found = first_match(FREQUENCY_RULES, window)
        if found is None:
            return DEFAULT_FREQUENCY
        rule, value = found
        self.logger.debug(f"Frequency '{value}' matched by rule {rule}")
        return value

    def extract(self, window: str) -> Tuple[str, str]:
        """Return (dosage, frequency) for a context window."""
        return self.extract_dosage(window), self.extract_frequency(window)

    def extract_at(self, text: str, offset: int) -> Tuple[str, str]:
        """
        (dosage, frequency) for the mention starting at `offset`.

        Rules run on the text following the mention first so an earlier
        line's instructions do not leak into this one; the full context
        window is the fallback.
        """
        following = text[offset:offset + self.chars_after]
        window = self.context_window(text, offset)
        return (
            self._first_in(DOSAGE_RULES, following, window, DEFAULT_DOSAGE, "Dosage"),
            self._first_in(FREQUENCY_RULES, following, window, DEFAULT_FREQUENCY, "Frequency"),
        )

    def _first_in(self, rules, following: str, window: str, default: str, attribute: str) -> str:
        for scope, segment in (("following text", following), ("context window", window)):
            found = first_match(rules, segment)
            if found is not None:
                rule, value = found
                self.logger.debug(f"{attribute} '{value}' matched by rule {rule} in {scope}")
                return value
        return default


def extract_dosage(window: str) -> str:
    """Dosage from a context window, or "As prescribed"."""
    found = first_match(DOSAGE_RULES, window)
    return found[1] if found else DEFAULT_DOSAGE


def extract_frequency(window: str) -> str:
    """Frequency from a context window, or "As directed"."""
    found = first_match(FREQUENCY_RULES, window)
    return found[1] if found else DEFAULT_FREQUENCY
