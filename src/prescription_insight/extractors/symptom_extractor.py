# ============================================================================
# src/prescription_insight/extractors/symptom_extractor.py
# ============================================================================
"""
Symptom Extractor

Two sources, reported in this order:
1. Vocabulary keywords contained in the text (capitalized)
2. Free-text phrases after labels such as "Dx:" or "Chief complaint:"

Results are de-duplicated case-insensitively, first occurrence wins. When
nothing is found the single default "General health maintenance" is returned.
"""

import logging
import re
from typing import List, Optional, Pattern, Tuple

from ..constants.symptom_terms import (
    SYMPTOM_KEYWORDS,
    SYMPTOM_LABEL_PATTERNS,
    DEFAULT_SYMPTOM,
)
from ..utils.text_normalizer import capitalize_first, clean_candidate

# A captured phrase ends at punctuation, the next known label, or end of text
_NEXT_LABEL = (
    r'(?:rx|medications?|drugs?|sig|diagnosis|dx|condition|chief\s+complaint|complaint|'
    r'problem|symptoms|presenting|advice|plan|history|age|sex|date|patient|name)\s*:'
)


def _compile_label(label: str) -> Pattern[str]:
    return re.compile(
        rf'{label}\s*(?P<phrase>[^.;\n]+?)(?=\s*(?:[.;\n]|\b{_NEXT_LABEL}|$))',
        re.IGNORECASE
    )


LABEL_RULES: Tuple[Tuple[str, Pattern[str]], ...] = tuple(
    (description, _compile_label(label)) for label, description in SYMPTOM_LABEL_PATTERNS
)


class SymptomExtractor:
    """Extracts symptom and condition phrases from prescription text."""

    def __init__(self, settings=None, logger: Optional[logging.Logger] = None):
        if settings is None:
            from ..config import extraction_settings as settings
        self.min_phrase_length = settings.SYMPTOM_LABEL_MIN_LENGTH
        self.max_phrase_length = settings.SYMPTOM_LABEL_MAX_LENGTH
        self.logger = logger or logging.getLogger(__name__)

    def extract(self, text: str) -> List[str]:
        """
        Extract symptoms from text.

        Returns:
            Ordered, de-duplicated symptom list; never empty
        """
        if not text:
            return [DEFAULT_SYMPTOM]

        combined = self._match_keywords(text) + self._match_labels(text)

        symptoms = []
        seen = set()
        for symptom in combined:
            folded = symptom.lower()
            if folded not in seen:
                seen.add(folded)
                symptoms.append(symptom)

        if not symptoms:
            self.logger.debug("No symptoms found, using default")
            return [DEFAULT_SYMPTOM]
        return symptoms

    def _match_keywords(self, text: str) -> List[str]:
        lowered = text.lower()
        return [capitalize_first(keyword) for keyword in SYMPTOM_KEYWORDS if keyword in lowered]

    def _match_labels(self, text: str) -> List[str]:
        phrases = []
        for description, pattern in LABEL_RULES:
            for match in pattern.finditer(text):
                phrase = clean_candidate(match.group("phrase"))
                if self.min_phrase_length <= len(phrase) <= self.max_phrase_length:
                    phrases.append(phrase)
                    self.logger.debug(f"{description} captured '{phrase}'")
        return phrases


def extract_symptoms(text: str) -> List[str]:
    """Extract symptoms with default settings."""
    return SymptomExtractor().extract(text)
