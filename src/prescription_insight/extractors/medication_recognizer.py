# ============================================================================
# src/prescription_insight/extractors/medication_recognizer.py
# ============================================================================
"""
Medication Recognizer

Finds medications in prescription text:
- Whole-word, case-insensitive search for every knowledge base key
- Dosage/frequency from the context window around each mention
- Generic fallback patterns ("Rx: ...", "500mg Foo", "Tab Foo") when the
  knowledge base finds nothing

Knowledge base matches are reported in knowledge base order, not text order.
Two keys matching the same region (brand and generic) both stay.
"""

import logging
import re
from itertools import islice
from typing import List, Optional, Pattern, Tuple

from .attribute_extractor import AttributeExtractor, DOSAGE_RULES
from .patterns import first_match
from ..constants.medication_db import MedicationEntry, MedicationKnowledgeBase
from ..core.context.recognized_medication import RecognizedMedication, DEFAULT_DOSAGE
from ..utils.text_normalizer import capitalize_first, clean_candidate

STRENGTH_UNITS = r'(?:mcg|mg|ml|g|units?|iu)'
_STRENGTH = re.compile(rf'\b\d+(?:\.\d+)?\s*{STRENGTH_UNITS}\b', re.IGNORECASE)

# Ordered loose patterns; group 1 is the candidate phrase.
GENERIC_PATTERNS: Tuple[Tuple[str, Pattern[str]], ...] = tuple(
    (name, re.compile(regex, re.IGNORECASE)) for name, regex in (
        ("label_marker",
         rf'\b(?:rx|medication|drug)\s*[:\-]\s*([a-z][a-z0-9\-]*(?:\s+\d+(?:\.\d+)?\s*{STRENGTH_UNITS}\b)?)'),
        ("amount_then_name",
         rf'\b(\d+(?:\.\d+)?\s*{STRENGTH_UNITS}\s+[a-z][a-z\-]{{2,}})\b'),
        ("name_then_amount",
         rf'\b([a-z][a-z\-]{{2,}}\s+\d+(?:\.\d+)?\s*{STRENGTH_UNITS})\b'),
        ("dosage_form",
         r'\b(?:tab|tablet|cap|capsule)s?\.?\s+([a-z][a-z\-]{2,})\b'),
    )
)

# Words the loose patterns pick up that are instructions, not drug names
NON_DRUG_WORDS = frozenset({
    "take", "takes", "daily", "once", "twice", "thrice", "times", "time",
    "tab", "tabs", "tablet", "tablets", "cap", "caps", "capsule", "capsules",
    "dose", "doses", "morning", "evening", "night", "bedtime", "after",
    "before", "with", "meals", "food", "every", "hours", "for", "and", "the",
    "per", "day", "days", "week", "weeks", "each", "orally", "oral",
    "od", "bd", "bid", "tid", "qid", "sos", "prn", "total", "dosage",
})


class MedicationRecognizer:
    """
    Recognizes medications against the knowledge base with a generic fallback.

    Supports:
    - Knowledge base matching in insertion order
    - Context-window attribute extraction
    - Generic pattern fallback with length filtering
    - Result cap
    """

    def __init__(
        self,
        knowledge_base: Optional[MedicationKnowledgeBase] = None,
        attribute_extractor: Optional[AttributeExtractor] = None,
        settings=None,
        logger: Optional[logging.Logger] = None
    ):
        if knowledge_base is None:
            from ..constants.medication_db import get_knowledge_base
            knowledge_base = get_knowledge_base()
        if settings is None:
            from ..config import extraction_settings as settings

        self.logger = logger or logging.getLogger(__name__)
        self.knowledge_base = knowledge_base
        self.attributes = attribute_extractor or AttributeExtractor(settings, logger=self.logger)
        self.max_medications = settings.MAX_MEDICATIONS
        self.matches_per_pattern = settings.FALLBACK_MATCHES_PER_PATTERN
        self.min_name_length = settings.FALLBACK_NAME_MIN_LENGTH
        self.max_name_length = settings.FALLBACK_NAME_MAX_LENGTH

        self._key_patterns: List[Tuple[MedicationEntry, Pattern[str]]] = [
            (entry, re.compile(rf'\b{re.escape(entry.key)}\b', re.IGNORECASE))
            for entry in knowledge_base
        ]

    def recognize(self, text: str) -> List[RecognizedMedication]:
        """
        Recognize medications in text.

        Args:
            text: Normalized prescription text (original casing)

        Returns:
            At most `max_medications` records in discovery order
        """
        if not text:
            return []

        medications = self._match_knowledge_base(text)
        if not medications:
            self.logger.info("No knowledge base matches, falling back to generic patterns")
            medications = self._match_generic_patterns(text)

        if len(medications) > self.max_medications:
            self.logger.info(
                f"Capping {len(medications)} medications at {self.max_medications}"
            )
        return medications[:self.max_medications]

    def _match_knowledge_base(self, text: str) -> List[RecognizedMedication]:
        found = []
        for entry, pattern in self._key_patterns:
            match = pattern.search(text)
            if match is None:
                continue

            dosage, frequency = self.attributes.extract_at(text, match.start())
            found.append(RecognizedMedication.from_entry(
                entry,
                dosage=dosage,
                frequency=frequency,
                source_text=match.group(0),
            ))
            self.logger.debug(
                f"Matched {entry.name} at offset {match.start()}: "
                f"dosage={dosage!r}, frequency={frequency!r}"
            )

            if len(found) >= self.max_medications:
                break
        return found

    def _match_generic_patterns(self, text: str) -> List[RecognizedMedication]:
        found = []
        seen = set()
        for pattern_name, pattern in GENERIC_PATTERNS:
            for match in islice(pattern.finditer(text), self.matches_per_pattern):
                medication = self._build_generic(match.group(1))
                if medication is None:
                    continue
                if medication.name.lower() in seen:
                    continue
                seen.add(medication.name.lower())
                found.append(medication)
                self.logger.debug(
                    f"Generic pattern {pattern_name} accepted '{medication.name}'"
                )
                if len(found) >= self.max_medications:
                    return found
        return found

    def _accept_length(self, value: str) -> bool:
        return self.min_name_length < len(value) < self.max_name_length

    def _build_generic(self, raw: str) -> Optional[RecognizedMedication]:
        """Turn a loose-pattern capture into a record, or None to reject it."""
        candidate = clean_candidate(raw)
        if not self._accept_length(candidate):
            return None

        name = clean_candidate(_STRENGTH.sub(" ", candidate))
        if not name or not self._accept_length(name):
            return None
        if name.split()[0].lower() in NON_DRUG_WORDS:
            return None

        found = first_match(DOSAGE_RULES, candidate)
        dosage = found[1] if found else DEFAULT_DOSAGE
        return RecognizedMedication.generic(
            capitalize_first(name),
            dosage=dosage,
            source_text=candidate,
        )
