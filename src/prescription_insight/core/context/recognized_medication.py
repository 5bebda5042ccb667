# ============================================================================
# src/prescription_insight/core/context/recognized_medication.py
# ============================================================================
"""
Recognized medication
- Knowledge base fields plus dosage/frequency pulled from the text
- Generic-pattern records carry boilerplate clinical text
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ...constants.medication_categories import MedicationCategory
from ...constants.medication_db import MedicationEntry
from .enums import MatchSource

DEFAULT_DOSAGE = "As prescribed"
DEFAULT_FREQUENCY = "As directed"

GENERIC_PURPOSE = "Treatment as prescribed by physician"
GENERIC_SIDE_EFFECTS = ("Consult healthcare provider for side effects",)
GENERIC_WARNINGS = ("Follow prescribed dosage", "Consult doctor before stopping")


@dataclass
class RecognizedMedication:
    name: str
    generic_name: str
    category: str
    purpose: str
    side_effects: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    dosage: str = DEFAULT_DOSAGE
    frequency: str = DEFAULT_FREQUENCY

    # Provenance
    key: Optional[str] = None  # knowledge base key, None for generic matches
    match_source: MatchSource = MatchSource.KNOWLEDGE_BASE
    source_text: Optional[str] = None

    @classmethod
    def from_entry(
        cls,
        entry: MedicationEntry,
        dosage: str = DEFAULT_DOSAGE,
        frequency: str = DEFAULT_FREQUENCY,
        source_text: Optional[str] = None
    ) -> "RecognizedMedication":
        return cls(
            name=entry.name,
            generic_name=entry.generic_name,
            category=entry.category.value,
            purpose=entry.purpose,
            side_effects=list(entry.side_effects),
            warnings=list(entry.warnings),
            dosage=dosage,
            frequency=frequency,
            key=entry.key,
            match_source=MatchSource.KNOWLEDGE_BASE,
            source_text=source_text,
        )

    @classmethod
    def generic(
        cls,
        name: str,
        dosage: str = DEFAULT_DOSAGE,
        source_text: Optional[str] = None
    ) -> "RecognizedMedication":
        """Record for a name found only by the loose fallback patterns."""
        return cls(
            name=name,
            generic_name=name,
            category=MedicationCategory.GENERIC.value,
            purpose=GENERIC_PURPOSE,
            side_effects=list(GENERIC_SIDE_EFFECTS),
            warnings=list(GENERIC_WARNINGS),
            dosage=dosage,
            frequency=DEFAULT_FREQUENCY,
            match_source=MatchSource.GENERIC_PATTERN,
            source_text=source_text,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "generic_name": self.generic_name,
            "category": self.category,
            "purpose": self.purpose,
            "dosage": self.dosage,
            "frequency": self.frequency,
            "side_effects": list(self.side_effects),
            "warnings": list(self.warnings),
            "match_source": self.match_source.value,
        }
