# ============================================================================
# src/prescription_insight/constants/medication_db.py
# ============================================================================
"""
Medication Knowledge Base.

Loads the versioned medication file (knowledge/medications.json) once per
process and exposes it read-only. Entries are validated with pydantic on load,
so every category belongs to MedicationCategory and every key is unique.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .medication_categories import MedicationCategory
from ..utils.exceptions import KnowledgeBaseError, MedicineNotFoundError

logger = logging.getLogger(__name__)


class MedicineMonograph(BaseModel):
    """Extended consumer information for a medicine."""
    model_config = ConfigDict(frozen=True)

    description: str
    interactions: Tuple[str, ...] = ()
    contraindications: Tuple[str, ...] = ()
    monitoring: Tuple[str, ...] = ()
    cost: Optional[str] = None
    food_interactions: Optional[str] = None


class MedicationEntry(BaseModel):
    """A single knowledge base record keyed by its canonical lowercase token."""
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    generic_name: str
    category: MedicationCategory
    purpose: str
    side_effects: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    monograph: Optional[MedicineMonograph] = None

    @field_validator("key")
    @classmethod
    def key_is_canonical(cls, value: str) -> str:
        if not value or value != value.strip().lower():
            raise ValueError(f"knowledge base key must be lowercase and trimmed: {value!r}")
        return value


class MedicationKnowledgeFile(BaseModel):
    """Schema of the knowledge file on disk."""
    version: str
    description: Optional[str] = None
    medications: List[MedicationEntry]


class MedicationKnowledgeBase:
    """
    Read-only medication lookup.

    Iteration follows the file's insertion order, which is also the order
    the recognizer tests keys in.
    """

    def __init__(self, entries: Iterable[MedicationEntry], version: str = "unversioned"):
        table = {}
        for entry in entries:
            if entry.key in table:
                raise KnowledgeBaseError(f"Duplicate medication key: {entry.key}")
            table[entry.key] = entry
        self._entries = MappingProxyType(table)
        self.version = version

    def lookup(self, key: str) -> Optional[MedicationEntry]:
        """Return the entry for a canonical key, or None."""
        return self._entries.get(key.strip().lower())

    def keys(self) -> List[str]:
        return list(self._entries.keys())

    def entries(self) -> List[MedicationEntry]:
        return list(self._entries.values())

    def __iter__(self) -> Iterator[MedicationEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.strip().lower() in self._entries

    def names_for_categories(self, categories: Iterable[MedicationCategory]) -> Tuple[str, ...]:
        """
        Lowercase display names and keys of every entry in the given categories.

        Used as the name signature a diagnosis rule looks for.
        """
        wanted = set(categories)
        terms = []
        for entry in self._entries.values():
            if entry.category in wanted:
                for term in (entry.name.lower(), entry.key):
                    if term not in terms:
                        terms.append(term)
        return tuple(terms)

    def find_by_name(self, name: str) -> Optional[MedicationEntry]:
        """Case-insensitive match on key or display name."""
        wanted = name.strip().lower()
        entry = self._entries.get(wanted)
        if entry is not None:
            return entry
        for entry in self._entries.values():
            if entry.name.lower() == wanted:
                return entry
        return None

    def describe(self, name: str) -> MedicineMonograph:
        """
        Get extended information for a medicine.

        Args:
            name: Key or display name, any casing

        Returns:
            MedicineMonograph

        Raises:
            MedicineNotFoundError: unknown medicine or no monograph recorded
        """
        entry = self.find_by_name(name)
        if entry is None or entry.monograph is None:
            raise MedicineNotFoundError(
                f"Medicine not found in database: {name}",
                medicine_name=name
            )
        return entry.monograph


def load_knowledge_base(path: Path) -> MedicationKnowledgeBase:
    """
    Load and validate a medication knowledge file.

    Args:
        path: JSON file in MedicationKnowledgeFile layout

    Raises:
        KnowledgeBaseError: missing file, invalid JSON, or schema violation
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise KnowledgeBaseError(f"Cannot read medication knowledge base {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise KnowledgeBaseError(f"Invalid JSON in {path}: {e}") from e

    try:
        parsed = MedicationKnowledgeFile.model_validate(raw)
    except ValidationError as e:
        raise KnowledgeBaseError(f"Invalid medication knowledge base {path}: {e}") from e

    kb = MedicationKnowledgeBase(parsed.medications, version=parsed.version)
    logger.info(f"Loaded medication knowledge base v{kb.version} ({len(kb)} entries)")
    return kb


@lru_cache(maxsize=1)
def get_knowledge_base() -> MedicationKnowledgeBase:
    """Get the process-wide knowledge base, loading it on first use."""
    from ..config import base_settings
    return load_knowledge_base(base_settings.medication_db_path())


def lookup_medication(key: str) -> Optional[MedicationEntry]:
    """
    Look up a medication by canonical key.

    Convenience function that uses the shared knowledge base.
    """
    return get_knowledge_base().lookup(key)


def get_medicine_info(name: str) -> MedicineMonograph:
    """
    Get the monograph for a medicine by key or display name.

    Convenience function that uses the shared knowledge base.
    """
    return get_knowledge_base().describe(name)
