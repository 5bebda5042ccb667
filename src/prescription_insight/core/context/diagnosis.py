# ============================================================================
# src/prescription_insight/core/context/diagnosis.py
# ============================================================================
"""
Inferred diagnosis
- Primary label and confidence
- Secondary conditions (deduplicated, insertion order kept)
- Risk factors, complications, prognosis from the clinical tables
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .enums import ConfidenceLevel


@dataclass
class Diagnosis:
    primary: str
    confidence: float
    secondary: List[str] = field(default_factory=list)
    risk_factors: List[str] = field(default_factory=list)
    complications: List[str] = field(default_factory=list)
    prognosis: str = ""
    confidence_level: Optional[ConfidenceLevel] = None

    def add_secondary(self, condition: str) -> None:
        """Add a secondary condition unless it is already primary or listed."""
        if condition != self.primary and condition not in self.secondary:
            self.secondary.append(condition)

    def mentions(self, term: str) -> bool:
        """True when the primary label contains `term` (case-insensitive)."""
        return term.lower() in self.primary.lower()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primary": self.primary,
            "secondary": list(self.secondary),
            "confidence": self.confidence,
            "confidence_level": self.confidence_level.value if self.confidence_level else None,
            "risk_factors": list(self.risk_factors),
            "complications": list(self.complications),
            "prognosis": self.prognosis,
        }
