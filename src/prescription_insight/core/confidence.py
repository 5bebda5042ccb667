# ============================================================================
# src/prescription_insight/core/confidence.py
# ============================================================================
"""
Confidence Scoring

Provides utilities for:
- Applying the OCR confidence floor
- Determining confidence levels
"""

from dataclasses import dataclass
from typing import Optional

from .context.enums import ConfidenceLevel


@dataclass
class ConfidenceThresholds:
    """Confidence level thresholds"""
    high: float = 0.85
    medium: float = 0.70

    @classmethod
    def from_settings(cls, settings=None) -> "ConfidenceThresholds":
        if settings is None:
            from ..config import threshold_settings as settings
        return cls(high=settings.HIGH_CONFIDENCE, medium=settings.MEDIUM_CONFIDENCE)

    def get_level(self, score: float) -> ConfidenceLevel:
        """
        Get confidence level from score.

        Args:
            score: Confidence score (0.0-1.0)

        Returns:
            ConfidenceLevel
        """
        if score >= self.high:
            return ConfidenceLevel.HIGH
        elif score >= self.medium:
            return ConfidenceLevel.MEDIUM
        else:
            return ConfidenceLevel.LOW


def clamp(score: Optional[float]) -> float:
    """Clamp a score into [0, 1]; None and NaN become 0."""
    if score is None or score != score:
        return 0.0
    return max(0.0, min(1.0, float(score)))


def apply_confidence_floor(score: Optional[float], floor: float) -> float:
    """
    Effective OCR confidence: max(score, floor).

    Scores outside [0, 1] are clamped first so the result stays a probability.
    """
    return max(clamp(score), floor)
