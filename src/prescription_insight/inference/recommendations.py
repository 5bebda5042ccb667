# ============================================================================
# src/prescription_insight/inference/recommendations.py
# ============================================================================
"""
Recommendation Generator

Baseline advice first, then the block for the primary diagnosis when the
clinical tables have one.
"""

import logging
from typing import List, Optional

from ..constants.clinical_tables import ClinicalTables
from ..core.context.diagnosis import Diagnosis


class RecommendationGenerator:

    def __init__(
        self,
        clinical_tables: Optional[ClinicalTables] = None,
        logger: Optional[logging.Logger] = None
    ):
        if clinical_tables is None:
            from ..constants.clinical_tables import get_clinical_tables
            clinical_tables = get_clinical_tables()
        self.clinical_tables = clinical_tables
        self.logger = logger or logging.getLogger(__name__)

    def generate(self, diagnosis: Diagnosis) -> List[str]:
        recommendations = list(self.clinical_tables.baseline_recommendations)
        specific = self.clinical_tables.recommendations(diagnosis.primary)
        if not specific:
            self.logger.debug(f"No specific recommendations for {diagnosis.primary}")
        recommendations.extend(specific)
        return recommendations


def generate_recommendations(diagnosis: Diagnosis) -> List[str]:
    return RecommendationGenerator().generate(diagnosis)
