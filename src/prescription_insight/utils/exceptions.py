# ============================================================================
# src/prescription_insight/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the prescription insight pipeline.
"""


class PrescriptionInsightError(Exception):
    """Base exception for all prescription insight errors."""
    pass


class InsufficientTextError(PrescriptionInsightError):
    """Cleaned input text is empty or too short to analyze."""
    def __init__(self, message: str, min_length: int, actual_length: int):
        super().__init__(message)
        self.min_length = min_length
        self.actual_length = actual_length


class KnowledgeBaseError(PrescriptionInsightError):
    """Error loading or validating a knowledge file."""
    pass


class MedicineNotFoundError(KnowledgeBaseError):
    """Requested medicine has no entry in the knowledge base."""
    def __init__(self, message: str, medicine_name: str):
        super().__init__(message)
        self.medicine_name = medicine_name


class ConfigurationError(PrescriptionInsightError):
    """Invalid configuration."""
    pass
