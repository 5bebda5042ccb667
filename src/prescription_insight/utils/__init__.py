# ============================================================================
# src/prescription_insight/utils/__init__.py
# ============================================================================
"""
Utility modules for the prescription insight pipeline.
"""

from .exceptions import (
    PrescriptionInsightError,
    InsufficientTextError,
    KnowledgeBaseError,
    MedicineNotFoundError,
    ConfigurationError,
)

from .logging import (
    setup_logging,
    setup_logging_from_settings,
    get_logger,
    log_performance,
    JsonFormatter,
)

from .text_normalizer import (
    normalize_whitespace,
    capitalize_first,
    clean_candidate,
)

__all__ = [
    # Exceptions
    'PrescriptionInsightError',
    'InsufficientTextError',
    'KnowledgeBaseError',
    'MedicineNotFoundError',
    'ConfigurationError',
    # Logging
    'setup_logging',
    'setup_logging_from_settings',
    'get_logger',
    'log_performance',
    'JsonFormatter',
    # Text
    'normalize_whitespace',
    'capitalize_first',
    'clean_candidate',
]
