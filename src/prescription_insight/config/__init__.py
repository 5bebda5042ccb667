# ============================================================================
# src/prescription_insight/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .base_config import base_settings, BaseSettingsConfig
from .extraction_config import extraction_settings, ExtractionSettings
from .thresholds_config import threshold_settings, ThresholdSettings
from .logging_config import logging_settings, LoggingSettings
