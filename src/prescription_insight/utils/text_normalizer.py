# ============================================================================
# src/prescription_insight/utils/text_normalizer.py
# ============================================================================
"""
Text Normalization Utilities

Cleans up OCR text before analysis:
- Collapses blank lines
- Collapses whitespace runs
- Capitalizes vocabulary terms for display
"""

import re

_BLANK_LINES = re.compile(r'\n\s*\n')
_WHITESPACE = re.compile(r'\s+')


def normalize_whitespace(text: str) -> str:
    """
    Collapse blank lines and whitespace runs, then trim.

    Args:
        text: Raw OCR text

    Returns:
        Single-line cleaned text ("" for None/blank input)
    """
    if not text:
        return ""
    text = _BLANK_LINES.sub('\n', text)
    text = _WHITESPACE.sub(' ', text)
    return text.strip()


def capitalize_first(term: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    return term[:1].upper() + term[1:]


def clean_candidate(text: str) -> str:
    """Trim whitespace and stray punctuation from a captured phrase."""
    text = _WHITESPACE.sub(' ', text)
    return text.strip(" \t:-.,;()[]'\"")
