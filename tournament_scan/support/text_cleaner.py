"""
Text Cleaner - Handles OCR text cleaning and normalization
"""
import re

_DASH_VARIANTS = re.compile(r"[\u2010-\u2015\u2212]")
_WHITESPACE = re.compile(r"\s+")


def normalize_dashes(line: str) -> str:
    """Replace all dash variants (en-dash, em-dash, minus sign, ...) with a plain hyphen."""
    return _DASH_VARIANTS.sub("-", line)


def clean_line(line: str) -> str:
    """
    OCR line cleaning used before label matching.
    Normalize dashes, collapse whitespace and trim.
    """
    if not line:
        return ""
    line = normalize_dashes(line)
    line = _WHITESPACE.sub(" ", line)
    return line.strip()


def normalize_for_matching(line: str) -> str:
    """Cleaned and lower-cased text, the form labels are compared against."""
    return clean_line(line).lower()
