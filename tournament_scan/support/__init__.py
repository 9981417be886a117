"""
Support Module - Text utilities shared by the extractors

Exports:
- clean_line, normalize_dashes, normalize_for_matching: OCR text normalization
- is_chrome, is_boilerplate, is_section_header: Screen chrome detection
"""

from .text_cleaner import clean_line, normalize_dashes, normalize_for_matching
from .chrome_filter import is_chrome, is_boilerplate, is_section_header

__all__ = [
    'clean_line',
    'normalize_dashes',
    'normalize_for_matching',
    'is_chrome',
    'is_boilerplate',
    'is_section_header'
]
