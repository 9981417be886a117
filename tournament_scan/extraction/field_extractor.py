"""
Field Extractor - Builds the label -> value map for one photograph

Two additive strategies, first writer wins:
1. Prefix match: "Total Buy-In $400" on one reconstructed line
2. Adjacent-line pairing: "Total Buy-In" on one line, "$400" on the next
"""
import logging
from typing import Dict, List, Sequence

from ..models import Line
from ..support.chrome_filter import is_boilerplate, is_chrome
from ..support.text_cleaner import clean_line
from .field_labels import FieldLabel, label_for, starts_with_label

logger = logging.getLogger(__name__)

FieldMap = Dict[FieldLabel, str]


class FieldExtractor:
    """Extracts known listing labels and their values from reconstructed lines."""

    def extract(self, lines: Sequence[Line]) -> FieldMap:
        texts = [line.text.strip() for line in lines]
        fields: FieldMap = {}

        self._extract_prefixed(texts, fields)
        self._extract_adjacent(texts, fields)

        logger.debug(f"Extracted {len(fields)} fields: {[label.value for label in fields]}")
        return fields

    def _extract_prefixed(self, texts: List[str], fields: FieldMap) -> None:
        for text in texts:
            if not text or is_chrome(text):
                continue

            label = starts_with_label(text)
            if label is None:
                continue

            normalized = clean_line(text)
            value = normalized[len(label.value):].strip().strip(':').strip()
            if value and label not in fields:
                fields[label] = value

    def _extract_adjacent(self, texts: List[str], fields: FieldMap) -> None:
        for current, following in zip(texts, texts[1:]):
            label = label_for(current)
            if label is None or label in fields:
                continue

            value = following.strip()
            if not value or is_boilerplate(value):
                continue

            # Two consecutive labels, not a label/value pair
            if label_for(value) is not None or starts_with_label(value) is not None:
                continue

            fields[label] = value
