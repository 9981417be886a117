"""
Extraction Module - Extract tournament data from reconstructed lines

Handles extraction of:
- Labeled listing fields (buy-in, chips, guarantee, re-entry, ...)
- Scalar values (integers, dollar amounts, chip counts with k/m suffixes)
- Tournament metadata with raw-text fallbacks
- Blind level schedules and breaks

Exports:
- FieldLabel: Closed label vocabulary
- FieldExtractor: Label -> value map builder
- MetadataResolver: Scalar descriptor fields
- BlindScheduleInterpreter: Level/break records
"""

from .field_labels import FieldLabel
from .field_extractor import FieldExtractor, FieldMap
from .scalar_parsers import (
    parse_int,
    parse_currency,
    parse_chip_value,
    find_chip_value,
    extract_numbers,
)
from .metadata_resolver import MetadataResolver, resolve_buy_in, classify_game_type, normalize_reentry
from .blind_schedule import BlindScheduleInterpreter, ScheduleFormat

__all__ = [
    'FieldLabel',
    'FieldExtractor',
    'FieldMap',
    'parse_int',
    'parse_currency',
    'parse_chip_value',
    'find_chip_value',
    'extract_numbers',
    'MetadataResolver',
    'resolve_buy_in',
    'classify_game_type',
    'normalize_reentry',
    'BlindScheduleInterpreter',
    'ScheduleFormat'
]
