"""
Merging Module - Multi-photograph capture merging

Exports:
- merge_captures: Combine per-photograph descriptors
- deduplicate_and_renumber: Canonical level schedule from pooled levels
"""

from .capture_merger import merge_captures, deduplicate_and_renumber, dedup_key

__all__ = [
    'merge_captures',
    'deduplicate_and_renumber',
    'dedup_key'
]
