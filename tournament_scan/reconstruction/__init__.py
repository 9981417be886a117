"""
Reconstruction Module - Text Order Reconstruction

Rebuilds reading order from positioned OCR fragments:
- Sort fragments by vertical position
- Group cells into table rows
- Order each row left-to-right

Exports:
- reconstruct_lines: Fragments to ordered Lines
- group_into_rows: Fragments to ordered fragment rows
"""

from .line_reconstruction import reconstruct_lines, group_into_rows, DEFAULT_ROW_TOLERANCE

__all__ = [
    'reconstruct_lines',
    'group_into_rows',
    'DEFAULT_ROW_TOLERANCE'
]
