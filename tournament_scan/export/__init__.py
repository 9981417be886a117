"""
Export Module - Tabular output of blind structures
"""

from .structure_exporter import STRUCTURE_COLUMNS, levels_frame, export_structure_csv

__all__ = [
    'STRUCTURE_COLUMNS',
    'levels_frame',
    'export_structure_csv'
]
