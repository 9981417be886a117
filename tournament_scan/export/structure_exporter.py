"""
Structure Exporter - Blind structure as a table

Turns a descriptor's levels into a pandas DataFrame (one row per level or
break, in schedule order) and writes it out as CSV.
"""
import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from ..models import TournamentDescriptor

logger = logging.getLogger(__name__)

STRUCTURE_COLUMNS = [
    'level', 'small_blind', 'big_blind', 'ante',
    'duration_minutes', 'is_break', 'break_label', 'blinds',
]


def levels_frame(descriptor: TournamentDescriptor) -> pd.DataFrame:
    """Build the blind structure table for a descriptor."""
    rows = [
        {
            'level': level.level_number,
            'small_blind': level.small_blind,
            'big_blind': level.big_blind,
            'ante': level.ante,
            'duration_minutes': level.duration_minutes,
            'is_break': level.is_break,
            'break_label': level.break_label,
            'blinds': level.blinds_display,
        }
        for level in descriptor.levels
    ]
    return pd.DataFrame(rows, columns=STRUCTURE_COLUMNS)


def export_structure_csv(descriptor: TournamentDescriptor,
                         path: Optional[Union[str, Path]] = None) -> str:
    """
    Render the blind structure as CSV.

    Args:
        descriptor: Scanned tournament
        path: When given, the CSV is also written there

    Returns:
        CSV text
    """
    df = levels_frame(descriptor)
    csv_text = df.to_csv(index=False)

    if path is not None:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(csv_text, encoding='utf-8')
        logger.info(f"✅ Blind structure saved to: {output_path} ({len(df)} rows)")

    return csv_text
