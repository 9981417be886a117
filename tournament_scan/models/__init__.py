"""
Tournament Models Module

Exports:
- TextFragment, FragmentBox: OCR input fragments
- Line: Reconstructed reading-order row
- BlindLevelRecord: Blind level / break record
- TournamentDescriptor: Scan result
- GameType, ReentryPolicy: Closed value sets
"""

from .tournament_models import (
    FragmentBox,
    TextFragment,
    Line,
    GameType,
    ReentryPolicy,
    BlindLevelRecord,
    TournamentDescriptor,
    SCALAR_FIELDS,
    format_chip_amount,
)

__all__ = [
    'FragmentBox',
    'TextFragment',
    'Line',
    'GameType',
    'ReentryPolicy',
    'BlindLevelRecord',
    'TournamentDescriptor',
    'SCALAR_FIELDS',
    'format_chip_amount',
]
