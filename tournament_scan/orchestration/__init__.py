"""
Orchestration Module - Main API entry points

Exports:
- TournamentScanner: Photograph / fragment scanning with merging
- fill_starting_blinds: Starting blinds from the first playing level
- get_tournament_scanner: Singleton accessor
"""

from .scanner import TournamentScanner, fill_starting_blinds, get_tournament_scanner

__all__ = [
    'TournamentScanner',
    'fill_starting_blinds',
    'get_tournament_scanner'
]
