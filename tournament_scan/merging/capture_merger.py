"""
Capture Merger - Combines per-photograph descriptors into one

Users often photograph a long structure sheet in overlapping sections, or
out of order. Scalars keep the first non-null value in caller order; levels
are pooled, deduplicated and renumbered into one canonical schedule.
"""
import logging
from dataclasses import replace
from functools import reduce
from typing import FrozenSet, Hashable, NamedTuple, Sequence, Tuple

from ..models import SCALAR_FIELDS, BlindLevelRecord, TournamentDescriptor

logger = logging.getLogger(__name__)


def dedup_key(level: BlindLevelRecord) -> Hashable:
    """
    Identity of a level for deduplication.

    Playing levels match on (SB, BB, ante); breaks match on (label, duration).
    The leading tag keeps the two kinds from ever colliding.
    """
    if level.is_break:
        return ('break', level.break_label, level.duration_minutes)
    return ('level', level.small_blind, level.big_blind, level.ante)


class _DedupState(NamedTuple):
    seen: FrozenSet[Hashable]
    unique: Tuple[BlindLevelRecord, ...]


def _keep_first(state: _DedupState, level: BlindLevelRecord) -> _DedupState:
    key = dedup_key(level)
    if key in state.seen:
        return state
    return _DedupState(state.seen | {key}, state.unique + (level,))


def deduplicate_and_renumber(levels: Sequence[BlindLevelRecord]) -> Tuple[BlindLevelRecord, ...]:
    """Drop duplicates, stable-sort by original level number, renumber densely from 1."""
    unique = reduce(_keep_first, levels, _DedupState(frozenset(), ())).unique
    ordered = sorted(unique, key=lambda level: level.level_number)
    return tuple(replace(level, level_number=index) for index, level in enumerate(ordered, start=1))


def _first_non_null(merged: TournamentDescriptor, capture: TournamentDescriptor) -> TournamentDescriptor:
    updates = {
        name: getattr(capture, name)
        for name in SCALAR_FIELDS
        if getattr(merged, name) is None and getattr(capture, name) is not None
    }
    return replace(merged, **updates) if updates else merged


def merge_captures(captures: Sequence[TournamentDescriptor]) -> TournamentDescriptor:
    """
    Merge descriptors resolved independently from photographs of one listing.

    Args:
        captures: Descriptors in the order the caller supplied the photographs

    Returns:
        A new descriptor; inputs are left untouched
    """
    if not captures:
        return TournamentDescriptor()
    if len(captures) == 1:
        return captures[0]

    scalars = reduce(_first_non_null, captures, TournamentDescriptor())
    pooled = tuple(level for capture in captures for level in capture.levels)
    levels = deduplicate_and_renumber(pooled)

    logger.info(f"Merged {len(captures)} captures: {len(pooled)} levels pooled, {len(levels)} kept")
    return replace(scalars, levels=levels)
