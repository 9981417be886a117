#!/usr/bin/env python3
"""
Group OCR fragments into rows in proper reading order (top-to-bottom, left-to-right).

Fragment boxes are normalized with a bottom-left origin, so the top of the page
has the largest y. Table rows photographed from a listing screen come back from
the recognizer as one fragment per cell; grouping by vertical center rebuilds
each row without assuming any column grid.
"""

import logging
from functools import reduce
from typing import Iterable, List, NamedTuple, Optional, Tuple

from ..models import Line, TextFragment

logger = logging.getLogger(__name__)

DEFAULT_ROW_TOLERANCE = 0.01


class _RowState(NamedTuple):
    """Fold accumulator: closed rows plus the open row and its running average center."""
    closed: Tuple[Tuple[TextFragment, ...], ...]
    current: Tuple[TextFragment, ...]
    average_y: float


def _close_row(row: Tuple[TextFragment, ...]) -> Line:
    ordered = sorted(row, key=lambda fragment: fragment.box.x)
    return Line(
        text=" ".join(fragment.text.strip() for fragment in ordered),
        mid_y=sum(fragment.box.mid_y for fragment in row) / len(row),
        fragment_count=len(row),
    )


def _make_step(tolerance: float):
    def step(state: _RowState, fragment: TextFragment) -> _RowState:
        mid_y = fragment.box.mid_y
        if not state.current:
            return _RowState(state.closed, (fragment,), mid_y)

        if abs(mid_y - state.average_y) < tolerance:
            row = state.current + (fragment,)
            average_y = sum(f.box.mid_y for f in row) / len(row)
            return _RowState(state.closed, row, average_y)

        return _RowState(state.closed + (state.current,), (fragment,), mid_y)

    return step


def group_into_rows(fragments: Iterable[TextFragment],
                    tolerance: float = DEFAULT_ROW_TOLERANCE) -> List[Tuple[TextFragment, ...]]:
    """
    Group fragments into rows by vertical-center proximity.

    Args:
        fragments: Unordered fragments for one photograph
        tolerance: Maximum distance from the row's running average center (page fraction)

    Returns:
        Rows top-to-bottom, each row in left-to-right order
    """
    usable = [fragment for fragment in fragments if fragment.text.strip()]
    if not usable:
        return []

    ordered = sorted(usable, key=lambda fragment: fragment.box.mid_y, reverse=True)
    final = reduce(_make_step(tolerance), ordered, _RowState((), (), 0.0))
    rows = final.closed + ((final.current,) if final.current else ())

    return [tuple(sorted(row, key=lambda fragment: fragment.box.x)) for row in rows]


def reconstruct_lines(fragments: Iterable[TextFragment],
                      tolerance: Optional[float] = None,
                      debug: bool = False) -> List[Line]:
    """
    Rebuild reading-order lines from a photograph's fragments.

    Args:
        fragments: Unordered fragments for one photograph
        tolerance: Row grouping tolerance; defaults to 1% of page height
        debug: Log every reconstructed line

    Returns:
        Lines ordered top-to-bottom
    """
    rows = group_into_rows(fragments, DEFAULT_ROW_TOLERANCE if tolerance is None else tolerance)
    lines = [_close_row(row) for row in rows]

    if debug:
        logger.debug(f"Grouped into {len(lines)} lines")
        for i, line in enumerate(lines):
            logger.debug(f"Line {i + 1}: {line.text}")

    return lines
