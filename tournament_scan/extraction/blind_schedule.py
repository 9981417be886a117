"""
Blind Schedule Interpreter - Blind levels and breaks from reconstructed rows

Two table layouts are recognized:
- FIXED_COLUMN: the listing's structure table with a "Name / Length / SB / BB"
  header, columns [Level?, Duration, SB, BB, Ante?]
- GENERIC: any other numeric rows, columns [Level?, SB, BB, Ante?, Duration?]

Rows that cannot be read as a sane level are skipped, never raised.
"""
import re
import logging
from enum import Enum
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from ..models import BlindLevelRecord, Line
from ..support.chrome_filter import is_chrome, is_section_header
from .scalar_parsers import extract_numbers

logger = logging.getLogger(__name__)

BREAK_KEYWORD = "break"
LEVEL_KEYWORD = "level"
DEFAULT_BREAK_LABEL = "Break"

MAX_LEVEL_NUMBER = 50
MAX_IMPLICIT_LEVEL_NUMBER = 30
MAX_BREAK_MINUTES = 60
MIN_GENERIC_DURATION = 5
MAX_GENERIC_DURATION = 60
MIN_ROW_NUMBERS = 3

_TRAILING_NUMBER = re.compile(r"\s*\d+\s*$")


class ScheduleFormat(str, Enum):
    FIXED_COLUMN = "fixed_column"
    GENERIC = "generic"


def _mentions_blinds(lower: str) -> bool:
    return ("sb" in lower or "small" in lower) and ("bb" in lower or "big" in lower)


def is_format_header(text: str) -> bool:
    """The structure table header: Name, Length, SB and BB columns."""
    lower = text.lower()
    return "name" in lower and "length" in lower and _mentions_blinds(lower)


def is_header_row(text: str) -> bool:
    lower = text.lower()
    return "name" in lower and _mentions_blinds(lower)


def detect_format(texts: Sequence[str]) -> ScheduleFormat:
    if any(is_format_header(text) for text in texts):
        return ScheduleFormat.FIXED_COLUMN
    return ScheduleFormat.GENERIC


def extract_break_label(text: str) -> str:
    """Line text without its trailing duration token."""
    label = _TRAILING_NUMBER.sub("", text.strip()).strip()
    return label or DEFAULT_BREAK_LABEL


class _ScheduleState(NamedTuple):
    levels: Tuple[BlindLevelRecord, ...]
    next_level: int
    past_header: bool

    def accept(self, level: BlindLevelRecord) -> "_ScheduleState":
        return _ScheduleState(self.levels + (level,), self.next_level + 1, self.past_header)


class BlindScheduleInterpreter:
    """Converts numeric-token rows into an ordered list of level/break records."""

    def __init__(self,
                 default_break_minutes: int = 15,
                 default_level_minutes: int = 30,
                 max_level_minutes: int = 120):
        self.default_break_minutes = default_break_minutes
        self.default_level_minutes = default_level_minutes
        self.max_level_minutes = max_level_minutes

        # Ordered row rules: the first predicate that holds handles the row
        self.row_rules: List[Tuple[Callable[[str, str], bool], Callable]] = [
            (lambda text, lower: is_header_row(text), self._handle_header),
            (lambda text, lower: is_chrome(text) or is_section_header(text), self._handle_skip),
            (lambda text, lower: BREAK_KEYWORD in lower, self._handle_break),
            (lambda text, lower: lower.startswith(LEVEL_KEYWORD), self._handle_numbered),
            (lambda text, lower: True, self._handle_generic),
        ]

    def interpret(self, lines: Sequence[Line]) -> Tuple[BlindLevelRecord, ...]:
        """
        Interpret a photograph's lines as a blind schedule.

        Args:
            lines: Reconstructed lines, top-to-bottom

        Returns:
            Ordered level and break records
        """
        texts = [line.text.strip() for line in lines]
        schedule_format = detect_format(texts)
        logger.debug(f"Blind schedule format: {schedule_format.value}")

        state = _ScheduleState(levels=(), next_level=1, past_header=False)
        for text in texts:
            if not text:
                continue
            lower = text.lower()
            for applies, handle in self.row_rules:
                if applies(text, lower):
                    state = handle(state, text, schedule_format)
                    break

        return state.levels

    # ------------------------------------------------------------------
    # Row handlers
    # ------------------------------------------------------------------

    def _handle_header(self, state: _ScheduleState, text: str, schedule_format: ScheduleFormat) -> _ScheduleState:
        return _ScheduleState(state.levels, state.next_level, True)

    def _handle_skip(self, state: _ScheduleState, text: str, schedule_format: ScheduleFormat) -> _ScheduleState:
        return state

    def _handle_break(self, state: _ScheduleState, text: str, schedule_format: ScheduleFormat) -> _ScheduleState:
        numbers = extract_numbers(text)
        duration = self.default_break_minutes
        if numbers and 1 <= numbers[-1] <= MAX_BREAK_MINUTES:
            duration = numbers[-1]
        return state.accept(BlindLevelRecord.make_break(state.next_level, duration, extract_break_label(text)))

    def _handle_numbered(self, state: _ScheduleState, text: str, schedule_format: ScheduleFormat) -> _ScheduleState:
        numbers = extract_numbers(text)
        if len(numbers) < MIN_ROW_NUMBERS:
            return state
        return self._accept_or_skip(state, text, self.interpret_fixed_row(numbers, state.next_level))

    def _handle_generic(self, state: _ScheduleState, text: str, schedule_format: ScheduleFormat) -> _ScheduleState:
        fixed = schedule_format is ScheduleFormat.FIXED_COLUMN
        if not (state.past_header or fixed):
            return state

        numbers = extract_numbers(text)
        if len(numbers) < MIN_ROW_NUMBERS:
            return state

        if fixed:
            level = self.interpret_fixed_row(numbers, state.next_level)
        else:
            level = self.interpret_generic_row(numbers, state.next_level)
        return self._accept_or_skip(state, text, level)

    @staticmethod
    def _accept_or_skip(state: _ScheduleState, text: str, level: Optional[BlindLevelRecord]) -> _ScheduleState:
        if level is None:
            logger.debug(f"Skipping implausible blind row: '{text}'")
            return state
        return state.accept(level)

    # ------------------------------------------------------------------
    # Column interpretation
    # ------------------------------------------------------------------

    def interpret_fixed_row(self, numbers: Sequence[int], expected_level: int) -> Optional[BlindLevelRecord]:
        """Column order [LevelNumber?, Duration, SB, BB, Ante?]."""
        if len(numbers) < MIN_ROW_NUMBERS:
            return None

        idx = 0
        level_number = expected_level
        first = numbers[0]
        if first <= MAX_LEVEL_NUMBER and (first == expected_level or first <= MAX_IMPLICIT_LEVEL_NUMBER):
            level_number = first
            idx = 1

        remaining = list(numbers[idx:])
        if len(remaining) < 3:
            return None

        duration, small_blind, big_blind = remaining[0], remaining[1], remaining[2]
        ante = remaining[3] if len(remaining) >= 4 else 0

        if small_blind <= 0 or big_blind < small_blind:
            return None
        if not 1 <= duration <= self.max_level_minutes:
            return None

        return BlindLevelRecord(
            level_number=level_number,
            small_blind=small_blind,
            big_blind=big_blind,
            ante=ante,
            duration_minutes=duration,
        )

    def interpret_generic_row(self, numbers: Sequence[int], expected_level: int) -> Optional[BlindLevelRecord]:
        """Column order [LevelNumber?, SB, BB, Ante?, Duration?]."""
        idx = 0
        level_number = expected_level
        if len(numbers) >= MIN_ROW_NUMBERS and numbers[0] == expected_level and numbers[0] <= MAX_LEVEL_NUMBER:
            level_number = numbers[0]
            idx = 1

        remaining = list(numbers[idx:])
        if len(remaining) < 2:
            return None

        small_blind, big_blind = remaining[0], remaining[1]
        if small_blind <= 0 or big_blind < small_blind:
            return None

        ante = 0
        duration = self.default_level_minutes
        if len(remaining) == 4:
            ante, duration = remaining[2], remaining[3]
        elif len(remaining) == 3:
            third = remaining[2]
            if MIN_GENERIC_DURATION <= third <= MAX_GENERIC_DURATION and third < small_blind:
                duration = third
            else:
                ante = third

        if not 1 <= duration <= self.max_level_minutes:
            duration = self.default_level_minutes

        return BlindLevelRecord(
            level_number=level_number,
            small_blind=small_blind,
            big_blind=big_blind,
            ante=ante,
            duration_minutes=duration,
        )
