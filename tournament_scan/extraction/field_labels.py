"""
Field Labels - Closed vocabulary of listing labels

Member order is the prefix-match order used by the field extractor: the
first label that prefixes a line claims it.
"""
from enum import Enum
from typing import Optional

from ..support.text_cleaner import normalize_for_matching


class FieldLabel(str, Enum):
    TOTAL_BUY_IN = "total buy-in"
    ENTRY_FEE = "entry fee"
    DEDUCTIONS = "deductions"
    STARTING_CHIPS = "starting chips"
    STARTING_BLINDS = "starting blinds"
    RE_ENTRY = "re-entry"
    REBUYS = "rebuys"
    ADDONS = "addons"
    BOUNTIES = "bounties"
    BOUNTY_AMOUNT = "bounty amount"
    GUARANTEE = "guarantee"
    LEVEL_TIME = "level time"
    GAME_TYPE = "game type"
    EVENT_NAME = "event name"
    EVENT_TYPE = "event type"
    EVENT_NUMBER = "event number"
    START_TIME = "start time"
    EVENT_START_DATE = "event start date"
    LENGTH_OF_EVENT = "length of event"
    REGISTRATION_OPENS = "registration opens"
    REGISTRATION_CLOSES = "registration closes"


def normalize_label(text: str) -> str:
    """Normalized form of a candidate label line: dashes unified, lower-cased, colons stripped."""
    return normalize_for_matching(text).strip(':').strip()


def label_for(text: str) -> Optional[FieldLabel]:
    """The label a line consists of exactly, or None."""
    normalized = normalize_label(text)
    for label in FieldLabel:
        if normalized == label.value:
            return label
    return None


def starts_with_label(text: str) -> Optional[FieldLabel]:
    """The first label (in declaration order) that prefixes the line, or None."""
    normalized = normalize_for_matching(text)
    for label in FieldLabel:
        if normalized.startswith(label.value):
            return label
    return None
