"""
Metadata Resolver - Scalar tournament fields from the field map and raw text

Each field prefers the labeled value from the field map and falls back to a
regex scan of the photograph's full text. Tie-breaks that the listing format
needs (buy-in split, game type) are ordered rule tables: the first rule whose
predicate holds decides the result.
"""
import re
import logging
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from ..models import GameType, Line, ReentryPolicy, TournamentDescriptor
from ..support.chrome_filter import is_chrome
from .field_extractor import FieldMap
from .field_labels import FieldLabel
from .scalar_parsers import find_chip_value, parse_chip_value, parse_currency, parse_int

logger = logging.getLogger(__name__)

MIN_VENUE_LENGTH = 3
MAX_VENUE_LENGTH = 60

# Raw-text fallback patterns
DOLLAR_PLUS_PATTERN = re.compile(r"\$\s*(\d[\d,]*)\s*\+\s*\$\s*(\d[\d,]*)")
BUY_IN_PATTERN = re.compile(r"buy[\s-]?in[:\s]*\$?\s*(\d[\d,]*)", re.IGNORECASE)
STARTING_CHIPS_PATTERN = re.compile(
    r"starting\s+(?:chips|stack)[:\s]*(\d[\d,]*(?:\.\d+)?[kKmM]?)", re.IGNORECASE
)
GUARANTEE_AFTER_PATTERN = re.compile(
    r"\$\s*(\d[\d,]*(?:\.\d+)?[kKmM]?)\s*(?:gtd|guaranteed|guarantee)\b", re.IGNORECASE
)
GUARANTEE_BEFORE_PATTERN = re.compile(
    r"(?:gtd|guaranteed|guarantee)[:\s]*\$?\s*(\d[\d,]*(?:\.\d+)?[kKmM]?)", re.IGNORECASE
)
BOUNTY_AFTER_PATTERN = re.compile(r"\$\s*(\d[\d,]*)\s*bounty\b", re.IGNORECASE)
BOUNTY_BEFORE_PATTERN = re.compile(r"bounty(?:\s+amount)?[:\s]*\$?\s*(\d[\d,]*)", re.IGNORECASE)
BLINDS_PAIR_PATTERN = re.compile(r"(\d[\d,]*)\s*/\s*(\d[\d,]*)")
CITY_STATE_PATTERN = re.compile(r"^[A-Z][a-zA-Z\s]+,\s*[A-Z]{2}$")
AT_VENUE_PATTERN = re.compile(r"(?:^|\s)at\s+(.+)$", re.IGNORECASE)


# =============================================================================
# BUY-IN SPLIT RULES
# =============================================================================

@dataclass(frozen=True)
class BuyInContext:
    total: Optional[int]
    deductions: Optional[int]
    entry_fee: Optional[int]
    text: str


class BuyInRule(NamedTuple):
    name: str
    applies: Callable[[BuyInContext], bool]
    resolve: Callable[[BuyInContext], Tuple[Optional[int], Optional[int]]]


def _strictly_inside(part: Optional[int], total: Optional[int]) -> bool:
    return part is not None and total is not None and 0 < part < total


def _dollar_plus(ctx: BuyInContext) -> Tuple[Optional[int], Optional[int]]:
    match = DOLLAR_PLUS_PATTERN.search(ctx.text)
    return parse_int(match.group(1)), parse_int(match.group(2))


def _bare_buy_in(ctx: BuyInContext) -> Tuple[Optional[int], Optional[int]]:
    match = BUY_IN_PATTERN.search(ctx.text)
    return parse_int(match.group(1)), None


BUY_IN_RULES: Tuple[BuyInRule, ...] = (
    # Deductions are the rake: the rest of the total goes to the prize pool
    BuyInRule(
        'total_minus_deductions',
        lambda ctx: _strictly_inside(ctx.deductions, ctx.total),
        lambda ctx: (ctx.total - ctx.deductions, ctx.deductions),
    ),
    BuyInRule(
        'total_with_entry_fee',
        lambda ctx: _strictly_inside(ctx.entry_fee, ctx.total),
        lambda ctx: (ctx.entry_fee, ctx.total - ctx.entry_fee),
    ),
    BuyInRule(
        'total_only',
        lambda ctx: ctx.total is not None,
        lambda ctx: (ctx.total, None),
    ),
    BuyInRule(
        'dollar_plus_text',
        lambda ctx: DOLLAR_PLUS_PATTERN.search(ctx.text) is not None,
        _dollar_plus,
    ),
    BuyInRule(
        'buy_in_text',
        lambda ctx: BUY_IN_PATTERN.search(ctx.text) is not None,
        _bare_buy_in,
    ),
)


def resolve_buy_in(fields: FieldMap, text: str) -> Tuple[Optional[int], Optional[int]]:
    """Return (buy_in, entry_fee) using the first applicable split rule."""
    ctx = BuyInContext(
        total=parse_currency(fields.get(FieldLabel.TOTAL_BUY_IN)),
        deductions=parse_currency(fields.get(FieldLabel.DEDUCTIONS)),
        entry_fee=parse_currency(fields.get(FieldLabel.ENTRY_FEE)),
        text=text,
    )
    for rule in BUY_IN_RULES:
        if rule.applies(ctx):
            logger.debug(f"Buy-in resolved by rule '{rule.name}'")
            return rule.resolve(ctx)
    return None, None


# =============================================================================
# GAME TYPE RULES
# =============================================================================

class GameTypeRule(NamedTuple):
    game_type: GameType
    keywords: Tuple[str, ...]

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


GAME_TYPE_RULES: Tuple[GameTypeRule, ...] = (
    GameTypeRule(GameType.PLO, ("pl omaha", "plo", "pot limit omaha", "pot-limit omaha")),
    GameTypeRule(GameType.NLH, ("nlh", "no limit hold", "no-limit hold", "nl hold", "nl texas")),
    GameTypeRule(GameType.MIXED, ("mixed",)),
)

# Looser pass over the full text when a game type field exists but names no known variant
LOOSE_GAME_TYPE_RULES: Tuple[GameTypeRule, ...] = (
    GameTypeRule(GameType.PLO, ("plo", "pl omaha", "omaha")),
    GameTypeRule(GameType.NLH, ("nlh", "hold")),
)


def _first_match(rules: Sequence[GameTypeRule], text: str) -> Optional[GameType]:
    for rule in rules:
        if rule.matches(text):
            return rule.game_type
    return None


def classify_game_type(field_value: Optional[str], full_text: str) -> Optional[GameType]:
    field_text = (field_value or "").lower()
    lower = full_text.lower()

    game_type = _first_match(GAME_TYPE_RULES, field_text or lower)
    if game_type is None and field_text:
        game_type = _first_match(LOOSE_GAME_TYPE_RULES, lower)
    return game_type


# =============================================================================
# SINGLE-FIELD RESOLVERS
# =============================================================================

def normalize_reentry(raw: Optional[str]) -> Optional[str]:
    """Map a raw re-entry value onto the closed policy set, passing unknown text through."""
    if raw is None:
        return None
    lower = raw.strip().lower()

    if "unlim" in lower:
        return ReentryPolicy.UNLIMITED
    if "none" in lower or lower in ("0", "no"):
        return ReentryPolicy.NONE
    if "2" in lower:
        return ReentryPolicy.TWO
    if "1" in lower:
        return ReentryPolicy.ONE
    return raw


def resolve_starting_chips(fields: FieldMap, text: str) -> Optional[int]:
    chips = find_chip_value(fields.get(FieldLabel.STARTING_CHIPS))
    if chips is not None:
        return chips
    match = STARTING_CHIPS_PATTERN.search(text)
    return parse_chip_value(match.group(1)) if match else None


def resolve_guarantee(fields: FieldMap, text: str) -> Optional[int]:
    guarantee = find_chip_value(fields.get(FieldLabel.GUARANTEE))
    if guarantee is not None:
        return guarantee
    for pattern in (GUARANTEE_AFTER_PATTERN, GUARANTEE_BEFORE_PATTERN):
        match = pattern.search(text)
        if match:
            return parse_chip_value(match.group(1))
    return None


def resolve_bounty(fields: FieldMap, text: str) -> Optional[int]:
    bounty = parse_currency(fields.get(FieldLabel.BOUNTY_AMOUNT))
    if bounty is not None:
        return bounty
    for pattern in (BOUNTY_AFTER_PATTERN, BOUNTY_BEFORE_PATTERN):
        match = pattern.search(text)
        if match:
            return parse_currency(match.group(1))
    return None


def resolve_starting_blinds(fields: FieldMap) -> Tuple[Optional[int], Optional[int]]:
    """Parse a 'Starting Blinds 100/200' field."""
    value = fields.get(FieldLabel.STARTING_BLINDS)
    if not value:
        return None, None
    match = BLINDS_PAIR_PATTERN.search(value)
    if not match:
        return None, None
    return parse_int(match.group(1)), parse_int(match.group(2))


def resolve_name(texts: List[str], fields: FieldMap, min_length: int = 5) -> Optional[str]:
    event_name = fields.get(FieldLabel.EVENT_NAME)
    if event_name and len(event_name) >= min_length:
        return event_name

    # First substantial non-chrome line
    for text in texts:
        if len(text) >= min_length and not is_chrome(text):
            return text
    return None


def _plausible_venue(text: str) -> bool:
    return MIN_VENUE_LENGTH <= len(text) <= MAX_VENUE_LENGTH


def resolve_venue(texts: List[str]) -> Optional[str]:
    # Venue name is typically the line above its "City, ST" line
    for current, following in zip(texts, texts[1:]):
        if CITY_STATE_PATTERN.match(following) and _plausible_venue(current) and not is_chrome(current):
            return current

    for text in texts:
        match = AT_VENUE_PATTERN.search(text)
        if match:
            venue = match.group(1).strip()
            if _plausible_venue(venue):
                return venue
    return None


# =============================================================================
# RESOLVER
# =============================================================================

class MetadataResolver:
    """Resolves every scalar descriptor field for one photograph."""

    def __init__(self, min_name_length: int = 5):
        self.min_name_length = min_name_length

    def resolve(self, lines: Sequence[Line], fields: FieldMap) -> TournamentDescriptor:
        """
        Build a descriptor with scalar metadata only (no levels).

        Args:
            lines: Reconstructed lines of the photograph
            fields: Field map extracted from the same lines

        Returns:
            TournamentDescriptor with resolved scalar fields
        """
        texts = [line.text.strip() for line in lines]
        joined = "\n".join(texts)

        buy_in, entry_fee = resolve_buy_in(fields, joined)
        small_blind, big_blind = resolve_starting_blinds(fields)

        descriptor = TournamentDescriptor(
            name=resolve_name(texts, fields, self.min_name_length),
            venue=resolve_venue(texts),
            game_type=classify_game_type(fields.get(FieldLabel.GAME_TYPE), joined),
            buy_in=buy_in,
            entry_fee=entry_fee,
            bounty_amount=resolve_bounty(fields, joined),
            guarantee=resolve_guarantee(fields, joined),
            starting_chips=resolve_starting_chips(fields, joined),
            reentry_policy=normalize_reentry(fields.get(FieldLabel.RE_ENTRY)),
            starting_small_blind=small_blind,
            starting_big_blind=big_blind,
        )
        logger.debug(f"Resolved metadata: {descriptor.to_dict()}")
        return descriptor
