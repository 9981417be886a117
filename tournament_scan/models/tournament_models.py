"""
Tournament Models - Data classes for scan inputs and extraction results
"""
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional, Dict, Any, Tuple


@dataclass(frozen=True)
class FragmentBox:
    """Normalized bounding box. Origin is bottom-left: larger y is higher on the page."""
    x: float
    y: float
    w: float
    h: float

    @property
    def mid_x(self) -> float:
        return self.x + self.w / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.h / 2


@dataclass(frozen=True)
class TextFragment:
    """One recognized text fragment as produced by the OCR step."""
    text: str
    box: FragmentBox

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "TextFragment":
        box = d.get('box') or {}
        return TextFragment(
            text=str(d.get('text', '')),
            box=FragmentBox(
                x=float(box.get('x', 0.0)),
                y=float(box.get('y', 0.0)),
                w=float(box.get('w', 0.0)),
                h=float(box.get('h', 0.0)),
            ),
        )


@dataclass(frozen=True)
class Line:
    """A reconstructed reading-order row."""
    text: str
    mid_y: float = 0.0
    fragment_count: int = 1


class GameType(str, Enum):
    """Game variants recognized on tournament listings."""
    NLH = "NLH"
    PLO = "PLO"
    MIXED = "Mixed"

    @property
    def label(self) -> str:
        return {
            GameType.NLH: "No Limit Hold'em",
            GameType.PLO: "Pot Limit Omaha",
            GameType.MIXED: "Mixed Game",
        }[self]


class ReentryPolicy:
    """Normalized re-entry values. Unrecognized text is passed through as-is."""
    NONE = "None"
    ONE = "1 Re-entry"
    TWO = "2 Re-entries"
    UNLIMITED = "Unlimited"


def format_chip_amount(value: int) -> str:
    """Render 1500 as '1.5k' and 2000 as '2k'; smaller values unchanged."""
    if value >= 1000:
        k = value / 1000.0
        if k == int(k):
            return f"{int(k)}k"
        return f"{k:.1f}k"
    return str(value)


@dataclass(frozen=True)
class BlindLevelRecord:
    """One row of a blind structure, either a playing level or a break."""
    level_number: int
    small_blind: int
    big_blind: int
    ante: int = 0
    duration_minutes: int = 30
    is_break: bool = False
    break_label: Optional[str] = None

    @staticmethod
    def make_break(level_number: int, duration_minutes: int, label: Optional[str] = None) -> "BlindLevelRecord":
        return BlindLevelRecord(
            level_number=level_number,
            small_blind=0,
            big_blind=0,
            ante=0,
            duration_minutes=duration_minutes,
            is_break=True,
            break_label=label,
        )

    @property
    def blinds_display(self) -> str:
        if self.is_break:
            return self.break_label or "Break"
        blinds = f"{format_chip_amount(self.small_blind)}/{format_chip_amount(self.big_blind)}"
        if self.ante > 0:
            return f"{blinds} ante {format_chip_amount(self.ante)}"
        return blinds

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TournamentDescriptor:
    """
    Structured result of scanning one or more photographs of a listing.

    Every scalar is optional; a partially filled descriptor is still valid.
    Instances are never mutated - use dataclasses.replace to derive new ones.
    """
    name: Optional[str] = None
    venue: Optional[str] = None
    game_type: Optional[GameType] = None
    buy_in: Optional[int] = None
    entry_fee: Optional[int] = None
    bounty_amount: Optional[int] = None
    guarantee: Optional[int] = None
    starting_chips: Optional[int] = None
    reentry_policy: Optional[str] = None
    starting_small_blind: Optional[int] = None
    starting_big_blind: Optional[int] = None
    levels: Tuple[BlindLevelRecord, ...] = field(default_factory=tuple)

    @property
    def total_buy_in(self) -> Optional[int]:
        if self.buy_in is None and self.entry_fee is None:
            return None
        return (self.buy_in or 0) + (self.entry_fee or 0)

    @property
    def first_playing_level(self) -> Optional[BlindLevelRecord]:
        return next((level for level in self.levels if not level.is_break), None)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'name': self.name,
            'venue': self.venue,
            'game_type': self.game_type.value if self.game_type else None,
            'buy_in': self.buy_in,
            'entry_fee': self.entry_fee,
            'bounty_amount': self.bounty_amount,
            'guarantee': self.guarantee,
            'starting_chips': self.starting_chips,
            'reentry_policy': self.reentry_policy,
            'starting_small_blind': self.starting_small_blind,
            'starting_big_blind': self.starting_big_blind,
            'levels': [level.to_dict() for level in self.levels],
        }


# Scalar fields in descriptor order; used by the merger
SCALAR_FIELDS = (
    'name', 'venue', 'game_type', 'buy_in', 'entry_fee', 'bounty_amount',
    'guarantee', 'starting_chips', 'reentry_policy',
    'starting_small_blind', 'starting_big_blind',
)
