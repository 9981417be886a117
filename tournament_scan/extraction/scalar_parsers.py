"""
Scalar Parsers - Integer, currency and chip-count parsing

Pure functions shared by the field-map resolvers and the raw-text regex
fallbacks. Every parser returns None instead of raising on bad input.
"""
import re
from typing import List, Optional

NUMBER_TOKEN = re.compile(r"\d[\d,]*")
_CHIP_TOKEN = re.compile(r"\d[\d,]*(?:\.\d+)?\s*[kKmM]?(?![a-zA-Z])")
_SUFFIX_MULTIPLIERS = {'k': 1_000, 'm': 1_000_000}


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse '1,234' as 1234. Grouping commas are stripped."""
    if text is None:
        return None
    cleaned = text.replace(',', '').strip()
    try:
        return int(cleaned)
    except ValueError:
        return None


def parse_currency(text: Optional[str]) -> Optional[int]:
    """
    Parse a dollar amount, ignoring surrounding text.

    '$1,234' -> 1234, 'Total $400 cash' -> 400. An amount wrapped in
    parentheses is negative: '($50)' -> -50.
    """
    if text is None:
        return None
    cleaned = text.replace('$', '').strip()
    match = NUMBER_TOKEN.search(cleaned)
    if not match:
        return None

    value = parse_int(match.group())
    if value is None:
        return None

    before = cleaned[:match.start()].rstrip()
    after = cleaned[match.end():].lstrip()
    if before.endswith('(') and after.startswith(')'):
        return -value
    return value


def parse_chip_value(text: Optional[str]) -> Optional[int]:
    """
    Parse a chip or prize amount with an optional unit suffix.

    '1.5k' -> 1500, '2M' -> 2000000, '500' -> 500. Fractions are truncated.
    """
    if text is None:
        return None
    cleaned = text.lower().replace(',', '').strip()
    if not cleaned:
        return None

    multiplier = _SUFFIX_MULTIPLIERS.get(cleaned[-1])
    if multiplier is not None:
        try:
            return int(float(cleaned[:-1].strip()) * multiplier)
        except ValueError:
            return None
    return parse_int(cleaned)


def find_chip_value(text: Optional[str]) -> Optional[int]:
    """Parse the first number-with-optional-suffix found in free text ('20k chips' -> 20000)."""
    if text is None:
        return None
    match = _CHIP_TOKEN.search(text.replace('$', ''))
    if not match:
        return None
    return parse_chip_value(match.group())


def extract_numbers(text: str) -> List[int]:
    """All integer tokens in reading order; '1,000/2,000 30' -> [1000, 2000, 30]."""
    numbers = []
    for token in NUMBER_TOKEN.findall(text):
        value = parse_int(token)
        if value is not None:
            numbers.append(value)
    return numbers
