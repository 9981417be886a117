"""
Chrome Filter - Detects screen boilerplate that is not listing content

Photographs of a listing app pick up navigation buttons, the phone's status
bar clock and section headings. These lines must never be taken as a
tournament name, a field label or a blind row.
"""
import re

# Known chrome / UI elements
CHROME_KEYWORDS = (
    "back", "home", "search", "menu", "share", "settings",
    "notifications", "poker atlas", "pokeratlas", "http", "www",
    "cancel", "close", "done", "register", "note from",
)

# Section headings of the listing format
SECTION_HEADERS = (
    "tournament info", "buy-in details", "format", "size",
    "structure", "registration",
)

# Status bar time patterns: "3:30", "3:30 4", "12:45 PM"
_STATUS_TIME = re.compile(r"^\d{1,2}:\d{2}\b")

MAX_CHROME_LENGTH = 3


def is_boilerplate(text: str) -> bool:
    """Denylist check only: status bar clock, date banner or a known UI keyword."""
    lower = text.strip().lower()

    if _STATUS_TIME.match(lower):
        return True

    # Date banners: "Today - Thursday, ..."
    if lower.startswith("today"):
        return True

    for keyword in CHROME_KEYWORDS:
        if lower == keyword or lower.startswith(keyword + " "):
            return True

    return False


def is_chrome(text: str) -> bool:
    """True when a line is UI chrome: very short, or a denylisted fragment."""
    lower = text.strip().lower()
    if len(lower) <= MAX_CHROME_LENGTH:
        return True
    return is_boilerplate(lower)


def is_section_header(text: str) -> bool:
    """True for the listing format's section headings."""
    return text.strip().lower() in SECTION_HEADERS
