"""Cleanup and validation of raw candidates before they are counted."""

import re

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100

_TRAILING_PUNCTUATION = "。、.,，．"
# Header words that survive extraction, e.g. "・SETLIST" or "- Venue: ...".
_DENYLIST = re.compile(
    r"^(?:set\s*list|セットリスト|セトリ|曲目|venue|会場|ticket|チケット)",
    re.IGNORECASE,
)


def strip_trailing(raw: str) -> str:
    """Remove trailing whitespace (full-width included) and periods or commas."""
    cleaned = raw
    while True:
        # str.rstrip only walks the tail, so this stays linear in len(raw)
        trimmed = cleaned.rstrip().rstrip(_TRAILING_PUNCTUATION)
        if trimmed == cleaned:
            return cleaned
        cleaned = trimmed


def sanitize(raw: str) -> str | None:
    """
    Trim a raw candidate and decide whether it is a plausible song name.

    Args:
        raw: The remainder captured by an extraction rule.

    Returns:
        The trimmed candidate, or None if it is too short, too long, or a
        header word.
    """
    cleaned = strip_trailing(raw)
    if not MIN_NAME_LENGTH <= len(cleaned) <= MAX_NAME_LENGTH:
        return None
    if _DENYLIST.match(cleaned):
        return None
    return cleaned
