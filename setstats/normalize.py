"""Canonical form for song names so that equivalent spellings count together."""

import re

FULL_WIDTH_SPACE = "　"


def normalize(name: str) -> str:
    """
    Fold full-width spaces, collapse whitespace and trim.

    Case and punctuation are preserved. Applying this to its own output returns
    it unchanged.
    """
    normalized = name.replace(FULL_WIDTH_SPACE, " ")
    normalized = re.sub(r"\s+", " ", normalized).strip()
    return normalized
