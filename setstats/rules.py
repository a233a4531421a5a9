"""Ordered pattern rules that pull a candidate song name out of a setlist line."""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionRule:
    """A named pattern plus the capture group holding the song name."""

    name: str
    pattern: re.Pattern[str]
    group: int = 1

    def match(self, line: str) -> str | None:
        """Return the captured remainder if the rule applies to the line."""
        found = self.pattern.match(line)
        if found is None:
            return None
        return found.group(self.group)


def _rule(name: str, pattern: str, flags: int = 0, group: int = 1) -> ExtractionRule:
    return ExtractionRule(name=name, pattern=re.compile(pattern, flags), group=group)


# Precedence is list order: the first matching rule wins.
RULES: tuple[ExtractionRule, ...] = (
    # "1. Song", "12) Song", "3．Song"
    _rule("numbered", r"^\s*\d+\s*[.)．）]\s*(.+)$"),
    # "01 Song", "7  Song"
    _rule("bare_number", r"^\s*\d+\s+(.{2,})$"),
    # "EN: Song", "Encore Song", "EN2 Song", "アンコール：Song"
    _rule(
        "encore",
        r"^\s*(?:encore|en|アンコール)\d*(?:\s*[:：]\s*|\s+)(.+)$",
        flags=re.IGNORECASE,
    ),
    # "・Song", "● Song", "- Song"
    _rule("bullet", r"^\s*[・･●○◆◇■□★☆▶▷►•\-*]\s*(.+)$"),
    # "M3 Song", "M01. Song"
    _rule("track_marker", r"^\s*M\d+(?:\s*[.:：)\-]\s*|\s+)(.+)$"),
    # "[SE] Song", "(intro) Song", "【新曲】Song"
    _rule(
        "bracketed",
        r"^\s*(?:\[[^\]]*\]|\([^)]*\)|（[^）]*）|【[^】]*】|「[^」]*」)\s*(.+)$",
    ),
)


def extract(line: str, rules: tuple[ExtractionRule, ...] = RULES) -> str | None:
    """
    Extract a raw candidate name from a single line.

    Rules are tried in order and the first match wins; later rules are never
    consulted once one has matched.

    Args:
        line: A line that has already passed noise classification.
        rules: The ordered rule set to apply.

    Returns:
        The captured remainder of the line, or None if no rule matched.
    """
    for rule in rules:
        captured = rule.match(line)
        if captured is not None:
            logger.debug("Rule %s matched %r", rule.name, line)
            return captured
    return None
