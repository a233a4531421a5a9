"""Tests for the setstats.rules module."""

import re

import pytest

from setstats.rules import RULES, ExtractionRule, extract


def rule(name: str) -> ExtractionRule:
    """Helper to look up a rule by name."""
    return next(r for r in RULES if r.name == name)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1. Song A", "Song A"),
        ("M3 Song B", "Song B"),
        ("・Song C", "Song C"),
        ("EN: Song D", "Song D"),
    ],
)
def test_extract_examples(line: str, expected: str) -> None:
    assert extract(line) == expected


def test_numbered_rule_takes_precedence_over_bare_number() -> None:
    """Test that a line matching both numbered rules keeps everything after '1.'."""
    assert extract("1. 2 Song") == "2 Song"
    assert rule("bare_number").match("1. 2 Song") is None
    assert rule("numbered").match("1. 2 Song") == "2 Song"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1.Song", "Song"),
        ("12) Song Title", "Song Title"),
        ("3．夜に駆ける", "夜に駆ける"),
        ("  4.  Indented", "Indented"),
    ],
)
def test_numbered_rule(line: str, expected: str) -> None:
    assert rule("numbered").match(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("01 Opener", "Opener"),
        ("7   Lucky Seven", "Lucky Seven"),
    ],
)
def test_bare_number_rule(line: str, expected: str) -> None:
    assert rule("bare_number").match(line) == expected


def test_bare_number_requires_two_characters() -> None:
    """Test that a lone number followed by one character is not an item."""
    assert rule("bare_number").match("5 A") is None
    assert extract("5 A") is None


def test_bare_number_requires_whitespace() -> None:
    assert rule("bare_number").match("2021") is None


@pytest.mark.parametrize(
    "line, expected",
    [
        ("EN: Finale", "Finale"),
        ("en Finale", "Finale"),
        ("Encore: Last Song", "Last Song"),
        ("ENCORE Last Song", "Last Song"),
        ("EN2: Double Encore", "Double Encore"),
        ("アンコール：さよなら", "さよなら"),
        ("アンコール　さよなら", "さよなら"),
    ],
)
def test_encore_rule(line: str, expected: str) -> None:
    assert rule("encore").match(line) == expected


def test_encore_rule_needs_separator() -> None:
    """Test that words merely starting with 'en' are not encore markers."""
    assert rule("encore").match("Endless Rain") is None
    assert rule("encore").match("Encores") is None


@pytest.mark.parametrize(
    "line, expected",
    [
        ("・Song", "Song"),
        ("● Song", "Song"),
        ("★新曲", "新曲"),
        ("- Dash Song", "Dash Song"),
        ("* Star Song", "Star Song"),
    ],
)
def test_bullet_rule(line: str, expected: str) -> None:
    assert rule("bullet").match(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("M1 Intro Song", "Intro Song"),
        ("M01. Zero Padded", "Zero Padded"),
        ("M12: Twelve", "Twelve"),
        ("M3)Tight", "Tight"),
    ],
)
def test_track_marker_rule(line: str, expected: str) -> None:
    assert rule("track_marker").match(line) == expected


def test_track_marker_needs_digits() -> None:
    assert rule("track_marker").match("Mr. Blue Sky") is None
    assert extract("Mr. Blue Sky") is None


@pytest.mark.parametrize(
    "line, expected",
    [
        ("[SE] Overture", "Overture"),
        ("(intro) Opening", "Opening"),
        ("（新曲）タイトル", "タイトル"),
        ("【MC】Talk Song", "Talk Song"),
    ],
)
def test_bracketed_rule(line: str, expected: str) -> None:
    assert rule("bracketed").match(line) == expected


@pytest.mark.parametrize("line", ["Just some text", "MC", "Thank you!", ""])
def test_no_rule_matches_plain_lines(line: str) -> None:
    assert extract(line) is None


def test_rule_order() -> None:
    """Test that the rules are tried in their documented precedence."""
    assert [r.name for r in RULES] == [
        "numbered",
        "bare_number",
        "encore",
        "bullet",
        "track_marker",
        "bracketed",
    ]


def test_extract_with_custom_rules() -> None:
    """Test that a custom rule set replaces the default one."""
    rules = (ExtractionRule(name="arrow", pattern=re.compile(r"^>\s*(.+)$")),)
    assert extract("> Custom", rules) == "Custom"
    assert extract("1. Song", rules) is None
