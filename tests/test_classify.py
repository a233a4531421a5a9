"""Tests for the setstats.classify module."""

import pytest

from setstats.classify import is_noise


@pytest.mark.parametrize("line", ["", " ", "a", "　", " x ", "\t"])
def test_short_lines_are_noise(line: str) -> None:
    """Test that anything under two characters after trimming is noise."""
    assert is_noise(line)


@pytest.mark.parametrize(
    "line",
    [
        "2021-12-01",
        "2021/12/01",
        "2021年12月1日",
        "2021/12/01 (水) 渋谷クアトロ",
        "Tour Final 2023-04-15",
    ],
)
def test_dates_are_noise(line: str) -> None:
    assert is_noise(line)


@pytest.mark.parametrize("line", ["土曜日", "（日曜）", "水曜日 ライブ"])
def test_weekdays_are_noise(line: str) -> None:
    assert is_noise(line)


@pytest.mark.parametrize("line", ["18:00", "18:30 OPEN", "9:05-", "19：00"])
def test_times_are_noise(line: str) -> None:
    assert is_noise(line)


@pytest.mark.parametrize(
    "line",
    ["OPEN 18:00 / START 18:30", "START 19:00", "開場 17:30", "開演18:00", "DOOR 18:00"],
)
def test_schedule_markers_are_noise(line: str) -> None:
    assert is_noise(line)


@pytest.mark.parametrize("line", ["@band_official", "info@example.com", "follow ＠band"])
def test_at_sign_is_noise(line: str) -> None:
    assert is_noise(line)


@pytest.mark.parametrize(
    "line",
    [
        "1. Opener",
        "M3 Song B",
        "・夜に駆ける",
        "EN: Finale",
        "Open Arms",
        "Starlight",
        "02 Second Song",
    ],
)
def test_song_lines_are_not_noise(line: str) -> None:
    """Test that lines naming songs pass through, including titles that start like markers."""
    assert not is_noise(line)
