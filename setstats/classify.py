"""Line classification: decide which OCR lines are structural noise."""

import re

MIN_LINE_LENGTH = 2

# 2021/12/01, 2021-12-01, 2021年12月1日
_DATE = re.compile(r"\d{4}\s*[/\-年]\s*\d{1,2}\s*[/\-月]\s*\d{1,2}")
# 土曜日, (土曜), 日曜...
_WEEKDAY = re.compile(r"^[(（]?[月火水木金土日]曜")
_TIME = re.compile(r"^\d{1,2}\s*[:：]\s*\d{2}")
_SCHEDULE_MARKER = re.compile(r"^(?:OPEN|START|DOOR|開場|開演|終演)(?![A-Za-z])")

NOISE_PATTERNS: tuple[re.Pattern[str], ...] = (_DATE, _WEEKDAY, _TIME, _SCHEDULE_MARKER)


def is_noise(line: str) -> bool:
    """
    Return True if a line carries event metadata rather than an item name.

    Dates, weekdays, times, door/start announcements and lines containing an
    ``@`` (handles, addresses) are noise, as is anything shorter than two
    characters once trimmed.

    Args:
        line: A single line of OCR text.

    Returns:
        True if the line should be dropped before extraction.
    """
    stripped = line.strip()
    if len(stripped) < MIN_LINE_LENGTH:
        return True
    if "@" in stripped or "＠" in stripped:
        return True
    return any(pattern.search(stripped) for pattern in NOISE_PATTERNS)
