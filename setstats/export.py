"""Writing a StatisticsReport out as CSV, JSON and a plain-text summary."""

import csv
from pathlib import Path
from typing import Sequence

from setstats.aggregate import SongStatistic, StatisticsReport
from setstats.config import ExportFormat

CSV_COLUMNS = ["rank", "name", "count", "percentage"]

OUTPUT_NAMES: dict[str, str] = {
    "csv": "songs.csv",
    "json": "songs.json",
    "text": "summary.txt",
}


def top(report: StatisticsReport, n: int) -> list[SongStatistic]:
    """The n highest-ranked songs."""
    return list(report.ranked_results[:n])


def above_threshold(report: StatisticsReport, threshold: float) -> list[SongStatistic]:
    """Songs whose percentage is at or above threshold, in rank order."""
    return [stat for stat in report.ranked_results if stat.percentage >= threshold]


def write_csv(report: StatisticsReport, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)
        for stat in report.ranked_results:
            writer.writerow([stat.rank, stat.name, stat.count, f"{stat.percentage:.1f}"])
    return path


def write_json(report: StatisticsReport, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    # model_dump_json keeps non-ASCII as-is, so Japanese titles stay readable
    path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
    return path


def _format_row(stat: SongStatistic) -> str:
    return f"{stat.rank:>3}. {stat.name} ({stat.count} times, {stat.percentage:.1f}%)"


def render_summary(report: StatisticsReport, top_n: int = 10, threshold: float = 50.0) -> str:
    """
    Plain-text narrative of a report.

    Args:
        report: The report to describe.
        top_n: How many of the highest-ranked songs to list.
        threshold: Percentage of documents a song must reach to be listed as
            recurring.

    Returns:
        The summary text, newline-terminated.
    """
    lines = [
        "Setlist statistics",
        f"Documents analyzed: {report.total_documents}",
        f"Unique songs: {report.total_unique_names}",
        f"Total occurrences: {report.total_occurrences}",
        "",
    ]

    if not report.ranked_results:
        lines.append("No songs found.")
        return "\n".join(lines) + "\n"

    lines.append(f"Top {top_n}:")
    lines.extend(_format_row(stat) for stat in top(report, top_n))
    lines.append("")

    recurring = above_threshold(report, threshold)
    lines.append(f"Songs in at least {threshold:g}% of documents:")
    if recurring:
        lines.extend(_format_row(stat) for stat in recurring)
    else:
        lines.append("  (none)")
    return "\n".join(lines) + "\n"


def write_summary(
    report: StatisticsReport, path: Path, top_n: int = 10, threshold: float = 50.0
) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_summary(report, top_n, threshold), encoding="utf-8")
    return path


def export_report(
    report: StatisticsReport,
    output_dir: Path,
    formats: Sequence[ExportFormat] = ("csv", "json", "text"),
    top_n: int = 10,
    threshold: float = 50.0,
) -> list[Path]:
    """
    Write the report in each requested format into output_dir.

    Returns:
        The written paths, in the order of formats.
    """
    written: list[Path] = []
    for fmt in formats:
        if fmt not in OUTPUT_NAMES:
            raise ValueError(f"Unknown export format: {fmt}")
        path = output_dir / OUTPUT_NAMES[fmt]
        if fmt == "csv":
            written.append(write_csv(report, path))
        elif fmt == "json":
            written.append(write_json(report, path))
        else:
            written.append(write_summary(report, path, top_n, threshold))
    return written
