"""Setstats CLI - Rank the songs that recur across photographed setlists."""

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Sequence

from setstats.config import Settings, load_settings
from setstats.export import export_report, render_summary
from setstats.pipeline import analyze
from setstats.sources import (
    check_tesseract_installation,
    collect_paths,
    load_document,
    needs_ocr,
    transcribe,
)


def parse_args(args: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Setstats: Rank recurring songs across OCR'd concert setlists"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or every rule decision (-vv)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Analyze command: setstats analyze <paths...> [-o DIR] [--config FILE]
    analyze_parser = subparsers.add_parser(
        "analyze", help="Extract songs from setlists and rank them"
    )
    analyze_parser.add_argument(
        "inputs", type=Path, nargs="+", help="Setlist files or directories of them"
    )
    analyze_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Directory to write songs.csv, songs.json and summary.txt into",
    )
    analyze_parser.add_argument(
        "--config", type=Path, default=None, help="Path to a YAML settings file"
    )
    analyze_parser.add_argument(
        "--workers", type=int, default=None, help="Number of extraction threads"
    )
    analyze_parser.add_argument(
        "--top", type=int, default=None, help="How many songs to list in the summary"
    )
    analyze_parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Percentage of setlists a song must reach to count as recurring",
    )
    analyze_parser.add_argument(
        "--dedupe",
        action="store_true",
        default=None,
        help="Count a song at most once per setlist",
    )
    analyze_parser.add_argument(
        "--format",
        dest="formats",
        choices=["csv", "json", "text"],
        action="append",
        default=None,
        help="Export format (repeatable, default: all)",
    )

    # Transcribe command: setstats transcribe <paths...> -o DIR
    transcribe_parser = subparsers.add_parser(
        "transcribe", help="OCR setlist photos and PDFs into .txt transcripts"
    )
    transcribe_parser.add_argument(
        "inputs", type=Path, nargs="+", help="Setlist files or directories of them"
    )
    transcribe_parser.add_argument(
        "-o", "--output", type=Path, required=True, help="Directory to write transcripts into"
    )
    transcribe_parser.add_argument(
        "--config", type=Path, default=None, help="Path to a YAML settings file"
    )

    return parser.parse_args(args)


def configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Settings from --config, with command-line flags taking precedence."""
    settings = load_settings(args.config)
    overrides = {
        "workers": getattr(args, "workers", None),
        "top_n": getattr(args, "top", None),
        "threshold": getattr(args, "threshold", None),
        "dedupe_per_document": getattr(args, "dedupe", None),
        "formats": getattr(args, "formats", None),
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if not overrides:
        return settings
    return Settings.model_validate({**settings.model_dump(), **overrides})


def cmd_analyze(args: argparse.Namespace) -> None:
    """Handle the 'analyze' subcommand."""
    settings = resolve_settings(args)
    paths = collect_paths(args.inputs, settings)
    if needs_ocr(paths, settings):
        check_tesseract_installation()

    documents = [load_document(path, settings) for path in paths]
    if settings.count_empty_documents:
        total_documents = len(documents)
    else:
        total_documents = sum(1 for doc in documents if doc.text.strip())

    report = analyze(
        documents,
        total_documents=total_documents,
        workers=settings.workers,
        dedupe_per_document=settings.dedupe_per_document,
    )
    print(render_summary(report, settings.top_n, settings.threshold), end="")

    if args.output:
        written = export_report(
            report, args.output, settings.formats, settings.top_n, settings.threshold
        )
        for path in written:
            print(f"Wrote {path}")


def transcript_name(path: Path, shared_stem: bool) -> str:
    """<stem>.txt, or <name>.txt when another input has the same stem."""
    if shared_stem:
        return f"{path.name}.txt"
    return f"{path.stem}.txt"


def cmd_transcribe(args: argparse.Namespace) -> None:
    """Handle the 'transcribe' subcommand."""
    settings = load_settings(args.config)
    paths = collect_paths(args.inputs, settings)
    if needs_ocr(paths, settings):
        check_tesseract_installation()

    args.output.mkdir(parents=True, exist_ok=True)
    stems = Counter(path.stem for path in paths)
    for path in paths:
        target = args.output / transcript_name(path, stems[path.stem] > 1)
        try:
            text = transcribe(path, settings)
        except Exception as e:
            print(f"Warning: Skipping {path}: {e}", file=sys.stderr)
            continue
        target.write_text(text, encoding="utf-8")
        print(f"{path.name} -> {target}")


def main(args: Sequence[str] | None = None) -> None:
    parsed = parse_args(args)
    configure_logging(parsed.verbose)

    try:
        if parsed.command == "analyze":
            cmd_analyze(parsed)
        elif parsed.command == "transcribe":
            cmd_transcribe(parsed)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
