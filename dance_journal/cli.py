"""
Dance Journal Command Line

Print practice analytics for a JSON export of practice records.

Usage:
    # This month's report
    dance-journal report --input records.json

    # Last month, as JSON
    dance-journal report --input records.json --range last_month --format json

    # Pin "now" and ask the coach for a summary
    dance-journal report --input records.json --range week \\
        --now 2024-03-08T18:00:00 --coach

    # Show the suggestion catalogs
    dance-journal catalog

Input format:
    A JSON array of practice records, e.g.
    [{"id": "a1", "occurred_at": "2024-03-04T19:00:00", "style": "Jazz",
      "duration_minutes": 60, "mood": "happy"}]

Environment Variables (set in .env or environment):
    - GEMINI_API_KEY / OPENAI_API_KEY / ANTHROPIC_API_KEY: enable --coach
    - TEXT_MODEL, SUMMARY_MODEL: LiteLLM model identifiers
    - DEBUG: Enable verbose LiteLLM logging
"""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from dance_journal.config import known_instructors, known_studios, known_styles
from dance_journal.enums.journal import Difficulty, Mood, TimeRange
from dance_journal.models.journal import AnalyticsReport, PracticeRecord
from dance_journal.services.analytics.report import build_report
from dance_journal.services.coach import DanceCoachService, period_label_for
from dance_journal.services.journal import index_by_id

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[PracticeRecord])


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    # Reduce noise from httpx and LiteLLM (unless --debug)
    if not debug:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
        logging.getLogger("LiteLLM").setLevel(logging.WARNING)


# =============================================================================
# Input
# =============================================================================


def load_records(path: Path) -> list[PracticeRecord]:
    """
    Load and validate a JSON export of practice records.

    Duplicate ids are collapsed, keeping the latest entry.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON
        ValidationError: If a record does not match the record schema
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Records file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in records file: {e}")

    records = _records_adapter.validate_python(raw)
    return list(index_by_id(records).values())


# =============================================================================
# Output
# =============================================================================


def format_report(report: AnalyticsReport) -> str:
    """Render a report as human-readable text."""
    window = report.window
    stats = report.stats
    lines = [
        "=" * 60,
        f"PRACTICE REPORT ({window.time_range.value.replace('_', ' ').upper()})",
        f"{window.start:%Y-%m-%d %H:%M:%S} .. {window.end:%Y-%m-%d %H:%M:%S}",
        "=" * 60,
    ]

    if report.is_empty:
        lines.append("\nNo records found for this period.")
    else:
        lines.append(f"\nDanced:  {stats.total_hours_label}h ({stats.total_duration_minutes} min)")
        lines.append(f"Classes: {stats.session_count}")
        lines.append(
            f"Top instructor: {stats.top_instructor.name} ({stats.top_instructor.count})"
        )
        lines.append(f"Top studio:     {stats.top_studio.name} ({stats.top_studio.count})")
        lines.append("\nStyle breakdown:")
        for entry in stats.style_breakdown:
            lines.append(f"  {entry.name:<20} {entry.count:>3}  {entry.share:>6.1%}")

    lines.append("\nPractice trend (hours):")
    for bucket in report.trend:
        lines.append(f"  {bucket.label:<12} {bucket.total_hours:>6.2f}")

    return "\n".join(lines)


def print_catalog() -> None:
    """Print the suggestion catalogs and fixed vocabularies."""
    print("Styles:      " + ", ".join(known_styles()))
    print("Studios:     " + ", ".join(known_studios()))
    print("Instructors: " + ", ".join(known_instructors()))
    print("Moods:       " + ", ".join(f"{m.emoji} {m.label}" for m in Mood))
    print("Difficulty:  " + ", ".join(d.value for d in Difficulty))


# =============================================================================
# Commands
# =============================================================================


def run_report(args: argparse.Namespace) -> int:
    """Execute the report command."""
    try:
        records = load_records(Path(args.input))
    except FileNotFoundError as e:
        print(f"\nFile Error: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"\nData Validation Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"\nData Error: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Loaded {len(records)} records from {args.input}")
    report = build_report(records, args.range, args.now)

    coach_text: Optional[str] = None
    if args.coach:
        coach = DanceCoachService()
        coach_text = asyncio.run(
            coach.get_period_summary(report.filtered, period_label_for(report.window))
        )

    if args.format == "json":
        data = report.model_dump(mode="json")
        if coach_text is not None:
            data["coach"] = coach_text
        print(json.dumps(data, indent=2))
    else:
        print(format_report(report))
        if coach_text is not None:
            print(f"\nCoach: {coach_text}")

    return 0


# =============================================================================
# CLI Setup
# =============================================================================


def _parse_now(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid ISO datetime: {value}")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="dance-journal",
        description="Practice analytics for a dance journal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    report_parser = subparsers.add_parser("report", help="Print a practice report")
    report_parser.add_argument(
        "--input",
        "-i",
        required=True,
        metavar="FILE",
        help="JSON array of practice records",
    )
    report_parser.add_argument(
        "--range",
        "-r",
        choices=[t.value for t in TimeRange],
        default=TimeRange.MONTH.value,
        help="Reporting range (default: month)",
    )
    report_parser.add_argument(
        "--now",
        type=_parse_now,
        default=None,
        help="Reference time as ISO datetime (default: current time)",
    )
    report_parser.add_argument(
        "--format",
        "-f",
        choices=["summary", "json"],
        default="summary",
        help="Output format (default: summary)",
    )
    report_parser.add_argument(
        "--coach",
        action="store_true",
        help="Append the coach's summary of the period",
    )

    subparsers.add_parser("catalog", help="Show suggestion catalogs")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.debug)

    if args.command == "report":
        return run_report(args)

    print_catalog()
    return 0


if __name__ == "__main__":
    sys.exit(main())
