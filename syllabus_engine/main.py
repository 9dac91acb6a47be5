"""
Main CLI entry point for the syllabus extraction engine.
"""

import argparse
import json
import sys
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import List, Optional

from pytz.exceptions import UnknownTimeZoneError

from .config import ParserConfig, configure_logging, parse_time
from .errors import SyllabusEngineError
from .icalendar_gen import ICalendarGenerator
from .linker import link_result
from .models import serialize_diagnostic, serialize_parse_result
from .parser import parse_with_diagnostics
from .text_source import read_document_text


# Exit status when --strict is given and the weights do not add up
EXIT_WEIGHT_MISMATCH = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the syllabus-parse command."""
    parser = argparse.ArgumentParser(
        prog="syllabus-parse",
        description="Extract evaluations, schedule and metadata from a syllabus"
    )
    parser.add_argument(
        "path",
        type=str,
        help="Path to the syllabus (.pdf, .docx or plain text)"
    )
    parser.add_argument(
        "--link",
        action="store_true",
        help="Fill evaluation week/date from the schedule before output"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write JSON to this file instead of stdout"
    )
    parser.add_argument(
        "--ics",
        type=str,
        default=None,
        help="Also write dated evaluations to this .ics file"
    )
    parser.add_argument(
        "--year",
        type=int,
        default=date.today().year,
        help="Year for dates written without one, e.g. 30/03 (default: current year)"
    )
    parser.add_argument(
        "--timezone",
        type=str,
        default=None,
        help="Timezone for calendar events (default: SYLLABUS_TIMEZONE or America/Lima)"
    )
    parser.add_argument(
        "--due-time",
        type=str,
        default=None,
        help="HH:MM time of day for calendar events (default: 23:59)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with status {EXIT_WEIGHT_MISMATCH} if weights do not sum to ~100%%"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = ParserConfig.from_env()
        if args.timezone:
            config = replace(config, timezone=args.timezone)
        if args.due_time:
            config = replace(config, due_time=parse_time(args.due_time))
    except SyllabusEngineError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    configure_logging("DEBUG" if args.verbose else config.log_level)

    try:
        text = read_document_text(args.path)
    except (FileNotFoundError, SyllabusEngineError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    result, diagnostic = parse_with_diagnostics(text, config)
    if args.link:
        result = link_result(result)

    payload = serialize_parse_result(result)
    payload["diagnostic"] = serialize_diagnostic(diagnostic)
    output = json.dumps(payload, ensure_ascii=False, indent=2)

    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
        print(f"Saved extracted data to: {args.output}", file=sys.stderr)
    else:
        print(output)

    if args.ics:
        try:
            cal_gen = ICalendarGenerator(timezone_str=config.timezone, due_time=config.due_time)
        except UnknownTimeZoneError:
            print(f"Error: unknown timezone {config.timezone!r}", file=sys.stderr)
            return 1
        linked = result if args.link else link_result(result)
        calendar = cal_gen.generate_calendar(
            linked.evaluations, year=args.year, course_name=linked.metadata.course_name
        )
        cal_gen.export_to_file(calendar, args.ics)
        print(f"Saved calendar to: {args.ics}", file=sys.stderr)

    if args.strict and diagnostic:
        return EXIT_WEIGHT_MISMATCH
    return 0


if __name__ == "__main__":
    sys.exit(main())
