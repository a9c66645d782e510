"""CLI interface for task-dates.

Usage:
    # Parse dates (stdin: text, stdout: JSON result)
    echo 'call mom tom' | task-dates parse

    # Highlight segments (stdin: text, stdout: JSON list)
    echo 'standup mon and tue' | task-dates segments

    # Relative label for a date
    task-dates label 2024-01-17

    # Checklist line with due date
    echo 'pay rent fri' | task-dates task
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from datetime import date, datetime
from typing import Any

from .config import create_extractor, load_config, load_from_yaml
from .presentation import highlight_segments, relative_label, task_line
from .types import ParsedDate


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s %(message)s",
    )


def _parse_shorthand(value: str) -> tuple[str, str]:
    token, sep, expansion = value.partition("=")
    if not sep or not token or not expansion:
        raise argparse.ArgumentTypeError(f"expected TOKEN=WORD, got {value!r}")
    return token, expansion


def _parse_day(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from None


def _build_config(args: argparse.Namespace) -> dict[str, Any]:
    cfg = load_from_yaml(args.config) if args.config else load_config({})
    if args.language:
        cfg["languages"] = args.language
    if args.no_shorthands:
        cfg["expand_shorthands"] = False
    if args.shorthand:
        cfg["shorthands"] = {**cfg["shorthands"], **dict(args.shorthand)}
    return cfg


def _date_dict(d: ParsedDate) -> dict[str, Any]:
    return {
        "text": d.text,
        "start": d.start,
        "end": d.end,
        "date": d.date.isoformat(),
        "date_string": d.date_string,
    }


def _emit(obj: Any) -> None:
    json.dump(obj, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_parse(args: argparse.Namespace) -> None:
    """Extract dates from text on stdin."""
    extractor = create_extractor(_build_config(args))
    result = extractor.extract(sys.stdin.read().rstrip("\n"), now=args.now)
    primary = result.primary_date
    _emit({
        "cleaned_text": result.cleaned_text,
        "parsed_dates": [_date_dict(d) for d in result.parsed_dates],
        "primary_date": _date_dict(primary) if primary else None,
    })


def cmd_segments(args: argparse.Namespace) -> None:
    """Split text on stdin into date / non-date segments."""
    extractor = create_extractor(_build_config(args))
    segments = highlight_segments(sys.stdin.read().rstrip("\n"), extractor=extractor, now=args.now)
    _emit([
        {
            "text": s.text,
            "is_date": s.is_date,
            "date_string": s.date_info.date_string if s.date_info else None,
        }
        for s in segments
    ])


def cmd_label(args: argparse.Namespace) -> None:
    """Print a relative label for a date."""
    today = args.now.date() if args.now else None
    sys.stdout.write(relative_label(args.date, today=today) + "\n")


def cmd_task(args: argparse.Namespace) -> None:
    """Turn text on stdin into a checklist line."""
    extractor = create_extractor(_build_config(args))
    sys.stdout.write(task_line(sys.stdin.read().rstrip("\n"), extractor=extractor, now=args.now) + "\n")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="task-dates",
        description="Find natural-language dates in task text",
    )
    parser.add_argument("--config", default=None, help="YAML config path")
    parser.add_argument("--language", action="append", help="Language code (repeatable)")
    parser.add_argument("--shorthand", action="append", type=_parse_shorthand,
                        metavar="TOKEN=WORD", help="Extra shorthand (repeatable)")
    parser.add_argument("--no-shorthands", action="store_true", help="Disable shorthand expansion")
    parser.add_argument("--now", type=datetime.fromisoformat, default=None,
                        help="Reference instant (ISO 8601), default: now")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("parse", help="Extract dates (text stdin, JSON stdout)")
    sub.add_parser("segments", help="Highlight segments (text stdin, JSON stdout)")
    label = sub.add_parser("label", help="Relative label for a date")
    label.add_argument("date", type=_parse_day, help="Date as YYYY-MM-DD")
    sub.add_parser("task", help="Checklist line with due date (text stdin)")

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    cmds = {
        "parse": cmd_parse,
        "segments": cmd_segments,
        "label": cmd_label,
        "task": cmd_task,
    }
    cmds[args.command](args)


if __name__ == "__main__":
    main()
