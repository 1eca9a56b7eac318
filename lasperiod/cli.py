"""
CLI (Command Line Interface).

This module provides quick terminal commands, e.g.:

    lasperiod year
    lasperiod periods --json
    lasperiod export <file.ics>

By default the live Chalmers page is fetched. Use --file to parse a saved
HTML copy instead.

Note:
- Output is plain text (or JSON with --json), no rich formatting
- Errors are printed to stderr and the command exits with code 1
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

from lasperiod.errors import ScraperError
from lasperiod.export_ics import export_periods_to_ics
from lasperiod.parse import YearFallback, parse_study_periods, parse_study_year
from lasperiod.scrape import DEFAULT_TIMEOUT, DEFAULT_URL, fetch_html


def _load_html(args: argparse.Namespace) -> str:
    """
    Read the page from --file if given, otherwise fetch --url.
    """
    if args.file is not None:
        try:
            return Path(args.file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ScraperError(f"Could not read {args.file}: {exc}") from exc
    return fetch_html(args.url, timeout=args.timeout)


def _fallback(args: argparse.Namespace, default: YearFallback) -> YearFallback:
    return args.fallback if args.fallback is not None else default


def _print_json(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _cmd_year(args: argparse.Namespace) -> int:
    study_year = parse_study_year(_load_html(args), fallback=_fallback(args, YearFallback.STRICT))

    if args.json:
        _print_json(study_year.to_dict())
        return 0

    print(
        f"Läsår {study_year.year}/{study_year.year + 1}: "
        f"{study_year.start_date.isoformat()} - {study_year.end_date.isoformat()}"
    )
    return 0


def _cmd_periods(args: argparse.Namespace) -> int:
    periods = parse_study_periods(_load_html(args), fallback=_fallback(args, YearFallback.TODAY))

    if args.json:
        _print_json([p.to_dict() for p in periods])
        return 0

    if not periods:
        print("No study periods found.")
        return 0

    for p in periods:
        print(f"{p.year} | Läsperiod {p.period} | {p.start_date.isoformat()} - {p.end_date.isoformat()}")
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    out_path = (args.out or "").strip()
    if not out_path:
        print("Please provide output .ics path.", file=sys.stderr)
        return 1

    periods = parse_study_periods(_load_html(args), fallback=_fallback(args, YearFallback.TODAY))
    if not periods:
        print("No study periods to export.")
        return 0

    n = export_periods_to_ics(periods, out_path)
    print(f"Exported {n} study periods to: {out_path}")
    return 0


def _add_source_args(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group()
    src.add_argument("--url", type=str, default=DEFAULT_URL, help="Calendar page URL")
    src.add_argument("--file", type=Path, default=None, help="Parse a saved HTML file instead of fetching")

    fb = p.add_mutually_exclusive_group()
    fb.add_argument(
        "--strict",
        dest="fallback",
        action="store_const",
        const=YearFallback.STRICT,
        help="Fail if the page has no 'Läsår YYYY/YYYY' marker",
    )
    fb.add_argument(
        "--fallback-today",
        dest="fallback",
        action="store_const",
        const=YearFallback.TODAY,
        help="Use the current year if the page has no year marker",
    )
    p.set_defaults(fallback=None)

    p.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="HTTP timeout in seconds")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="lasperiod", description="Chalmers study year / study period scraper")
    sub = parser.add_subparsers(dest="command", required=True)

    p_year = sub.add_parser("year", help="Show the current study year")
    _add_source_args(p_year)
    p_year.add_argument("--json", action="store_true", help="Print JSON instead of text")

    p_periods = sub.add_parser("periods", help="Show all study periods")
    _add_source_args(p_periods)
    p_periods.add_argument("--json", action="store_true", help="Print JSON instead of text")

    p_export = sub.add_parser("export", help="Export study periods to .ics")
    p_export.add_argument("out", type=str, help="Output file path (e.g. lp.ics)")
    _add_source_args(p_export)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    handlers = {
        "year": _cmd_year,
        "periods": _cmd_periods,
        "export": _cmd_export,
    }
    handler = handlers.get(args.command)
    if handler is None:
        raise SystemExit(2)

    try:
        code = handler(args)
    except ScraperError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1)

    raise SystemExit(code)
