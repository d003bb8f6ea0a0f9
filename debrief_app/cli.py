"""Command-line runner for the debrief pipeline.

Usage:
  debrief --response-url https://hooks.slack.com/commands/...
  debrief --dry-run --date 2024-09-02

Settings are read from the same environment variables as the Lambda handler.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from debrief_app.core.config import DebriefSettings
from debrief_app.core.errors import DebriefError
from debrief_app.handler import collect_report, configure_logging, debrief

logger = logging.getLogger(__name__)


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="debrief", description="Send the daily incident and issue debrief.")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--response-url", help="Slack URL to post the report to")
    target.add_argument("--dry-run", action="store_true", help="Print the report instead of posting it")
    parser.add_argument("--date", type=_parse_date, default=None, help="Override the invocation date (YYYY-MM-DD)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        settings = DebriefSettings.from_env()
        if args.dry_run:
            print(collect_report(settings, today=args.date).text)
            return 0
    except DebriefError as exc:
        logger.error("%s", exc)
        return 1
    return 0 if debrief(settings, args.response_url, today=args.date) else 1


if __name__ == "__main__":
    sys.exit(main())
