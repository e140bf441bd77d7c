# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from partialdate.adapters.payload import to_payload
from partialdate.app import (
    compare_dates,
    convert_date,
    current_date,
    default_context,
    parse_date,
    shift_date,
)
from partialdate.common.logging import configure_logging
from partialdate.config import CalendarConfig, ConfigurationError
from partialdate.domain.model import Component, DateFormat

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from partialdate.domain.model import CalendarContext

log = logging.getLogger(__name__)

_PATTERN_HELP = (
    "Named pattern (day-month-year, day-month, month-year-locale, year, "
    "year-month-day-time) or a custom LDML pattern such as 'yyyy/MM/dd'"
)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Work with partial calendar dates")
    parser.add_argument(
        "--timezone",
        type=str,
        help="IANA timezone name (defaults to PARTIALDATE_TIMEZONE, then UTC)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Re-render a date in another pattern")
    convert.add_argument("text", type=str)
    convert.add_argument("--from", dest="from_pattern", required=True, help=_PATTERN_HELP)
    convert.add_argument("--to", dest="to_pattern", required=True, help=_PATTERN_HELP)

    shift = subparsers.add_parser("shift", help="Increase or decrease one component")
    shift.add_argument("text", type=str)
    shift.add_argument("--pattern", required=True, help=_PATTERN_HELP)
    shift.add_argument(
        "--component",
        required=True,
        choices=[component.value for component in Component],
        help="Component to change",
    )
    shift.add_argument("--by", type=int, default=1, help="Amount (default: %(default)s)")
    shift.add_argument("--decrease", action="store_true", help="Subtract instead of add")
    shift.add_argument("--output", help="Output pattern (defaults to the input pattern)")

    inspect = subparsers.add_parser("inspect", help="Print the JSON payload of a date")
    inspect.add_argument("text", type=str)
    inspect.add_argument("--pattern", required=True, help=_PATTERN_HELP)

    compare = subparsers.add_parser("compare", help="Compare two dates")
    compare.add_argument("first", type=str)
    compare.add_argument("second", type=str)
    compare.add_argument("--pattern", required=True, help=_PATTERN_HELP)

    now = subparsers.add_parser("now", help="Print the current date and time")
    now.add_argument(
        "--pattern",
        default=DateFormat.YEAR_MONTH_DAY_TIME.value,
        help=_PATTERN_HELP,
    )

    return parser.parse_args(list(argv))


def _resolve_pattern(value: str) -> str:
    try:
        return DateFormat[value.strip().upper().replace("-", "_")].value
    except KeyError:
        return value


def _build_context(args: argparse.Namespace) -> CalendarContext:
    if args.timezone:
        return CalendarConfig(timezone_name=args.timezone).context()
    return default_context()


def _run_command(args: argparse.Namespace, context: CalendarContext) -> str:
    if args.command == "convert":
        result = convert_date(
            args.text,
            _resolve_pattern(args.from_pattern),
            _resolve_pattern(args.to_pattern),
            context=context,
        )
    elif args.command == "shift":
        pattern = _resolve_pattern(args.pattern)
        result = shift_date(
            args.text,
            pattern,
            Component(args.component),
            args.by,
            increase=not args.decrease,
            output_pattern=_resolve_pattern(args.output) if args.output else None,
            context=context,
        )
    elif args.command == "inspect":
        value = parse_date(args.text, _resolve_pattern(args.pattern), context=context)
        result = None if value is None else to_payload(value).model_dump_json(indent=2)
    elif args.command == "compare":
        summary = compare_dates(
            args.first,
            args.second,
            _resolve_pattern(args.pattern),
            context=context,
        )
        if summary.first is None or summary.second is None:
            result = None
        elif summary.is_same_instant:
            result = "same"
        elif summary.is_earlier:
            result = "earlier"
        elif summary.is_later:
            result = "later"
        else:
            raise ValueError("Dates parse but do not resolve to comparable instants")
    elif args.command == "now":
        result = current_date(context=context).format(_resolve_pattern(args.pattern))
    else:
        raise ValueError(f"Unsupported command: {args.command}")

    if result is None:
        raise ValueError("Input does not match the given pattern")
    return result


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        context = _build_context(parsed_args)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        output = _run_command(parsed_args, context)
    except ValueError:
        log.exception("Could not process input")
        sys.exit(1)

    print(output)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
