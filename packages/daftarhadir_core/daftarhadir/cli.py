"""
Command-line interface for daftarhadir.

Usage:
    daftarhadir render request.json --output-dir out/
    daftarhadir render request.json --config sheet.json
    daftarhadir days request.json
    daftarhadir version
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="daftarhadir",
        description="Render TLH attendance sheets (Daftar Hadir) as PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  daftarhadir render request.json
  daftarhadir render request.json -d out/ -c sheet.json
  daftarhadir days request.json
  daftarhadir version
        """,
    )
    parser.add_argument(
        "--version", "-V",
        action="store_true",
        help="Show version and exit"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)"
    )
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Colored log output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render an attendance sheet PDF")
    render_parser.add_argument("input", help="JSON file with the form payload")
    render_parser.add_argument(
        "-d", "--output-dir",
        help="Directory for the PDF (default: current directory)"
    )
    render_parser.add_argument(
        "-c", "--config",
        help="JSON file overriding printed texts, fonts and colors"
    )
    render_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress at INFO level"
    )

    days_parser = subparsers.add_parser("days", help="List the day columns of a request")
    days_parser.add_argument("input", help="JSON file with the form payload")

    subparsers.add_parser("version", help="Show version information")

    return parser


def _load_request(path: str):
    from .exceptions import ValidationError
    from .models import AttendanceRequest

    input_path = Path(path)
    try:
        payload = json.loads(input_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValidationError(f"Cannot read request file: {exc}", cause=exc) from exc
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Request file is not valid JSON: {exc}", cause=exc) from exc
    return AttendanceRequest.from_dict(payload)


def cmd_render(args) -> int:
    """Handle render command."""
    from .api import render_attendance_sheet
    from .config import SheetConfig, load_config

    if getattr(args, "verbose", False):
        from .utils.logger import set_log_level
        set_log_level("INFO")

    request = _load_request(args.input)
    config = load_config(args.config) if args.config else SheetConfig()

    if args.output_dir:
        Path(args.output_dir).mkdir(parents=True, exist_ok=True)

    result = render_attendance_sheet(request, output_dir=args.output_dir, config=config)
    if result is None:
        print("Date range is incomplete; no sheet rendered.")
        return 0

    print(f"Saved: {result}")
    return 0


def cmd_days(args) -> int:
    """Handle days command."""
    from .engine.calendar_grid import build_grid_days

    request = _load_request(args.input)
    date_range = request.date_range
    if not date_range.is_complete:
        print("Date range is incomplete.")
        return 0

    for grid_day in build_grid_days(date_range.start, date_range.end, request.holidays):
        marks = []
        if grid_day.weekend:
            marks.append("weekend")
        if grid_day.holiday:
            marks.append("holiday")
        suffix = f"  [{', '.join(marks)}]" if marks else ""
        print(f"{grid_day.index + 1:>3}  {grid_day.label}{suffix}")
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    from .version import __version__
    print(f"daftarhadir v{__version__}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    from .exceptions import DaftarHadirError
    from .utils.logger import configure_logging

    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, use_rich=args.rich)

    if args.version:
        return cmd_version()

    handlers = {
        "render": cmd_render,
        "days": cmd_days,
        "version": cmd_version,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 0

    try:
        return handler(args)
    except DaftarHadirError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
