"""
Command-line entry point: ``countryfetch COUNTRY``.
"""
import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from .config import Settings
from .report import NO_DATA_MESSAGE, ReportLine, render
from .tools.countries import fetch

BOLD_BLUE = "\033[1;34m"
BOLD_RED = "\033[1;31m"
RESET = "\033[0m"


def _use_color(stream: TextIO, setting: Optional[bool]) -> bool:
    if setting is not None:
        return setting
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def style_line(line: ReportLine, color: bool) -> str:
    """Plain ``str(line)`` with ANSI bold colors on the label (or the whole no-data line)."""
    if not color:
        return str(line)
    if line.label is None:
        tint = BOLD_RED if line.value == NO_DATA_MESSAGE else BOLD_BLUE
        return f"{tint}{line.value}{RESET}"
    tint = BOLD_RED if line.error else BOLD_BLUE
    return f"{tint}{line.label}{RESET}: {line.value}"


def emit(
    lines: Iterable[ReportLine],
    out: TextIO,
    err: TextIO,
    color: Optional[bool] = None,
) -> None:
    """Write success/empty lines to ``out`` and error lines to ``err``."""
    for line in lines:
        stream = err if line.error else out
        print(style_line(line, _use_color(stream, color)), file=stream)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="countryfetch",
        description="Fetches country information from the REST Countries API",
    )
    ap.add_argument("country", help="country name, e.g. France (partial names are matched by the API)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    level = logging.getLevelName(settings.log_level)
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    result = fetch(args.country, settings)
    emit(render(result), sys.stdout, sys.stderr, settings.color)
    return 1 if result.failed else 0


if __name__ == "__main__":
    sys.exit(main())
