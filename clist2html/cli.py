"""Command line entry point: convert a checklist file to HTML."""

from __future__ import annotations

import getopt
import re
import sys

from .checklist import UnknownCommandError, read_checklists
from .render import render_html

_PROG = "clist2html"
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")

_OPTION_HELP = (
    ("--columns <n>", "Number of columns to format lists in to (Optional)"),
    ("--title <title>", "Title to display at the top (Optional)"),
    ("--output <filename>", "Filename of the output file (Optional)"),
)


def _usage_text(prog: str = _PROG) -> str:
    """Build the usage message shown for --help and for bad arguments."""
    lines = [f"Usage: {prog} [options] <filename>", "Options:"]
    lines.extend(f"  {flag:<20}{description}" for flag, description in _OPTION_HELP)
    return "\n".join(lines) + "\n"


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def default_output_path(input_path: str) -> str:
    """Replace everything after the last dot with ``html``, or append ``.html``."""
    head, dot, _ = input_path.rpartition(".")
    if dot:
        return f"{head}.html"
    return f"{input_path}.html"


def main(argv: list[str] | None = None) -> int:
    """Run the converter; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options, positional = getopt.gnu_getopt(
            args, "c:t:o:h", ["columns=", "title=", "output=", "help"]
        )
    except getopt.GetoptError as error:
        sys.stderr.write(f"{_PROG}: {error}\n{_usage_text()}")
        return 1

    columns = 2
    title = ""
    output = ""
    for flag, value in options:
        if flag in ("-c", "--columns"):
            columns = _atoi(value)
        elif flag in ("-t", "--title"):
            title = value
        elif flag in ("-o", "--output"):
            output = value
        elif flag in ("-h", "--help"):
            sys.stderr.write(_usage_text())
            return 0

    if not positional:
        sys.stderr.write(_usage_text())
        return 1

    source = positional[0]
    output = output or default_output_path(source)

    try:
        checklists = read_checklists(source)
    except UnknownCommandError as error:
        print(f"Unknown command: {error.command}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(str(error), file=sys.stderr)
        return 1

    try:
        with open(output, "w", encoding="utf-8", newline="") as handle:
            handle.write(render_html(checklists, columns, title))
    except OSError:
        print("Failed to create output file", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())