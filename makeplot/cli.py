from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any, BinaryIO, TextIO

from makeplot.api import make_plot
from makeplot.errors import MakePlotError, PlotInputError

LOGGER = logging.getLogger(__name__)

EXAMPLES = """\
examples:
  Create a plot of a sine wave from a table of values
    python -c 'import json, math; print(json.dumps([{"x": i / 10, "y": math.sin(i / 10)} for i in range(65)]))' \\
      | makeplot --out sine.png

  Create a plot of the square root of a list of values
    python -c 'import json, math; print(json.dumps([math.sqrt(i) for i in range(11)]))' | makeplot > sqrt.png
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="makeplot",
        description="Creates a plot in png format",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--width", type=int, default=None, help="The width of the plot in pixels.")
    parser.add_argument("--height", type=int, default=None, help="The height of the plot in pixels.")
    parser.add_argument("-t", "--title", default=None, help="The title of the plot.")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="JSON file holding a list of numbers or of {x, y} records. Default: stdin.",
    )
    parser.add_argument("--out", type=Path, default=None, help="Write the PNG here. Default: stdout.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline stages to stderr.")
    return parser


def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: BinaryIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    stderr = stderr if stderr is not None else sys.stderr
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s", stream=stderr)

    location = str(args.input) if args.input is not None else "stdin"
    try:
        values = _read_values(args.input, stdin if stdin is not None else sys.stdin, location=location)
        data = make_plot(values, width=args.width, height=args.height, title=args.title, location=location)
    except PlotInputError as exc:
        _report(exc.label, str(exc), exc.location, stderr)
        return 1
    except MakePlotError as exc:
        _report(exc.label, str(exc), None, stderr)
        return 1

    if args.out is not None:
        try:
            args.out.write_bytes(data)
        except OSError as exc:
            _report("Cannot write output", exc.strerror or str(exc), str(args.out), stderr)
            return 1
        LOGGER.debug("wrote %d bytes to %s", len(data), args.out)
    else:
        sink = stdout if stdout is not None else sys.stdout.buffer
        sink.write(data)
        sink.flush()
    return 0


def _read_values(path: Path | None, stdin: TextIO, *, location: str) -> Any:
    try:
        text = path.read_text(encoding="utf-8") if path is not None else stdin.read()
    except UnicodeDecodeError as exc:
        raise PlotInputError(f"input is not valid UTF-8: {exc.reason} at byte {exc.start}", location=location, label="Cannot read input") from exc
    except OSError as exc:
        raise PlotInputError(exc.strerror or str(exc), location=location, label="Cannot read input") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise PlotInputError(f"{exc.msg} (line {exc.lineno}, column {exc.colno})", location=location, label="Invalid JSON input") from exc


def _report(label: str, message: str, location: str | None, stderr: TextIO) -> None:
    where = f" (at {location})" if location else ""
    print(f"error: {label}: {message}{where}", file=stderr)
