"""CLI application entry point and command routing for ioscope.

This module is the **sole error boundary** for the command-line tool.
It catches :class:`~ioscope.exceptions.IoscopeError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No formatting logic lives here — ``print``/``puts`` come from
  :class:`~ioscope.core.handle.IOHandle`.
* Output always goes through a scoped handle so the destination is
  released even when a write fails.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from ioscope.cli.console import console
from ioscope.cli.exit_codes import ExitCode, exit_code_for
from ioscope.core.handle import IOHandle
from ioscope.exceptions import IoscopeError
from ioscope.infra.file_io import FileIO
from ioscope.infra.stream_io import StreamIO
from ioscope.version import __version__

OPERATIONS: tuple[str, ...] = ("print", "puts")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``ioscope print VALUE...`` — write values without separators
    * ``ioscope puts VALUE...``  — write values, newline-terminated
    * ``ioscope --version``
    """
    parser = argparse.ArgumentParser(
        prog="ioscope",
        description="Write values with print/puts formatting rules.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log handle lifecycle events to stderr.",
    )

    subparsers = parser.add_subparsers(dest="operation")
    for operation in OPERATIONS:
        sub = subparsers.add_parser(operation, help=f"Run {operation} over VALUE arguments.")
        sub.add_argument("values", nargs="*", metavar="VALUE")
        sub.add_argument(
            "--json",
            action="store_true",
            help="Decode each VALUE as JSON (null, numbers, arrays).",
        )
        sub.add_argument(
            "-o",
            "--output",
            default=None,
            metavar="PATH",
            help="Write into PATH instead of standard output.",
        )
        sub.add_argument(
            "-a",
            "--append",
            action="store_true",
            help="Append to PATH instead of truncating it.",
        )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _decode_values(raw_values: list[str], *, as_json: bool) -> list[object]:
    """Return *raw_values* unchanged, or JSON-decoded when *as_json*."""
    if not as_json:
        return list(raw_values)

    decoded: list[object] = []
    for raw in raw_values:
        try:
            decoded.append(json.loads(raw))
        except json.JSONDecodeError as exc:
            raise IoscopeError(
                f"Invalid JSON value {raw!r}: {exc.msg}",
                hint="Quote strings, e.g. '\"text\"', or drop --json.",
            ) from exc
    return decoded


def _handle_write(
    operation: str,
    values: list[object],
    *,
    output: str | None,
    append: bool,
) -> int:
    """Run *operation* over *values* inside a scoped handle."""

    def _emit(handle: IOHandle) -> None:
        getattr(handle, operation)(*values)

    if output is None:
        StreamIO.open(sys.stdout, block=_emit)
    else:
        FileIO.open(output, "a" if append else "w", block=_emit)
    return ExitCode.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ioscope CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(format="%(name)s: %(message)s")
        logging.getLogger("ioscope").setLevel(logging.DEBUG)

    if args.operation is None:
        parser.print_help()
        return ExitCode.SUCCESS

    values = _decode_values(args.values, as_json=args.json)
    return _handle_write(
        args.operation,
        values,
        output=args.output,
        append=args.append,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
    except IoscopeError as exc:
        console.report_error(exc)
        code = exit_code_for(exc)
    except KeyboardInterrupt as exc:
        console.report_interrupt()
        code = exit_code_for(exc)
    except Exception as exc:  # noqa: BLE001
        console.report_unexpected(exc)
        code = exit_code_for(exc)
    sys.exit(code)
