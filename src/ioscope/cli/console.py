"""Diagnostics for the ``ioscope`` command, written to stderr.

The values being printed never pass through here; they go to the
selected handle.  This console only reports why a run failed.  Rich is
imported per report, so a missing install degrades to plain text instead
of breaking the error boundary.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

from ioscope.exceptions import EOFError, IOError, IoscopeError, SystemCallError

Segment = tuple[str, str]
"""``(rich_style, text)``; an empty style means unstyled text."""


def _load_rich() -> tuple[type[Any], Callable[[str], str]] | None:
    try:
        from rich.console import Console
        from rich.markup import escape
    except ModuleNotFoundError:
        return None
    return Console, escape


def error_label(exc: IoscopeError) -> str:
    """Headline for *exc*, most specific error kind first."""
    if isinstance(exc, SystemCallError):
        if exc.errno is not None:
            return f"System call failed (errno {exc.errno})"
        return "System call failed"
    if isinstance(exc, EOFError):
        return "Unexpected end of stream"
    if isinstance(exc, IOError):
        return "I/O error"
    return "Error"


class ErrorConsole:
    """Renders failure reports with Rich, or as plain text without it."""

    def _render(self, *lines: list[Segment]) -> None:
        rich = _load_rich()
        if rich is None:
            for line in lines:
                print("".join(text for _, text in line), file=sys.stderr)
            return

        console_class, escape = rich
        console = console_class(stderr=True, highlight=False)
        for line in lines:
            console.print(
                "".join(
                    f"[{style}]{escape(text)}[/{style}]" if style else escape(text)
                    for style, text in line
                )
            )

    def report_error(self, exc: IoscopeError) -> None:
        lines: list[list[Segment]] = [
            [("bold red", f"{error_label(exc)}:"), ("", f" {exc}")],
        ]
        if exc.hint:
            lines.append([("yellow", "Hint:"), ("", f" {exc.hint}")])
        self._render(*lines)

    def report_interrupt(self) -> None:
        self._render([("yellow", "Aborted by user.")])

    def report_unexpected(self, exc: BaseException) -> None:
        self._render(
            [("bold red", "Unexpected error."), ("", " Please report this issue.")],
            [("", f"  {type(exc).__name__}: {exc}")],
        )


console = ErrorConsole()
