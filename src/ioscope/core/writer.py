"""Formatted-output algorithms behind ``print`` and ``puts``.

Both functions are built solely on the ``write`` primitive of a
:class:`~ioscope.core.protocols.Writable` target.  They never catch
anything: a failing ``write`` aborts the remaining writes of the call
and propagates to the caller unchanged.
"""

from __future__ import annotations

from ioscope.core.models import NIL_TEXT, ArgumentKind, classify_argument, display_value
from ioscope.core.protocols import Writable

NEWLINE: str = "\n"

RECURSION_TEXT: str = "recursion in array..."
"""Written in place of a sequence element that is the sequence itself."""

__all__: list[str] = [
    "NEWLINE",
    "NIL_TEXT",
    "RECURSION_TEXT",
    "write_print",
    "write_puts",
]


def write_print(target: Writable, *args: object) -> None:
    """Write each argument to *target* as-is.

    One ``write`` call per argument, no separators and no trailing
    newline.  Non-text values are handed to the backend unconverted.
    """
    for arg in args:
        target.write(arg)


def _write_sequence(target: Writable, sequence: list[object] | tuple[object, ...]) -> None:
    # Shallow guard: only an element that IS this sequence is caught.
    for element in sequence:
        if element is sequence:
            target.write(RECURSION_TEXT)
        else:
            target.write(element)


def write_puts(target: Writable, *args: object) -> None:
    """Write each argument to *target*, newline-terminating scalars.

    Rules
    -----
    * No arguments: a single newline.
    * Sequence argument: each element written directly, without newline
      handling; an element identical to the sequence itself is replaced
      by :data:`RECURSION_TEXT`.
    * Scalar argument: its display value (``"nil"`` for ``None``, the
      text itself, or ``str(value)``), followed by a newline unless the
      display value already ends in one.
    """
    if not args:
        target.write(NEWLINE)
        return

    for arg in args:
        if classify_argument(arg) is ArgumentKind.SEQUENCE:
            _write_sequence(target, arg)  # type: ignore[arg-type]
            continue

        text = display_value(arg)
        target.write(text)
        if not text.endswith(NEWLINE):
            target.write(NEWLINE)
