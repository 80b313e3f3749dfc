"""Core layer — argument model, formatting rules and the handle base.

Rules
-----
* No ``print()`` calls to the real stdout.
* No filesystem or network I/O; all output goes through ``write``.
* No imports from ``cli`` or ``infra``.
"""

from ioscope.core.handle import IOHandle
from ioscope.core.models import ArgumentKind, classify_argument, display_value, to_text
from ioscope.core.protocols import Closable, Writable
from ioscope.core.writer import write_print, write_puts

__all__: list[str] = [
    "ArgumentKind",
    "Closable",
    "IOHandle",
    "Writable",
    "classify_argument",
    "display_value",
    "to_text",
    "write_print",
    "write_puts",
]
