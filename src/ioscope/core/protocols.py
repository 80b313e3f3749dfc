"""Protocols (interfaces) consumed by the core layer.

These define the two primitives a backend must supply.  The formatting
functions depend ONLY on :class:`Writable`; the scoped-open helper only
on :class:`Closable`.  Any object with matching methods satisfies them
structurally (no explicit inheritance required).
"""

from __future__ import annotations

from typing import Any, Protocol


class Writable(Protocol):
    """Contract for anything ``print``/``puts`` can render into."""

    def write(self, data: Any) -> Any:
        """Append the textual content of *data* to the stream.

        The return value is backend-defined and not inspected by the
        core.  Failures must be raised as
        :class:`~ioscope.exceptions.IoscopeError` subclasses.
        """
        ...  # pragma: no cover


class Closable(Protocol):
    """Contract for releasing a backend connection."""

    def close(self) -> Any:
        """Release the handle.

        Raises
        ------
        IOError
            When the handle cannot be released (e.g. already closed).
        SystemCallError
            When the underlying platform call fails.
        """
        ...  # pragma: no cover
