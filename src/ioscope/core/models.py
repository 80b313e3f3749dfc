"""Argument model for the formatting operations.

Every value handed to ``print``/``puts`` is resolved exactly once into an
:class:`ArgumentKind`.  The formatter dispatches on that tag rather than
re-inspecting the value at each step.
"""

from __future__ import annotations

from enum import Enum

NIL_TEXT: str = "nil"
"""Display value of an absent (``None``) scalar argument."""


class ArgumentKind(Enum):
    """Tagged union over the shapes an output argument can take."""

    ABSENT = "absent"
    """``None``."""

    TEXT = "text"
    """Already textual (``str``)."""

    SEQUENCE = "sequence"
    """Array-like container (``list`` or ``tuple``)."""

    OTHER = "other"
    """Anything else; rendered through its canonical ``str()`` form."""


def classify_argument(value: object) -> ArgumentKind:
    """Resolve *value* into its :class:`ArgumentKind`.

    Only ``list`` and ``tuple`` count as sequences: strings, bytes and
    mappings are iterable but are printed as scalars.
    """
    if value is None:
        return ArgumentKind.ABSENT
    if isinstance(value, str):
        return ArgumentKind.TEXT
    if isinstance(value, (list, tuple)):
        return ArgumentKind.SEQUENCE
    return ArgumentKind.OTHER


def display_value(value: object) -> str:
    """Return the text ``puts`` writes for a scalar *value*.

    Raises
    ------
    TypeError
        If *value* is a sequence — sequences have no single display value.
    """
    kind = classify_argument(value)
    if kind is ArgumentKind.ABSENT:
        return NIL_TEXT
    if kind is ArgumentKind.TEXT:
        return value  # type: ignore[return-value]
    if kind is ArgumentKind.SEQUENCE:
        raise TypeError("sequences have no scalar display value")
    return str(value)


def to_text(data: object) -> str:
    """Canonical conversion applied by backends inside ``write``.

    ``None`` renders as the empty string, ``bytes`` are decoded as UTF-8
    and every other value goes through ``str()``.
    """
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="replace")
    return str(data)
