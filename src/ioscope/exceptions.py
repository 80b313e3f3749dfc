"""Custom exception hierarchy for ioscope.

Every failure raised by a handle, a backend, or the scoped-open helper
is an :class:`IoscopeError` subclass.  Raw Python failures coming out of
a backend's underlying object (``OSError``, the builtin ``EOFError``,
``ValueError`` from a closed stream) must NEVER propagate beyond the
infrastructure layer — they are caught and re-raised through
:func:`translate_builtin_error`.

Hierarchy
---------
IoscopeError
├── IOError                (kind: IO)
│   └── EOFError           (kind: EOF)
└── SystemCallError        (kind: SYSTEM_CALL)

``IOError`` and ``EOFError`` deliberately shadow the builtin names inside
this package; import them from here, not from :mod:`builtins`.
"""

from __future__ import annotations

import builtins
from enum import Enum


# ---------------------------------------------------------------------------
# Error kinds
# ---------------------------------------------------------------------------

class ErrorKind(Enum):
    """Category tag carried by every concrete ioscope error."""

    IO = "io"
    EOF = "eof"
    SYSTEM_CALL = "system_call"

    @property
    def parent(self) -> ErrorKind | None:
        """The broader category this kind specialises, if any."""
        if self is ErrorKind.EOF:
            return ErrorKind.IO
        return None

    def belongs_to(self, category: ErrorKind) -> bool:
        """Return ``True`` when this kind is *category* or specialises it."""
        kind: ErrorKind | None = self
        while kind is not None:
            if kind is category:
                return True
            kind = kind.parent
        return False


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

class IoscopeError(Exception):
    """Base exception for all ioscope errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    kind: ErrorKind | None = None

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

    def belongs_to(self, category: ErrorKind) -> bool:
        """Category query mirroring ``except`` semantics for *category*."""
        return self.kind is not None and self.kind.belongs_to(category)


# --- Stream I/O ------------------------------------------------------------

class IOError(IoscopeError):  # noqa: A001
    """Raised when a handle cannot carry out an I/O operation."""

    kind = ErrorKind.IO


class EOFError(IOError):  # noqa: A001
    """Raised when end-of-stream is hit where more data was expected."""

    kind = ErrorKind.EOF


# --- Platform --------------------------------------------------------------

class SystemCallError(IoscopeError):
    """Raised when the underlying platform call fails."""

    kind = ErrorKind.SYSTEM_CALL

    def __init__(
        self,
        message: str,
        *,
        errno: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.errno: int | None = errno


# ---------------------------------------------------------------------------
# Translation of raw backend failures
# ---------------------------------------------------------------------------

def translate_builtin_error(exc: BaseException) -> IoscopeError:
    """Map a raw Python failure onto the ioscope hierarchy.

    The caller is expected to ``raise translate_builtin_error(exc) from exc``
    so the original failure stays reachable through ``__cause__``.
    """
    if isinstance(exc, IoscopeError):
        return exc
    if isinstance(exc, builtins.EOFError):
        return EOFError(str(exc) or "end of file reached")
    if isinstance(exc, OSError) and exc.errno is not None:
        message = exc.strerror or str(exc)
        if exc.filename is not None:
            message = f"{message}: {exc.filename}"
        return SystemCallError(message, errno=exc.errno)
    return IOError(str(exc) or type(exc).__name__)
