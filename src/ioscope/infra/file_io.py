"""File backend — a handle over a path opened with the builtin ``open``.

Access flags are derived from the mode string the same way a C stdio
``fopen`` mode is read: the first character picks read (``r``), write
(``w``) or append (``a``) access, and a ``+`` in second or third position
grants both.  Only text modes are accepted.

Every ``OSError`` raised while opening, writing or closing the file is
re-raised as :class:`~ioscope.exceptions.SystemCallError`.
"""

from __future__ import annotations

import logging
import os
from typing import TextIO

from ioscope.exceptions import IOError, translate_builtin_error
from ioscope.infra.base import TextBackend

logger = logging.getLogger(__name__)

_ACCESS_CHARS: str = "rwa"
_MODIFIER_CHARS: str = "+t"


def parse_mode(mode: str) -> tuple[bool, bool]:
    """Return ``(readable, writable)`` for a text access *mode*.

    Raises
    ------
    IOError
        When *mode* is empty, starts with an unknown access character or
        carries unsupported modifiers (e.g. binary ``b``).
    """
    if not mode or mode[0] not in _ACCESS_CHARS:
        raise IOError(
            f"invalid access mode {mode!r}",
            hint="Use one of: r, w, a, optionally followed by '+'.",
        )
    modifiers = mode[1:]
    if (
        len(modifiers) > 2
        or any(char not in _MODIFIER_CHARS for char in modifiers)
        or len(set(modifiers)) != len(modifiers)
    ):
        raise IOError(f"invalid access mode {mode!r}")

    readable = mode[0] == "r"
    writable = mode[0] in ("w", "a")
    if "+" in mode[1:3]:
        readable = writable = True
    return readable, writable


class FileIO(TextBackend):
    """Concrete handle over the file at *path*."""

    def __init__(self, path: str | os.PathLike[str], mode: str = "r") -> None:
        readable, writable = parse_mode(mode)
        super().__init__(readable=readable, writable=writable)
        self._path: str = os.fspath(path)
        self._mode: str = mode
        try:
            self._stream: TextIO = open(self._path, mode, encoding="utf-8")  # noqa: SIM115
        except (OSError, ValueError) as exc:
            raise translate_builtin_error(exc) from exc
        logger.debug("Opened file %s (mode=%s)", self._path, mode)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def path(self) -> str:
        return self._path

    @property
    def mode(self) -> str:
        return self._mode

    @classmethod
    def exists(cls, path: str | os.PathLike[str]) -> bool:
        """Return ``True`` if *path* exists and can be opened for reading."""
        try:
            with open(path, encoding="utf-8"):
                return True
        except OSError:
            return False

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _emit(self, text: str) -> None:
        try:
            self._stream.write(text)
        except (OSError, ValueError) as exc:
            raise translate_builtin_error(exc) from exc

    def _release(self) -> None:
        try:
            self._stream.close()
        except OSError as exc:
            raise translate_builtin_error(exc) from exc
        logger.debug("Closed file %s", self._path)

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<FileIO {self._path!r} mode={self._mode!r} {state}>"
