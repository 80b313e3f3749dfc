"""Shared write/close bookkeeping for the bundled text backends.

Concrete backends only implement :meth:`TextBackend._emit` and
:meth:`TextBackend._release`; the checks every handle must perform
before touching its stream live here.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from ioscope.core.handle import IOHandle
from ioscope.core.models import to_text
from ioscope.exceptions import IOError


class TextBackend(IOHandle):
    """:class:`IOHandle` with open/closed and writability tracking."""

    def __init__(self, *, readable: bool = False, writable: bool = True) -> None:
        self._readable: bool = readable
        self._writable: bool = writable
        self._closed: bool = False

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _emit(self, text: str) -> None:
        """Push non-empty *text* into the underlying stream."""

    @abstractmethod
    def _release(self) -> None:
        """Release the underlying stream; runs at most once."""

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def readable(self) -> bool:
        return not self._closed and self._readable

    @property
    def writable(self) -> bool:
        return not self._closed and self._writable

    def write(self, data: Any) -> int:
        """Write the textual form of *data* and return its length.

        Empty text is accepted on any handle, open or not, and reports
        zero characters written.

        Raises
        ------
        IOError
            When the handle is closed or was not opened for writing.
        """
        text = to_text(data)
        if not text:
            return 0
        if not self.writable:
            raise IOError("not opened for writing")
        self._emit(text)
        return len(text)

    def close(self) -> None:
        """Release the stream.

        Raises
        ------
        IOError
            When the handle was already closed.
        """
        if self._closed:
            raise IOError("closed stream")
        self._release()
        self._closed = True
        self._readable = False
        self._writable = False

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<{type(self).__name__} {state}>"
