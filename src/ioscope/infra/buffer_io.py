"""In-memory backend collecting everything written into a string."""

from __future__ import annotations

import io

from ioscope.infra.base import TextBackend


class BufferIO(TextBackend):
    """Readable and writable handle over an :class:`io.StringIO`.

    The collected text stays available through :meth:`getvalue` after
    the handle has been closed.
    """

    def __init__(self, initial: str = "") -> None:
        super().__init__(readable=True, writable=True)
        self._buffer = io.StringIO()
        self._buffer.write(initial)

    def _emit(self, text: str) -> None:
        self._buffer.write(text)

    def _release(self) -> None:
        # Keep the StringIO alive so getvalue() still works.
        pass

    def getvalue(self) -> str:
        return self._buffer.getvalue()
