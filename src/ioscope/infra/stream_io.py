"""Backend adapting an already-open Python text stream.

Typical use is wrapping :data:`sys.stdout`.  The wrapped stream is only
closed when the handle was created with ``close_stream=True``; by
default closing the handle just detaches it.
"""

from __future__ import annotations

import logging
from typing import TextIO

from ioscope.exceptions import translate_builtin_error
from ioscope.infra.base import TextBackend

logger = logging.getLogger(__name__)


class StreamIO(TextBackend):
    """Concrete handle writing into *stream*.

    Raw ``OSError``/``ValueError``/``EOFError`` failures from the stream
    are re-raised as :class:`~ioscope.exceptions.IoscopeError`
    subclasses.
    """

    def __init__(self, stream: TextIO, *, close_stream: bool = False) -> None:
        super().__init__(
            readable=_probe(stream, "readable"),
            writable=_probe(stream, "writable", default=True),
        )
        self._stream: TextIO = stream
        self._close_stream: bool = close_stream

    @property
    def stream(self) -> TextIO:
        return self._stream

    def _emit(self, text: str) -> None:
        try:
            self._stream.write(text)
        except (OSError, ValueError, EOFError) as exc:
            raise translate_builtin_error(exc) from exc

    def _release(self) -> None:
        if not self._close_stream:
            logger.debug("Detaching from %r without closing it", self._stream)
            return
        try:
            self._stream.close()
        except (OSError, ValueError) as exc:
            raise translate_builtin_error(exc) from exc


def _probe(stream: TextIO, name: str, *, default: bool = False) -> bool:
    """Ask *stream* for a capability flag, tolerating streams without one."""
    method = getattr(stream, name, None)
    if method is None:
        return default
    try:
        return bool(method())
    except (OSError, ValueError):
        return False
