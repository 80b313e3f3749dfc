"""Base class for every I/O handle.

:class:`IOHandle` owns no stream state of its own.  Subclasses (the
backends in :mod:`ioscope.infra`) provide the primitives:

* ``write(data)`` — append the textual content of *data*;
* ``close()`` — release the connection;
* ``closed`` — whether ``close`` has already run;

and inherit ``print``, ``puts`` and the scoped :meth:`IOHandle.open`
helper from here.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType
from typing import Any, TypeVar

from ioscope.core.writer import write_print, write_puts

logger = logging.getLogger(__name__)

H = TypeVar("H", bound="IOHandle")
R = TypeVar("R")


class IOHandle(ABC):
    """Shared output-formatting and lifecycle contract for backends."""

    # ------------------------------------------------------------------
    # Backend primitives
    # ------------------------------------------------------------------

    @abstractmethod
    def write(self, data: Any) -> int:
        """Append the textual content of *data*; return the amount written."""

    @abstractmethod
    def close(self) -> None:
        """Release the backend connection."""

    @property
    @abstractmethod
    def closed(self) -> bool:
        """Whether ``close`` has already run."""

    # ------------------------------------------------------------------
    # Scoped construction
    # ------------------------------------------------------------------

    @classmethod
    def open(
        cls: type[H],
        *args: Any,
        block: Callable[[H], R] | None = None,
        **kwargs: Any,
    ) -> H | R:
        """Construct a handle and optionally run *block* against it.

        Without *block* the new handle is returned and the caller owns
        its lifecycle.  With *block*, ``close`` is called exactly once
        after the block finishes, whether it returned or raised, and the
        block's result is returned.

        Exceptions raised by *block* are re-raised after ``close``.  An
        exception raised by ``close`` itself propagates normally.
        """
        handle = cls(*args, **kwargs)
        logger.debug("Opened %r", handle)
        if block is None:
            return handle

        try:
            result = block(handle)
        finally:
            logger.debug("Releasing %r", handle)
            handle.close()
        return result

    def __enter__(self: H) -> H:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        logger.debug("Releasing %r", self)
        self.close()

    # ------------------------------------------------------------------
    # Formatted output
    # ------------------------------------------------------------------

    def print(self, *args: object) -> None:
        """Write every argument unchanged, without separators or newline."""
        write_print(self, *args)

    def puts(self, *args: object) -> None:
        """Write every argument followed by a newline.

        See :func:`ioscope.core.writer.write_puts` for the exact rules.
        """
        write_puts(self, *args)
