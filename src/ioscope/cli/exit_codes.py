"""Process exit codes for the ``ioscope`` command.

Every exit path of :func:`ioscope.cli.app.cli` goes through
:func:`exit_code_for`, so the mapping from error kind to exit status is
defined once.
"""

from __future__ import annotations

from enum import IntEnum

from ioscope.exceptions import ErrorKind, IoscopeError


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    """An :class:`IoscopeError` without a more specific code (bad input, I/O)."""
    UNEXPECTED = 2
    SYSTEM_CALL = 3
    """The platform call under a handle failed (missing path, broken pipe)."""
    INTERRUPTED = 130
    """Ctrl+C; POSIX 128 + SIGINT."""


def exit_code_for(exc: BaseException) -> ExitCode:
    """Return the exit code for an exception escaping ``main``."""
    if isinstance(exc, KeyboardInterrupt):
        return ExitCode.INTERRUPTED
    if isinstance(exc, IoscopeError):
        if exc.belongs_to(ErrorKind.SYSTEM_CALL):
            return ExitCode.SYSTEM_CALL
        return ExitCode.ERROR
    return ExitCode.UNEXPECTED
