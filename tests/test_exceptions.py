"""Tests for the error hierarchy and builtin-error translation."""

from __future__ import annotations

import builtins
import errno

import pytest

from ioscope.exceptions import (
    EOFError,
    ErrorKind,
    IOError,
    IoscopeError,
    SystemCallError,
    translate_builtin_error,
)


# ---------------------------------------------------------------------------
# Class hierarchy
# ---------------------------------------------------------------------------

class TestHierarchy:
    @pytest.mark.parametrize("exc_class", [IOError, EOFError, SystemCallError])
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[IoscopeError]
    ) -> None:
        assert issubclass(exc_class, IoscopeError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(IoscopeError, Exception)

    def test_eof_is_io_error(self) -> None:
        assert issubclass(EOFError, IOError)

    def test_system_call_is_not_io_error(self) -> None:
        assert not issubclass(SystemCallError, IOError)

    def test_does_not_extend_builtin_names(self) -> None:
        assert not issubclass(IOError, builtins.OSError)
        assert not issubclass(EOFError, builtins.EOFError)

    def test_catching_io_error_catches_eof(self) -> None:
        with pytest.raises(IOError):
            raise EOFError("end of stream")

    def test_catching_io_error_misses_system_call(self) -> None:
        with pytest.raises(SystemCallError):
            try:
                raise SystemCallError("write failed", errno=errno.EPIPE)
            except IOError:  # pragma: no cover
                pytest.fail("SystemCallError must not be caught as IOError")

    def test_hint_is_stored(self) -> None:
        err = IOError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_system_call_keeps_errno(self) -> None:
        err = SystemCallError("no such file", errno=errno.ENOENT)
        assert err.errno == errno.ENOENT
        assert err.hint is None


# ---------------------------------------------------------------------------
# Kind predicate
# ---------------------------------------------------------------------------

class TestErrorKind:
    def test_eof_belongs_to_io(self) -> None:
        assert ErrorKind.EOF.belongs_to(ErrorKind.IO)

    def test_io_does_not_belong_to_eof(self) -> None:
        assert not ErrorKind.IO.belongs_to(ErrorKind.EOF)

    def test_system_call_does_not_belong_to_io(self) -> None:
        assert not ErrorKind.SYSTEM_CALL.belongs_to(ErrorKind.IO)

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_every_kind_belongs_to_itself(self, kind: ErrorKind) -> None:
        assert kind.belongs_to(kind)

    def test_instances_report_their_kind(self) -> None:
        assert EOFError("x").kind is ErrorKind.EOF
        assert EOFError("x").belongs_to(ErrorKind.IO)
        assert not SystemCallError("x").belongs_to(ErrorKind.IO)

    def test_base_has_no_kind(self) -> None:
        assert not IoscopeError("x").belongs_to(ErrorKind.IO)


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------

class TestTranslateBuiltinError:
    def test_package_errors_pass_through(self) -> None:
        err = IOError("already ours")
        assert translate_builtin_error(err) is err

    def test_builtin_eof(self) -> None:
        result = translate_builtin_error(builtins.EOFError())
        assert isinstance(result, EOFError)
        assert str(result) == "end of file reached"

    def test_os_error_with_errno(self) -> None:
        raw = FileNotFoundError(errno.ENOENT, "No such file or directory", "/nope")
        result = translate_builtin_error(raw)
        assert isinstance(result, SystemCallError)
        assert result.errno == errno.ENOENT
        assert str(result) == "No such file or directory: /nope"

    def test_closed_stream_value_error(self) -> None:
        result = translate_builtin_error(ValueError("I/O operation on closed file."))
        assert type(result) is IOError
        assert "closed file" in str(result)

    def test_os_error_without_errno(self) -> None:
        result = translate_builtin_error(OSError("odd failure"))
        assert type(result) is IOError
