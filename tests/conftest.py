"""Shared pytest fixtures and configuration for the ioscope test suite.

Guidelines
----------
* Core tests use in-memory doubles — no filesystem access.
* File backend tests write only under ``tmp_path``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from typing import Any

import pytest

from ioscope.core.handle import IOHandle


class RecordingIO(IOHandle):
    """Handle double that records every ``write`` and ``close`` call."""

    instances: list[RecordingIO] = []

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.args = args
        self.kwargs = kwargs
        self.writes: list[Any] = []
        self.close_calls = 0
        RecordingIO.instances.append(self)

    def write(self, data: Any) -> int:
        self.writes.append(data)
        return 1

    def close(self) -> None:
        self.close_calls += 1

    @property
    def closed(self) -> bool:
        return self.close_calls > 0

    @property
    def output(self) -> str:
        return "".join(str(item) for item in self.writes)


@pytest.fixture()
def recording_io() -> RecordingIO:
    return RecordingIO()


@pytest.fixture()
def recording_cls() -> type[RecordingIO]:
    return RecordingIO


@pytest.fixture(autouse=True)
def _reset_recording_instances() -> None:
    RecordingIO.instances.clear()
