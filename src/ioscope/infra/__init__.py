"""Infrastructure layer — concrete backends over real streams.

Every raw Python I/O exception must be caught here and re-raised as an
:class:`~ioscope.exceptions.IoscopeError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output outside the wrapped streams.
"""

from ioscope.infra.base import TextBackend
from ioscope.infra.buffer_io import BufferIO
from ioscope.infra.file_io import FileIO, parse_mode
from ioscope.infra.stream_io import StreamIO

__all__: list[str] = [
    "BufferIO",
    "FileIO",
    "StreamIO",
    "TextBackend",
    "parse_mode",
]
