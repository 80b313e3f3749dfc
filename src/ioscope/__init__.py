"""ioscope — formatted output and scoped lifecycle for I/O handles.

Backends supply ``write`` and ``close``; this package layers ``print``,
``puts``, a scoped ``open`` helper and a typed error hierarchy on top.
"""

from ioscope.core.handle import IOHandle
from ioscope.exceptions import EOFError, ErrorKind, IOError, IoscopeError, SystemCallError
from ioscope.version import __version__

__all__: list[str] = [
    "EOFError",
    "ErrorKind",
    "IOError",
    "IOHandle",
    "IoscopeError",
    "SystemCallError",
    "__version__",
]
