"""Allow ``python -m ioscope`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m ioscope`` behaves identically to the ``ioscope`` console
script.
"""

from __future__ import annotations

from ioscope.cli.app import cli

if __name__ == "__main__":
    cli()
