"""Allow ``python -m ytgrab`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m ytgrab`` behaves identically to the ``ytgrab`` console
script.
"""

from __future__ import annotations

from ytgrab.cli.app import cli

if __name__ == "__main__":
    cli()
