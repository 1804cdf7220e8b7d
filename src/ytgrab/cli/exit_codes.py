"""Exit-code constants used by the CLI layer.

Every exit path uses one of these well-known values rather than magic
integers scattered across the entry points.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed, or usage was printed."""

GENERAL_ERROR: int = 1
"""A YtgrabError was caught, or the input was rejected."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
