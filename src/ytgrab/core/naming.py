"""Filename and folder-name sanitisation.

Both functions are pure.  The filename variant keeps the title as close
to the original as possible; the folder variant is stricter because the
result becomes a directory shared by several sidecar files.
"""

from __future__ import annotations

import re

from ytgrab.utils.constants import MAX_FOLDER_NAME_LENGTH

_FORBIDDEN_RE = re.compile(r'[<>:"/\\|?*]')
_WHITESPACE_RE = re.compile(r"\s+")
# ASCII word characters, hyphen, and the Hangul syllable / Jamo /
# compatibility Jamo blocks.
_DISALLOWED_FOLDER_CHARS_RE = re.compile(
    r"[^A-Za-z0-9_\-\uAC00-\uD7AF\u1100-\u11FF\u3130-\u318F]"
)


def sanitize_filename_minimal(name: str) -> str:
    """Replace only filesystem-forbidden characters with ``_``."""
    return _FORBIDDEN_RE.sub("_", name)


def sanitize_folder_name(name: str) -> str:
    """Return a conservative folder name derived from *name*.

    Steps, in order: forbidden characters become ``_``, whitespace runs
    collapse into one ``_``, everything outside ASCII word characters,
    ``-`` and Hangul is dropped, and the result is cut to
    :data:`MAX_FOLDER_NAME_LENGTH` code points.
    """
    result = _FORBIDDEN_RE.sub("_", name)
    result = _WHITESPACE_RE.sub("_", result)
    result = _DISALLOWED_FOLDER_CHARS_RE.sub("", result)
    return result[:MAX_FOLDER_NAME_LENGTH]
