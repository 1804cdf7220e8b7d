"""Project-wide constants.

Everything here is plain data so that every layer can import it without
pulling in yt-dlp, rich, or questionary.
"""

from __future__ import annotations

from pathlib import Path, PureWindowsPath

# ---------------------------------------------------------------------------
# Media roots
# ---------------------------------------------------------------------------

MEDIA_ROOT_ENV_VAR: str = "YTGRAB_MEDIA_ROOT"
"""Environment variable that overrides every default media root."""

DEFAULT_MEDIA_ROOT: Path = Path("/volume1/media/datas/youtubes")
"""Base directory used by ``ytgrab`` when ``--output-dir`` is absent."""

ARCHIVE_MEDIA_ROOT_WINDOWS: PureWindowsPath = PureWindowsPath("Z:/media")
"""Base directory used by ``ytgrab-archive`` on Windows."""

ARCHIVE_MEDIA_ROOT_POSIX: Path = Path("~/media")
"""Base directory used by ``ytgrab-archive`` elsewhere (``~`` expanded)."""

# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------

MAX_FOLDER_NAME_LENGTH: int = 100
"""Folder names are truncated to this many code points."""

# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------

YOUTUBE_HOST_MARKERS: tuple[str, ...] = ("youtube.com", "youtu.be")
WATCH_URL_PREFIX: str = "https://www.youtube.com/watch?v="
VIDEO_ID_PATTERN: str = r"^[A-Za-z0-9_-]{11}$"

# ---------------------------------------------------------------------------
# Format selection
# ---------------------------------------------------------------------------

AUTO_SELECTION: str = "auto"
"""Sentinel returned by the selector when the user picks best quality."""

DISPLAY_LIMIT_COMBINED: int = 10
DISPLAY_LIMIT_VIDEO_ONLY: int = 10
DISPLAY_LIMIT_AUDIO_ONLY: int = 5

# ---------------------------------------------------------------------------
# Batch
# ---------------------------------------------------------------------------

DEFAULT_BATCH_FILE: str = "ise.txt"
