"""Custom exception hierarchy for ytgrab.

All exceptions that cross layer boundaries must inherit from
:class:`YtgrabError`.  Raw yt-dlp exceptions never leave the
infrastructure layer; they are caught there and re-raised as one of the
typed subclasses below.

Hierarchy
---------
YtgrabError
├── InvalidURLError
├── InputFileError
├── MetadataExtractionError
├── VideoUnavailableError
├── FormatSelectionError
├── DownloadFailedError
├── FfmpegNotFoundError
└── EnvironmentError
    ├── DownloaderUnavailableError
    └── EnvironmentCheckError
"""

from __future__ import annotations


class YtgrabError(Exception):
    """Base exception for all ytgrab errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input validation ------------------------------------------------------

class InvalidURLError(YtgrabError):
    """Raised when the provided URL or video ID fails validation."""


class InputFileError(YtgrabError):
    """Raised when a batch input file cannot be found or read."""


# --- Metadata / extraction -------------------------------------------------

class MetadataExtractionError(YtgrabError):
    """Raised when yt-dlp fails to extract video metadata."""


class VideoUnavailableError(YtgrabError):
    """Raised when the target video is unavailable (private, removed, etc.)."""


# --- Format handling -------------------------------------------------------

class FormatSelectionError(YtgrabError):
    """Raised when no format was chosen or the choice is unusable."""


# --- Download --------------------------------------------------------------

class DownloadFailedError(YtgrabError):
    """Raised when the download process terminates with an error."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(YtgrabError):
    """Raised when a required runtime dependency is not available."""


class DownloaderUnavailableError(EnvironmentError):
    """Raised when the yt-dlp version probe fails."""


class EnvironmentCheckError(EnvironmentError):
    """Raised when a required environment precondition is not met."""


class FfmpegNotFoundError(YtgrabError):
    """Raised when ffmpeg cannot be located on the system PATH."""


def append_ytdlp_upgrade_suggestion(hint: str) -> str:
    """Append yt-dlp upgrade guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Also try updating yt-dlp:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    pip install --upgrade yt-dlp",
        )
    )
