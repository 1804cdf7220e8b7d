"""Infrastructure layer — external system integration.

This layer wraps all interaction with yt-dlp and the ffmpeg binaries.
Every raw third-party exception is caught here and re-raised as a
:class:`~ytgrab.exceptions.YtgrabError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from ytgrab.infra.ffmpeg_detector import FfmpegStatus, detect_ffmpeg, require_ffmpeg
from ytgrab.infra.ytdlp_download_provider import YtDlpDownloadProvider
from ytgrab.infra.ytdlp_probe import load_ytdlp, probe_ytdlp
from ytgrab.infra.ytdlp_provider import YtDlpMetadataProvider

__all__: list[str] = [
    "FfmpegStatus",
    "YtDlpDownloadProvider",
    "YtDlpMetadataProvider",
    "detect_ffmpeg",
    "load_ytdlp",
    "probe_ytdlp",
    "require_ffmpeg",
]
