"""yt-dlp backed implementation of :class:`~ytgrab.core.protocols.MetadataProvider`.

All yt-dlp exceptions raised while extracting info are caught here and
re-raised as typed :class:`~ytgrab.exceptions.YtgrabError` subclasses.
"""

from __future__ import annotations

from typing import Any

from ytgrab.exceptions import MetadataExtractionError, VideoUnavailableError
from ytgrab.infra.ytdlp_probe import load_ytdlp


class YtDlpMetadataProvider:
    """Concrete :class:`MetadataProvider` backed by the yt-dlp Python API.

    Usage::

        provider = YtDlpMetadataProvider()
        info = provider.fetch_info("https://www.youtube.com/watch?v=...")
    """

    # Substrings in yt-dlp error messages that mean the video itself is
    # gone, as opposed to a transient or extraction error.
    _UNAVAILABLE_SIGNALS: tuple[str, ...] = (
        "unavailable",
        "private video",
        "removed",
        "not available",
        "account terminated",
        "sign in to confirm your age",
    )

    @staticmethod
    def _build_opts() -> dict[str, Any]:
        """Return yt-dlp options for a metadata-only, single-video query."""
        return {
            "quiet": True,
            "no_warnings": True,
            "no_color": True,
            "skip_download": True,
            "noplaylist": True,
        }

    def fetch_info(self, url: str) -> dict[str, Any]:
        """Extract the info dict for *url* without downloading anything.

        Raises
        ------
        EnvironmentError
            When yt-dlp is not installed.
        VideoUnavailableError
            When yt-dlp reports the video as unavailable / private / removed.
        MetadataExtractionError
            For all other extraction failures.
        """
        yt_dlp = load_ytdlp()

        try:
            with yt_dlp.YoutubeDL(self._build_opts()) as ydl:
                info: Any = ydl.extract_info(url, download=False)
        except yt_dlp.utils.DownloadError as exc:
            raise self._map_error(exc) from exc
        except Exception as exc:
            raise MetadataExtractionError(
                f"Could not fetch video info: {exc}",
            ) from exc

        if not isinstance(info, dict):
            raise MetadataExtractionError(
                "Could not fetch video info: yt-dlp returned no metadata.",
                hint="The URL may not point to a single video.",
            )

        return dict(info)

    @classmethod
    def _map_error(cls, exc: Exception) -> MetadataExtractionError | VideoUnavailableError:
        """Translate a yt-dlp ``DownloadError`` into a domain exception."""
        message = str(exc)
        if any(signal in message.lower() for signal in cls._UNAVAILABLE_SIGNALS):
            return VideoUnavailableError(
                message,
                hint="The video may be private, removed, or geo-restricted.",
            )
        return MetadataExtractionError(f"Could not fetch video info: {message}")
