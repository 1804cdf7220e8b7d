"""Core metadata service — URL handling and info-dict parsing.

This is the service the CLI layer uses to turn a URL into a
:class:`~ytgrab.core.models.VideoMetadata`.  It depends on a
:class:`~ytgrab.core.protocols.MetadataProvider` injected at
construction time, keeping the core free of any yt-dlp import.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* Only :class:`~ytgrab.exceptions.YtgrabError` subclasses escape.
* All parsing logic is deterministic and stateless.
"""

from __future__ import annotations

import re
from typing import Any

from ytgrab.core.models import MediaFormat, VideoMetadata
from ytgrab.core.protocols import MetadataProvider
from ytgrab.exceptions import InvalidURLError, MetadataExtractionError, YtgrabError
from ytgrab.utils.constants import (
    VIDEO_ID_PATTERN,
    WATCH_URL_PREFIX,
    YOUTUBE_HOST_MARKERS,
)

_VIDEO_ID_RE = re.compile(VIDEO_ID_PATTERN)


def is_youtube_url(value: str) -> bool:
    """Return ``True`` when *value* mentions a YouTube host."""
    return any(marker in value for marker in YOUTUBE_HOST_MARKERS)


def normalize_target(value: str, *, allow_video_id: bool = False) -> str:
    """Return a YouTube URL for the positional CLI argument.

    A YouTube link typed without a scheme (``www.youtube.com/watch?v=…``)
    gets ``https://`` prepended.  A bare 11-character video ID is
    expanded to a watch URL when *allow_video_id* is set.

    Raises
    ------
    InvalidURLError
        If *value* is neither a YouTube URL nor an accepted video ID.
    """
    stripped = value.strip()
    if not stripped:
        raise InvalidURLError("A YouTube URL is required.")
    if is_youtube_url(stripped):
        if "://" not in stripped:
            return f"https://{stripped}"
        if stripped.startswith(("http://", "https://")):
            return stripped
        raise InvalidURLError(
            f"Not a valid YouTube URL: {stripped}",
            hint="URL must start with http:// or https://",
        )
    if allow_video_id:
        if _VIDEO_ID_RE.match(stripped):
            return f"{WATCH_URL_PREFIX}{stripped}"
        raise InvalidURLError(
            f"Not a valid YouTube URL or video ID: {stripped}",
            hint=(
                "URL example: https://www.youtube.com/watch?v=dQw4w9WgXcQ\n"
                "ID example:  dQw4w9WgXcQ"
            ),
        )
    raise InvalidURLError(
        f"Not a valid YouTube URL: {stripped}",
        hint="Expected a youtube.com or youtu.be link.",
    )


class MetadataService:
    """Stateless service that fetches and parses video metadata.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`MetadataProvider` protocol.
    """

    def __init__(self, provider: MetadataProvider) -> None:
        self._provider: MetadataProvider = provider

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def fetch_video(self, url: str) -> VideoMetadata:
        """Fetch metadata and every reported format for *url*.

        Raises
        ------
        InvalidURLError
            If *url* is empty or not http(s).
        MetadataExtractionError
            If the backend fails to return metadata.
        VideoUnavailableError
            If the video is confirmed unavailable.
        """
        self._validate_url(url)
        info = self._fetch(url.strip())
        return self._parse_metadata(info)

    # ------------------------------------------------------------------
    # URL validation
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_url(url: str) -> None:
        """Raise :class:`InvalidURLError` for empty or non-HTTP URLs."""
        stripped = url.strip()
        if not stripped:
            raise InvalidURLError("URL must not be empty.")
        if not stripped.startswith(("http://", "https://")):
            raise InvalidURLError(
                f"Invalid URL: {stripped}",
                hint="URL must start with http:// or https://",
            )

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    def _fetch(self, url: str) -> dict[str, Any]:
        """Call the provider and ensure only our exceptions escape."""
        try:
            return self._provider.fetch_info(url)
        except YtgrabError:
            raise
        except Exception as exc:
            raise MetadataExtractionError(
                f"Could not fetch video info: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Raw-dict → domain-model parsers (pure)
    # ------------------------------------------------------------------

    @classmethod
    def _parse_metadata(cls, info: dict[str, Any]) -> VideoMetadata:
        """Convert a raw info dict into a :class:`VideoMetadata`."""
        raw_duration = info.get("duration")
        duration: int | None = (
            int(raw_duration) if raw_duration is not None else None
        )
        raw_views = info.get("view_count")
        view_count: int | None = (
            int(raw_views) if isinstance(raw_views, (int, float)) else None
        )
        return VideoMetadata(
            id=str(info.get("id", "")),
            title=str(info.get("title", "Unknown")),
            duration=duration,
            webpage_url=str(info.get("webpage_url", "")),
            view_count=view_count,
            formats=tuple(
                cls._parse_single_format(entry)
                for entry in cls._extract_raw_formats(info)
            ),
        )

    @staticmethod
    def _extract_raw_formats(info: dict[str, Any]) -> list[dict[str, Any]]:
        """Safely pull the ``formats`` list from a raw info dict."""
        raw: object = info.get("formats")
        if not isinstance(raw, list):
            return []
        return [entry for entry in raw if isinstance(entry, dict)]

    @staticmethod
    def _parse_single_format(raw: dict[str, Any]) -> MediaFormat:
        """Convert one raw format dict to a :class:`MediaFormat`."""
        raw_size = raw.get("filesize")
        if raw_size is None:
            raw_size = raw.get("filesize_approx")
        filesize: int | None = int(raw_size) if raw_size is not None else None

        raw_abr = raw.get("abr")
        abr: float | None = (
            float(raw_abr) if isinstance(raw_abr, (int, float)) else None
        )

        raw_height = raw.get("height")
        height: int | None = (
            raw_height
            if isinstance(raw_height, int) and not isinstance(raw_height, bool)
            else None
        )

        return MediaFormat(
            format_id=str(raw.get("format_id", "")),
            ext=str(raw.get("ext", "")),
            height=height,
            abr=abr,
            filesize=filesize,
            vcodec=str(raw.get("vcodec") or "none"),
            acodec=str(raw.get("acodec") or "none"),
        )
