"""Domain models for ytgrab.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and trivial derived properties.  They carry
zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from ytgrab.utils.constants import DEFAULT_MEDIA_ROOT


# ---------------------------------------------------------------------------
# Date/time snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DateTimeContext:
    """A moment in time decomposed into zero-padded string fields.

    Short aliases (``y``, ``m``, ``d``, ``h``, ``min``, ``sec``) are
    exposed as properties so each value is stored exactly once.
    """

    full_time: str
    """``YYMMDD_HHmmss``."""

    date: str
    """``YYMMDD``."""

    year: str
    month: str
    day: str

    time: str
    """``HHmmss``."""

    hour: str
    minute: str
    second: str

    @classmethod
    def from_datetime(cls, moment: datetime) -> DateTimeContext:
        year = f"{moment.year % 100:02d}"
        month = f"{moment.month:02d}"
        day = f"{moment.day:02d}"
        hour = f"{moment.hour:02d}"
        minute = f"{moment.minute:02d}"
        second = f"{moment.second:02d}"
        date = f"{year}{month}{day}"
        time = f"{hour}{minute}{second}"
        return cls(
            full_time=f"{date}_{time}",
            date=date,
            year=year,
            month=month,
            day=day,
            time=time,
            hour=hour,
            minute=minute,
            second=second,
        )

    @property
    def y(self) -> str:
        return self.year

    @property
    def m(self) -> str:
        return self.month

    @property
    def d(self) -> str:
        return self.day

    @property
    def h(self) -> str:
        return self.hour

    @property
    def min(self) -> str:
        return self.minute

    @property
    def sec(self) -> str:
        return self.second


# ---------------------------------------------------------------------------
# Individual format descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MediaFormat:
    """A single media format reported by the extraction backend.

    May be muxed (video + audio), video-only, or audio-only depending on
    the two codec fields.
    """

    format_id: str
    """Backend-specific identifier for this format."""

    ext: str
    """Container extension (e.g. ``mp4``, ``webm``, ``m4a``)."""

    height: int | None
    """Vertical resolution in pixels, or ``None`` if unknown."""

    abr: float | None
    """Average audio bitrate in kbps, or ``None`` if unknown."""

    filesize: int | None
    """File size in bytes, or ``None`` if unknown."""

    vcodec: str
    """Video codec name.  ``"none"`` when the stream has no video."""

    acodec: str
    """Audio codec name.  ``"none"`` when the stream has no audio."""

    @property
    def has_video(self) -> bool:
        return self.vcodec != "none"

    @property
    def has_audio(self) -> bool:
        return self.acodec != "none"


# ---------------------------------------------------------------------------
# Video metadata
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VideoMetadata:
    """Top-level metadata for a single YouTube video."""

    id: str
    """YouTube video ID (e.g. ``dQw4w9WgXcQ``)."""

    title: str
    """Human-readable video title."""

    duration: int | None
    """Duration in seconds, or ``None`` if unavailable."""

    webpage_url: str
    """Canonical URL of the video page."""

    view_count: int | None = None
    """Number of views, or ``None`` if unavailable."""

    formats: tuple[MediaFormat, ...] = ()
    """Every format the backend reported, in backend order."""


# ---------------------------------------------------------------------------
# Organised formats
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FormatCatalog:
    """Formats partitioned into the three selectable categories.

    Each tuple is already sorted best-first.
    """

    combined: tuple[MediaFormat, ...] = ()
    video_only: tuple[MediaFormat, ...] = ()
    audio_only: tuple[MediaFormat, ...] = ()

    def __len__(self) -> int:
        return len(self.combined) + len(self.video_only) + len(self.audio_only)

    def __bool__(self) -> bool:
        return len(self) > 0


# ---------------------------------------------------------------------------
# User configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OutputOptions:
    """Options parsed once from the command line.

    Every field is optional; the defaults place output under
    ``media_root/<video title>/<video title>.<ext>``.
    """

    folder_name: str | None = None
    """Folder name template; may contain ``{date}``-style placeholders."""

    parent_folder: str | None = None
    """Folder inserted between ``media_root`` and the folder name."""

    output_dir: Path | None = None
    """Explicit directory; replaces the whole computed directory."""

    filename: str | None = None
    """Explicit file base name (no extension)."""

    audio_only: bool = False
    quality: int | None = None
    """Minimum vertical resolution for automatic selection."""

    auto: bool = False
    write_description: bool = False
    write_info_json: bool = False
    write_thumbnail: bool = True
    media_root: Path = DEFAULT_MEDIA_ROOT


# ---------------------------------------------------------------------------
# Download request descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DownloadRequest:
    """Everything the download backend needs for one transfer."""

    url: str
    format_spec: str
    output_dir: Path
    filename: str
    merge_output_format: str | None = "mp4"
    write_thumbnail: bool = False
    write_description: bool = False
    write_info_json: bool = False
    extract_audio: bool = False
    audio_format: str = "mp3"
    audio_quality: str = "0"
    label: str = field(default="", compare=False)
    """Short human-readable description used for progress display."""

    @property
    def output_template(self) -> str:
        """yt-dlp ``outtmpl`` with the extension left for yt-dlp to fill.

        yt-dlp treats ``%`` as the start of a template field, so literal
        percent signs in the directory or filename are doubled.
        """
        literal = str(self.output_dir / self.filename).replace("%", "%%")
        return f"{literal}.%(ext)s"
