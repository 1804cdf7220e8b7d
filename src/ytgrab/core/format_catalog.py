"""Pure format partitioning, sorting, and best-format selection.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Categories
----------
* **combined** — video and audio in one container, resolution known.
* **video-only** — video stream without audio, resolution known.
* **audio-only** — audio stream without video.

Sorting uses :func:`sorted`, which is stable: formats that tie on the
sort key keep their backend order.
"""

from __future__ import annotations

from collections.abc import Sequence

from ytgrab.core.models import FormatCatalog, MediaFormat


# ---------------------------------------------------------------------------
# 1. Filter
# ---------------------------------------------------------------------------

def filter_combined(formats: Sequence[MediaFormat]) -> list[MediaFormat]:
    """Return formats carrying both streams and a known height."""
    return [
        fmt
        for fmt in formats
        if fmt.has_video and fmt.has_audio and fmt.height
    ]


def filter_video_only(formats: Sequence[MediaFormat]) -> list[MediaFormat]:
    """Return video-only formats with a known height."""
    return [
        fmt
        for fmt in formats
        if fmt.has_video and not fmt.has_audio and fmt.height
    ]


def filter_audio_only(formats: Sequence[MediaFormat]) -> list[MediaFormat]:
    """Return audio-only formats (height is irrelevant here)."""
    return [
        fmt
        for fmt in formats
        if not fmt.has_video and fmt.has_audio
    ]


# ---------------------------------------------------------------------------
# 2. Sort
# ---------------------------------------------------------------------------

def sort_by_height(formats: Sequence[MediaFormat]) -> list[MediaFormat]:
    """Sort by vertical resolution, highest first."""
    return sorted(formats, key=lambda fmt: fmt.height or 0, reverse=True)


def sort_by_bitrate(formats: Sequence[MediaFormat]) -> list[MediaFormat]:
    """Sort by audio bitrate, highest first; unknown bitrate counts as 0."""
    return sorted(formats, key=lambda fmt: fmt.abr or 0, reverse=True)


# ---------------------------------------------------------------------------
# Composite operations
# ---------------------------------------------------------------------------

def organize_formats(formats: Sequence[MediaFormat]) -> FormatCatalog:
    """Partition *formats* into a sorted :class:`FormatCatalog`.

    An empty input yields a catalog with three empty tuples.
    """
    return FormatCatalog(
        combined=tuple(sort_by_height(filter_combined(formats))),
        video_only=tuple(sort_by_height(filter_video_only(formats))),
        audio_only=tuple(sort_by_bitrate(filter_audio_only(formats))),
    )


def select_best_format(formats: Sequence[MediaFormat]) -> MediaFormat | None:
    """Return the highest-resolution combined format.

    Falls back to the highest-resolution video-only format, then to
    ``None``.  Audio-only formats are never returned.
    """
    catalog = organize_formats(formats)
    if catalog.combined:
        return catalog.combined[0]
    if catalog.video_only:
        return catalog.video_only[0]
    return None
