"""Format selection: auto sentinel or interactive choice.

The selector never resolves ``"auto"`` to a concrete format itself; that
happens when :class:`~ytgrab.core.download_service.DownloadService`
builds the format spec.
"""

from __future__ import annotations

from ytgrab.core.format_catalog import organize_formats
from ytgrab.core.models import FormatCatalog, VideoMetadata
from ytgrab.core.protocols import FormatPrompt
from ytgrab.exceptions import FormatSelectionError
from ytgrab.utils.constants import (
    AUTO_SELECTION,
    DISPLAY_LIMIT_AUDIO_ONLY,
    DISPLAY_LIMIT_COMBINED,
    DISPLAY_LIMIT_VIDEO_ONLY,
)


def limit_for_display(catalog: FormatCatalog) -> FormatCatalog:
    """Truncate each category independently to its display limit.

    The catalog is already sorted best-first, so truncation keeps the
    highest-quality entries.
    """
    return FormatCatalog(
        combined=catalog.combined[:DISPLAY_LIMIT_COMBINED],
        video_only=catalog.video_only[:DISPLAY_LIMIT_VIDEO_ONLY],
        audio_only=catalog.audio_only[:DISPLAY_LIMIT_AUDIO_ONLY],
    )


class FormatSelector:
    """Turn a video's formats into a single selection string.

    Parameters
    ----------
    prompt:
        Interactive chooser used when automatic mode is off.  May be
        ``None`` for callers that only ever run in automatic mode.
    """

    def __init__(self, prompt: FormatPrompt | None = None) -> None:
        self._prompt: FormatPrompt | None = prompt

    def choose(self, metadata: VideoMetadata, *, auto: bool) -> str:
        """Return a ``format_id`` or :data:`AUTO_SELECTION`.

        Raises
        ------
        FormatSelectionError
            If interactive mode is requested without a prompt, or the
            prompt returns nothing.
        """
        if auto:
            return AUTO_SELECTION

        if self._prompt is None:
            raise FormatSelectionError(
                "Interactive selection is not available.",
                hint="Re-run with --auto to pick the best quality automatically.",
            )

        catalog = limit_for_display(organize_formats(metadata.formats))
        selected = self._prompt(metadata, catalog)
        if not selected:
            raise FormatSelectionError(
                "No format selected.",
                hint="Use arrow keys to pick a format, then press Enter.",
            )
        return selected
