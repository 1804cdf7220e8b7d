"""Core download service — builds requests and drives the provider.

The service is responsible for:

* Resolving the output directory and file base name.
* Building the yt-dlp–compatible format string.
* Creating the output directory.
* Delegating to a :class:`~ytgrab.core.protocols.DownloadProvider`.
* The single audio-extraction retry of the two-pass archive mode.

Guarantees
----------
* No ``print()`` and no yt-dlp import.
* The only filesystem access is creating the output directory.
* Only :class:`~ytgrab.exceptions.YtgrabError` subclasses escape.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

from ytgrab.core.models import DownloadRequest, OutputOptions, VideoMetadata
from ytgrab.core.naming import sanitize_filename_minimal, sanitize_folder_name
from ytgrab.core.placeholders import substitute
from ytgrab.core.protocols import DownloadProvider, ProgressCallback
from ytgrab.exceptions import DownloadFailedError, YtgrabError
from ytgrab.utils.constants import AUTO_SELECTION

AUDIO_ONLY_FORMAT_SPEC: str = "bestaudio[ext=m4a]/bestaudio"
ARCHIVE_VIDEO_FORMAT_SPEC: str = "315+140/bestvideo+bestaudio/best"
ARCHIVE_AUDIO_FORMAT_SPEC: str = "bestaudio"
ARCHIVE_AUDIO_FALLBACK_SPEC: str = "bestaudio/best"


class DownloadService:
    """Stateless service that drives the download pipeline.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`DownloadProvider` protocol.
    """

    def __init__(self, provider: DownloadProvider) -> None:
        self._provider: DownloadProvider = provider

    # ------------------------------------------------------------------
    # Path resolution (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def resolve_output_dir(metadata: VideoMetadata, options: OutputOptions) -> Path:
        """Return the directory the files of this video are written to.

        ``options.output_dir`` wins outright.  Otherwise the directory is
        ``media_root / [parent_folder] / <folder>``, where ``<folder>`` is
        the folder-name template (or the title) after placeholder
        substitution and folder-name sanitisation.
        """
        if options.output_dir is not None:
            return options.output_dir

        template = options.folder_name or metadata.title
        folder = sanitize_folder_name(substitute(template))

        base = options.media_root
        if options.parent_folder:
            base = base / options.parent_folder
        return base / folder

    @staticmethod
    def resolve_filename(metadata: VideoMetadata, options: OutputOptions) -> str:
        """Return the file base name (without extension)."""
        if options.filename:
            return options.filename
        return sanitize_filename_minimal(metadata.title)

    # ------------------------------------------------------------------
    # Format string construction (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def build_format_spec(selection: str, quality: int | None = None) -> str:
        """Build the yt-dlp format string for *selection*.

        Rules
        -----
        * ``"auto"`` with a quality floor ``Q`` →
          ``bestvideo[height>=Q]+bestaudio/bestvideo+bestaudio/best``.
        * ``"auto"`` without a floor → ``bestvideo+bestaudio/best``.
        * Anything else is a concrete ``format_id`` and passes through.
        """
        if selection != AUTO_SELECTION:
            return selection
        if quality:
            return f"bestvideo[height>={quality}]+bestaudio/bestvideo+bestaudio/best"
        return "bestvideo+bestaudio/best"

    # ------------------------------------------------------------------
    # Request construction (pure)
    # ------------------------------------------------------------------

    def build_request(
        self,
        url: str,
        metadata: VideoMetadata,
        selection: str,
        options: OutputOptions,
    ) -> DownloadRequest:
        """Build the single-pass request used by ``ytgrab``.

        ``options.audio_only`` replaces the resolved format with an
        audio-extraction selector and drops the thumbnail and description
        side files.
        """
        request = DownloadRequest(
            url=url,
            format_spec=self.build_format_spec(selection, options.quality),
            output_dir=self.resolve_output_dir(metadata, options),
            filename=self.resolve_filename(metadata, options),
            merge_output_format="mp4",
            write_thumbnail=options.write_thumbnail,
            write_description=options.write_description,
            write_info_json=options.write_info_json,
            label=metadata.title,
        )
        if options.audio_only:
            request = replace(
                request,
                format_spec=AUDIO_ONLY_FORMAT_SPEC,
                merge_output_format=None,
                extract_audio=True,
                write_thumbnail=False,
                write_description=False,
            )
        return request

    def build_archive_requests(
        self,
        url: str,
        metadata: VideoMetadata,
        options: OutputOptions,
    ) -> tuple[DownloadRequest, DownloadRequest]:
        """Build the (video, audio) request pair used by ``ytgrab-archive``.

        Both requests share one output directory and file base name, so
        the mp3 lands next to the mp4.
        """
        output_dir = self.resolve_output_dir(metadata, options)
        filename = self.resolve_filename(metadata, options)
        video = DownloadRequest(
            url=url,
            format_spec=ARCHIVE_VIDEO_FORMAT_SPEC,
            output_dir=output_dir,
            filename=filename,
            merge_output_format="mp4",
            write_thumbnail=True,
            write_description=options.write_description,
            write_info_json=options.write_info_json,
            label=metadata.title,
        )
        audio = DownloadRequest(
            url=url,
            format_spec=ARCHIVE_AUDIO_FORMAT_SPEC,
            output_dir=output_dir,
            filename=filename,
            merge_output_format=None,
            extract_audio=True,
            label=f"{metadata.title} (audio)",
        )
        return video, audio

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def download(
        self,
        request: DownloadRequest,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> Path:
        """Create the output directory and run *request*.

        Returns the output directory.

        Raises
        ------
        DownloadFailedError
            When the directory cannot be created or the download fails.
        """
        self._ensure_directory(request.output_dir)
        self._run(request, progress_callback)
        return request.output_dir

    def download_with_audio(
        self,
        video: DownloadRequest,
        audio: DownloadRequest,
        *,
        progress_callback: ProgressCallback | None = None,
        on_retry: Callable[[str], None] | None = None,
    ) -> Path:
        """Run *video*, then *audio*, retrying the audio leg once.

        The retry swaps the audio format for
        :data:`ARCHIVE_AUDIO_FALLBACK_SPEC`.  *on_retry* is invoked with
        the failure message before the retry so the caller can
        report it.  A second audio failure propagates.
        """
        output_dir = self.download(video, progress_callback=progress_callback)
        try:
            self._run(audio, progress_callback)
        except DownloadFailedError as exc:
            if on_retry is not None:
                on_retry(str(exc))
            self._run(
                replace(audio, format_spec=ARCHIVE_AUDIO_FALLBACK_SPEC),
                progress_callback,
            )
        return output_dir

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _ensure_directory(path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DownloadFailedError(
                f"Cannot create output directory {path}: {exc}",
                hint="Check the path and your write permissions, or pass --output-dir.",
            ) from exc

    def _run(
        self,
        request: DownloadRequest,
        progress_callback: ProgressCallback | None,
    ) -> None:
        try:
            self._provider.download(request, progress_callback=progress_callback)
        except YtgrabError:
            raise
        except Exception as exc:
            raise DownloadFailedError(
                f"Unexpected download error: {exc}",
            ) from exc
