"""yt-dlp backed implementation of :class:`~ytgrab.core.protocols.DownloadProvider`.

This module is the only place that invokes the yt-dlp download
machinery.  It translates a :class:`~ytgrab.core.models.DownloadRequest`
into a ``YoutubeDL`` options dict; every yt-dlp exception is re-raised
as :class:`~ytgrab.exceptions.DownloadFailedError`.
"""

from __future__ import annotations

from typing import Any

from ytgrab.core.models import DownloadRequest
from ytgrab.core.protocols import ProgressCallback
from ytgrab.exceptions import DownloadFailedError, append_ytdlp_upgrade_suggestion
from ytgrab.infra.ytdlp_probe import load_ytdlp


class YtDlpDownloadProvider:
    """Concrete :class:`DownloadProvider` backed by the yt-dlp Python API."""

    @staticmethod
    def build_opts(
        request: DownloadRequest,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> dict[str, Any]:
        """Return the ``YoutubeDL`` options for *request*."""
        hooks: list[ProgressCallback] = []
        if progress_callback is not None:
            hooks.append(progress_callback)

        opts: dict[str, Any] = {
            "format": request.format_spec,
            "outtmpl": request.output_template,
            "noplaylist": True,
            "quiet": True,
            "no_warnings": True,
            "no_color": True,
            "progress_hooks": hooks,
            "writethumbnail": request.write_thumbnail,
            "writedescription": request.write_description,
            "writeinfojson": request.write_info_json,
        }
        if request.merge_output_format:
            opts["merge_output_format"] = request.merge_output_format
        if request.extract_audio:
            opts["postprocessors"] = [
                {
                    "key": "FFmpegExtractAudio",
                    "preferredcodec": request.audio_format,
                    "preferredquality": request.audio_quality,
                },
            ]
        return opts

    def download(
        self,
        request: DownloadRequest,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Run *request* through ``YoutubeDL.download``.

        Raises
        ------
        EnvironmentError
            When yt-dlp is not installed.
        DownloadFailedError
            For any yt-dlp error during the download.
        """
        opts = self.build_opts(request, progress_callback=progress_callback)
        yt_dlp = load_ytdlp()

        try:
            with yt_dlp.YoutubeDL(opts) as ydl:
                retcode = ydl.download([request.url])
        except yt_dlp.utils.DownloadError as exc:
            raise DownloadFailedError(
                f"Download failed: {exc}",
                hint=_download_hint(str(exc)),
            ) from exc
        except Exception as exc:
            raise DownloadFailedError(
                f"Download failed: {exc}",
            ) from exc

        if retcode:
            raise DownloadFailedError(
                f"Download failed: yt-dlp exited with status {retcode}.",
            )


def _download_hint(message: str) -> str:
    if "requested format is not available" in message.lower():
        return append_ytdlp_upgrade_suggestion(
            "Retry and choose a listed format, or pass --auto.",
        )
    return "Check the URL, your network, or try a different format."
