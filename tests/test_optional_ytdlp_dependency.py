"""Regression tests for optional yt-dlp dependency boundaries.

These tests ensure CLI paths that do not require yt-dlp still work when
yt-dlp is absent, while runtime download/extraction paths fail cleanly
with a typed environment error.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from ytgrab.cli import exit_codes
from ytgrab.cli.app import main
from ytgrab.core.models import DownloadRequest
from ytgrab.exceptions import DownloaderUnavailableError, EnvironmentError
from ytgrab.infra.ytdlp_download_provider import YtDlpDownloadProvider
from ytgrab.infra.ytdlp_provider import YtDlpMetadataProvider


def _remove_ytdlp(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "yt_dlp", None)
    monkeypatch.setitem(sys.modules, "yt_dlp.utils", None)
    monkeypatch.setitem(sys.modules, "yt_dlp.version", None)


def test_help_works_without_ytdlp(monkeypatch: pytest.MonkeyPatch) -> None:
    _remove_ytdlp(monkeypatch)
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_ytdlp(monkeypatch: pytest.MonkeyPatch) -> None:
    _remove_ytdlp(monkeypatch)
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_doctor_works_without_ytdlp(monkeypatch: pytest.MonkeyPatch) -> None:
    _remove_ytdlp(monkeypatch)
    assert main(["doctor"]) == exit_codes.GENERAL_ERROR


def test_download_stops_at_probe_without_ytdlp(monkeypatch: pytest.MonkeyPatch) -> None:
    _remove_ytdlp(monkeypatch)
    with pytest.raises(DownloaderUnavailableError):
        main(["https://www.youtube.com/watch?v=dQw4w9WgXcQ", "--auto"])


def test_metadata_extraction_raises_environment_error_without_ytdlp(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _remove_ytdlp(monkeypatch)
    provider = YtDlpMetadataProvider()

    with pytest.raises(EnvironmentError, match="yt-dlp is not installed"):
        provider.fetch_info("https://www.youtube.com/watch?v=dQw4w9WgXcQ")


def test_download_raises_environment_error_without_ytdlp(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _remove_ytdlp(monkeypatch)
    provider = YtDlpDownloadProvider()
    request = DownloadRequest(
        url="https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        format_spec="315+140/bestvideo+bestaudio/best",
        output_dir=Path("out"),
        filename="clip",
    )

    with pytest.raises(EnvironmentError, match="yt-dlp is not installed"):
        provider.download(request)
