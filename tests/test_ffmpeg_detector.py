"""Tests for ffmpeg detection (infra/ffmpeg_detector.py).

All tests mock :func:`shutil.which` — no system dependency.

Coverage:
* ``detect_ffmpeg`` with both, one, or neither binary on PATH.
* ``require_ffmpeg`` happy path and ``FfmpegNotFoundError``.
* Platform-specific install commands.
* ``FfmpegStatus`` frozen dataclass and derived properties.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from ytgrab.exceptions import FfmpegNotFoundError
from ytgrab.infra.ffmpeg_detector import (
    FfmpegStatus,
    _platform_install_commands,
    detect_ffmpeg,
    require_ffmpeg,
)


def _which(*present: str):
    """Return a ``shutil.which`` replacement that only knows *present*."""
    return lambda name: f"/usr/bin/{name}" if name in present else None


# ---------------------------------------------------------------------------
# detect_ffmpeg
# ---------------------------------------------------------------------------

class TestDetectFfmpeg:
    @patch("ytgrab.infra.ffmpeg_detector.shutil.which")
    def test_found(self, mock_which: MagicMock) -> None:
        mock_which.side_effect = _which("ffmpeg", "ffprobe")
        status = detect_ffmpeg()

        assert status.found is True
        assert status.missing == ()
        assert status.path is not None
        assert "ffmpeg" in status.path.name
        assert status.install_commands == ()

    @patch("ytgrab.infra.ffmpeg_detector.shutil.which")
    def test_not_found(self, mock_which: MagicMock) -> None:
        mock_which.side_effect = _which()
        status = detect_ffmpeg()

        assert status.found is False
        assert status.path is None
        assert status.missing == ("ffmpeg", "ffprobe")
        assert len(status.install_commands) > 0

    @patch("ytgrab.infra.ffmpeg_detector.shutil.which")
    def test_ffprobe_missing_counts_as_not_found(self, mock_which: MagicMock) -> None:
        mock_which.side_effect = _which("ffmpeg")
        status = detect_ffmpeg()

        assert status.found is False
        assert status.path is not None
        assert status.missing == ("ffprobe",)

    @patch("ytgrab.infra.ffmpeg_detector.shutil.which")
    def test_found_returns_resolved_path(self, mock_which: MagicMock) -> None:
        mock_which.side_effect = _which("ffmpeg", "ffprobe")
        status = detect_ffmpeg()
        assert isinstance(status.path, Path)
        assert isinstance(status.paths["ffprobe"], Path)


# ---------------------------------------------------------------------------
# require_ffmpeg
# ---------------------------------------------------------------------------

class TestRequireFfmpeg:
    @patch("ytgrab.infra.ffmpeg_detector.shutil.which")
    def test_found_returns_path(self, mock_which: MagicMock) -> None:
        mock_which.side_effect = _which("ffmpeg", "ffprobe")
        assert isinstance(require_ffmpeg("extract mp3 audio"), Path)

    @patch("ytgrab.infra.ffmpeg_detector.shutil.which")
    def test_missing_raises(self, mock_which: MagicMock) -> None:
        mock_which.side_effect = _which()
        with pytest.raises(FfmpegNotFoundError, match="required to extract mp3 audio"):
            require_ffmpeg("extract mp3 audio")

    @patch("ytgrab.infra.ffmpeg_detector.shutil.which")
    def test_message_names_missing_binary(self, mock_which: MagicMock) -> None:
        mock_which.side_effect = _which("ffmpeg")
        with pytest.raises(FfmpegNotFoundError, match="ffprobe"):
            require_ffmpeg("extract mp3 audio")

    @patch("ytgrab.infra.ffmpeg_detector.shutil.which")
    def test_missing_hint_contains_install_command(self, mock_which: MagicMock) -> None:
        mock_which.side_effect = _which()
        with pytest.raises(FfmpegNotFoundError) as exc_info:
            require_ffmpeg("merge video")
        assert exc_info.value.hint is not None
        assert "Install ffmpeg" in exc_info.value.hint


# ---------------------------------------------------------------------------
# Platform install commands
# ---------------------------------------------------------------------------

class TestPlatformInstallCommands:
    @patch("ytgrab.infra.ffmpeg_detector.platform.system", return_value="Windows")
    def test_windows_commands(self, _mock_sys: MagicMock) -> None:
        cmds = _platform_install_commands()
        assert "winget install Gyan.FFmpeg" in cmds
        assert "choco install ffmpeg" in cmds

    @patch("ytgrab.infra.ffmpeg_detector.platform.system", return_value="Linux")
    def test_linux_commands(self, _mock_sys: MagicMock) -> None:
        cmds = _platform_install_commands()
        assert any("apt" in c for c in cmds)
        assert any("dnf" in c for c in cmds)

    @patch("ytgrab.infra.ffmpeg_detector.platform.system", return_value="Darwin")
    def test_darwin_commands(self, _mock_sys: MagicMock) -> None:
        assert _platform_install_commands() == ("brew install ffmpeg",)

    @patch("ytgrab.infra.ffmpeg_detector.platform.system", return_value="Plan9")
    def test_unknown_platform_points_to_website(self, _mock_sys: MagicMock) -> None:
        (cmd,) = _platform_install_commands()
        assert "ffmpeg.org" in cmd


# ---------------------------------------------------------------------------
# FfmpegStatus dataclass
# ---------------------------------------------------------------------------

class TestFfmpegStatus:
    def test_frozen(self) -> None:
        status = FfmpegStatus(paths={"ffmpeg": Path("/usr/bin/ffmpeg")}, install_commands=())
        with pytest.raises(AttributeError):
            status.install_commands = ("x",)  # type: ignore[misc]

    def test_properties(self) -> None:
        status = FfmpegStatus(
            paths={"ffmpeg": None, "ffprobe": Path("/usr/bin/ffprobe")},
            install_commands=("cmd1", "cmd2"),
        )
        assert status.found is False
        assert status.path is None
        assert status.missing == ("ffmpeg",)
        assert status.install_commands == ("cmd1", "cmd2")
