"""Infrastructure: ffmpeg / ffprobe detection and install guidance.

yt-dlp shells out to ffmpeg to merge separate video and audio streams
into mp4, and to ffmpeg plus ffprobe to extract mp3 audio.  This module
only looks for the binaries; it never installs anything.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from ytgrab.exceptions import FfmpegNotFoundError

REQUIRED_BINARIES: tuple[str, ...] = ("ffmpeg", "ffprobe")


@dataclass(frozen=True, slots=True)
class FfmpegStatus:
    """Result of probing PATH for the ffmpeg tool suite."""

    paths: dict[str, Path | None]
    """Resolved location of each binary in :data:`REQUIRED_BINARIES`."""

    install_commands: tuple[str, ...]
    """Suggested install commands; empty when nothing is missing."""

    @property
    def found(self) -> bool:
        return all(path is not None for path in self.paths.values())

    @property
    def missing(self) -> tuple[str, ...]:
        return tuple(name for name, path in self.paths.items() if path is None)

    @property
    def path(self) -> Path | None:
        return self.paths.get("ffmpeg")


def detect_ffmpeg() -> FfmpegStatus:
    """Look up every required binary on PATH."""
    paths: dict[str, Path | None] = {}
    for name in REQUIRED_BINARIES:
        located = shutil.which(name)
        paths[name] = Path(located).resolve() if located is not None else None

    missing = any(path is None for path in paths.values())
    return FfmpegStatus(
        paths=paths,
        install_commands=_platform_install_commands() if missing else (),
    )


def require_ffmpeg(purpose: str) -> Path:
    """Return the ffmpeg path or raise :class:`FfmpegNotFoundError`.

    *purpose* completes the sentence "ffmpeg is required to ...".
    """
    status = detect_ffmpeg()
    if status.found and status.path is not None:
        return status.path

    hint_lines = ["Install ffmpeg using one of:"]
    hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
    raise FfmpegNotFoundError(
        f"ffmpeg is required to {purpose} but {', '.join(status.missing)} "
        "could not be found on PATH.",
        hint="\n".join(hint_lines),
    )


def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install Gyan.FFmpeg",
            "choco install ffmpeg",
        )
    if system == "linux":
        return (
            "sudo apt install ffmpeg",
            "sudo dnf install ffmpeg",
            "sudo pacman -S ffmpeg",
        )
    if system == "darwin":
        return ("brew install ffmpeg",)
    return ("Download a build from https://ffmpeg.org/download.html",)
