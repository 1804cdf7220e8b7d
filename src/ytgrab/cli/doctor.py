"""``ytgrab doctor`` — environment diagnostics command.

Collects the state of every external collaborator (yt-dlp, ffmpeg,
ffprobe, the default media root) and renders a summary table.  Only a
missing yt-dlp or an unsupported Python counts as a failure; the rest
are warnings.
"""

from __future__ import annotations

import platform
import sys

from ytgrab.cli import exit_codes
from ytgrab.cli.console import console, escape
from ytgrab.cli.options import default_media_root
from ytgrab.exceptions import DownloaderUnavailableError
from ytgrab.infra.ffmpeg_detector import REQUIRED_BINARIES, detect_ffmpeg
from ytgrab.infra.ytdlp_probe import probe_ytdlp
from ytgrab.version import __version__

Check = tuple[str, str, str]

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _ytgrab_version_check() -> Check:
    return "ytgrab", __version__, _OK


def _python_version_check() -> Check:
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    return "Python", version, _OK if ok else "[red]FAIL (>=3.10 required)[/red]"


def _ytdlp_version_check() -> Check:
    try:
        version = probe_ytdlp()
    except DownloaderUnavailableError:
        return "yt-dlp", "NOT INSTALLED", _FAIL
    return "yt-dlp", version, _OK


def _ffmpeg_checks() -> list[Check]:
    """One row per binary yt-dlp needs for merging and mp3 extraction."""
    status = detect_ffmpeg()
    rows: list[Check] = []
    for name in REQUIRED_BINARIES:
        path = status.paths.get(name)
        if path is None:
            rows.append((name, "not found", _WARN))
        else:
            rows.append((name, str(path), _OK))
    return rows


def _media_root_check() -> Check:
    root = default_media_root()
    if root.is_dir():
        return "Media root", str(root), _OK
    return "Media root", f"{root} (missing; use --output-dir)", _WARN


def _os_check() -> Check:
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, _OK


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _render(checks: list[Check]) -> None:
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        console.print("\nytgrab doctor")
        for label, value, status in checks:
            plain = "FAIL" if "FAIL" in status else "WARN" if "WARN" in status else "OK"
            console.print(f"{label:<12} {value:<40} {plain}")
        console.print()
        return

    table = Table(
        title="ytgrab doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, escape(value), status)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Run every check and return SUCCESS or GENERAL_ERROR."""
    checks = [
        _ytgrab_version_check(),
        _python_version_check(),
        _ytdlp_version_check(),
        *_ffmpeg_checks(),
        _media_root_check(),
        _os_check(),
    ]
    _render(checks)

    ffmpeg_status = detect_ffmpeg()
    if not ffmpeg_status.found:
        console.print("ffmpeg is needed to merge streams and extract mp3 audio.")
        console.print("Install using one of the following commands:\n")
        for cmd in ffmpeg_status.install_commands:
            console.print(f"  {cmd}")
        console.print()

    if any("FAIL" in status for _, _, status in checks):
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All required checks passed.[/bold green]")
    return exit_codes.SUCCESS
