"""Infrastructure: yt-dlp import and availability probe.

yt-dlp is imported lazily so that ``--help``, ``--version`` and
``doctor`` keep working when it is missing.  Every other infra module
obtains the library through :func:`load_ytdlp`.
"""

from __future__ import annotations

from types import ModuleType

from ytgrab.exceptions import DownloaderUnavailableError, EnvironmentError

_INSTALL_HINT = "pip install --upgrade yt-dlp"


def load_ytdlp() -> ModuleType:
    """Return the imported ``yt_dlp`` package.

    Raises
    ------
    EnvironmentError
        If yt-dlp is not installed.
    """
    try:
        import yt_dlp
        import yt_dlp.utils  # noqa: F401
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "yt-dlp is not installed. Install with: pip install yt-dlp",
        ) from exc
    return yt_dlp


def probe_ytdlp() -> str:
    """Return the installed yt-dlp version.

    Raises
    ------
    DownloaderUnavailableError
        If yt-dlp cannot be imported or reports no version.
    """
    try:
        from yt_dlp.version import __version__ as version
    except ImportError as exc:
        raise DownloaderUnavailableError(
            "yt-dlp is not available.",
            hint=f"Install or repair it with:\n    {_INSTALL_HINT}",
        ) from exc

    if not version:
        raise DownloaderUnavailableError(
            "yt-dlp did not report a version.",
            hint=f"Reinstall it with:\n    {_INSTALL_HINT}",
        )
    return str(version)
