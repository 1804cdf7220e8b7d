"""ytgrab — YouTube downloader with templated folder layouts.

Wraps the yt-dlp Python API behind a layered core/infra/cli design.
"""

from ytgrab.version import __version__

__all__: list[str] = ["__version__"]
