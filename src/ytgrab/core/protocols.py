"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and CLI prompts
must satisfy.  Core code depends ONLY on these protocols — never on
concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from ytgrab.core.models import DownloadRequest, FormatCatalog, VideoMetadata

ProgressCallback = Callable[[dict[str, Any]], None]


class MetadataProvider(Protocol):
    """Contract for metadata extraction backends.

    Any object that implements :meth:`fetch_info` with the correct
    signature satisfies this protocol structurally.
    """

    def fetch_info(self, url: str) -> dict[str, Any]:
        """Fetch raw metadata for *url* and return a provider-specific dict.

        The returned dict must contain at least:

        * ``"id"`` — video identifier (``str``)
        * ``"title"`` — video title (``str``)
        * ``"webpage_url"`` — canonical page URL (``str``)
        * ``"formats"`` — list of format dicts (``list[dict]``)

        Raises
        ------
        MetadataExtractionError
            When the backend fails to extract metadata.
        VideoUnavailableError
            When the target video is confirmed unavailable.
        """
        ...  # pragma: no cover


class DownloadProvider(Protocol):
    """Contract for download backends.

    Implementations translate a :class:`DownloadRequest` into backend
    options and must map backend exceptions to
    :class:`~ytgrab.exceptions.DownloadFailedError`.
    """

    def download(
        self,
        request: DownloadRequest,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Perform the transfer described by *request*.

        Raises
        ------
        DownloadFailedError
            When the download fails for any reason.
        """
        ...  # pragma: no cover


class FormatPrompt(Protocol):
    """Contract for the interactive format chooser."""

    def __call__(self, metadata: VideoMetadata, catalog: FormatCatalog) -> str:
        """Return the chosen ``format_id`` or the ``"auto"`` sentinel.

        Raises
        ------
        FormatSelectionError
            When the user cancels the prompt.
        """
        ...  # pragma: no cover
