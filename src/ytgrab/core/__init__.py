"""Core / service layer — business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No network I/O; the only filesystem access is creating the output
  directory in :class:`DownloadService`.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic given their inputs.
"""

from ytgrab.core.download_service import DownloadService
from ytgrab.core.format_catalog import organize_formats, select_best_format
from ytgrab.core.format_selector import FormatSelector, limit_for_display
from ytgrab.core.metadata_service import MetadataService, normalize_target
from ytgrab.core.models import (
    DateTimeContext,
    DownloadRequest,
    FormatCatalog,
    MediaFormat,
    OutputOptions,
    VideoMetadata,
)
from ytgrab.core.naming import sanitize_filename_minimal, sanitize_folder_name
from ytgrab.core.placeholders import current_context, substitute
from ytgrab.core.protocols import DownloadProvider, FormatPrompt, MetadataProvider

__all__: list[str] = [
    "DateTimeContext",
    "DownloadProvider",
    "DownloadRequest",
    "DownloadService",
    "FormatCatalog",
    "FormatPrompt",
    "FormatSelector",
    "MediaFormat",
    "MetadataProvider",
    "MetadataService",
    "OutputOptions",
    "VideoMetadata",
    "current_context",
    "limit_for_display",
    "normalize_target",
    "organize_formats",
    "sanitize_filename_minimal",
    "sanitize_folder_name",
    "select_best_format",
    "substitute",
]
