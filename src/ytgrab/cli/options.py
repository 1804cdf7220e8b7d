"""Shared argparse helpers and :class:`OutputOptions` construction.

Both single-video entry points accept the same path-related flags, each
in a camelCase and a dashed spelling.  Options are validated here, once,
before anything reaches the core layer.
"""

from __future__ import annotations

import argparse
import os
import platform
from collections.abc import Mapping
from pathlib import Path

from ytgrab.core.models import OutputOptions
from ytgrab.utils.constants import (
    ARCHIVE_MEDIA_ROOT_POSIX,
    ARCHIVE_MEDIA_ROOT_WINDOWS,
    DEFAULT_MEDIA_ROOT,
    MEDIA_ROOT_ENV_VAR,
)

PLACEHOLDER_HELP = """\
folder name placeholders (replaced with the current date/time):
  {fullTime}          YYMMDD_HHmmss  (e.g. 231215_143022)
  {date}              YYMMDD         (e.g. 231215)
  {year}   or {y}     YY
  {month}  or {m}     MM
  {day}    or {d}     DD
  {time}              HHmmss
  {hour}   or {h}     HH
  {minute} or {min}   mm
  {second} or {sec}   ss

  e.g. "playlist_{date}_{time}" -> "playlist_231215_143022"
"""


def positive_int(value: str) -> int:
    """argparse ``type`` accepting strictly positive integers."""
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def add_path_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the folder/file naming flags shared by both entry points."""
    group = parser.add_argument_group("output location")
    group.add_argument(
        "--folderName",
        "--folder-name",
        dest="folder_name",
        metavar="NAME",
        help="Folder name template (default: the video title).",
    )
    group.add_argument(
        "--parentFolder",
        "--parent-folder",
        dest="parent_folder",
        metavar="FOLDER",
        help="Folder inserted between the media root and the folder name.",
    )
    group.add_argument(
        "--output-dir",
        dest="output_dir",
        type=Path,
        metavar="PATH",
        help="Write into PATH directly, ignoring the computed folder.",
    )
    group.add_argument(
        "--filename",
        metavar="NAME",
        help="File base name without extension (default: the video title).",
    )


def resolve_media_root(
    default: Path,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Return the media root, honouring :data:`MEDIA_ROOT_ENV_VAR`."""
    env = os.environ if environ is None else environ
    override = env.get(MEDIA_ROOT_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return default


def default_media_root() -> Path:
    return resolve_media_root(DEFAULT_MEDIA_ROOT)


def archive_media_root() -> Path:
    if platform.system() == "Windows":
        return resolve_media_root(Path(ARCHIVE_MEDIA_ROOT_WINDOWS))
    return resolve_media_root(ARCHIVE_MEDIA_ROOT_POSIX.expanduser())


def options_from_args(args: argparse.Namespace, *, media_root: Path) -> OutputOptions:
    """Freeze a parsed namespace into :class:`OutputOptions`.

    Flags that only one entry point defines fall back to the dataclass
    defaults.
    """
    defaults = OutputOptions()
    return OutputOptions(
        folder_name=args.folder_name or None,
        parent_folder=args.parent_folder or None,
        output_dir=args.output_dir,
        filename=args.filename or None,
        audio_only=getattr(args, "audio_only", defaults.audio_only),
        quality=getattr(args, "quality", defaults.quality),
        auto=getattr(args, "auto", defaults.auto),
        write_description=getattr(args, "description", defaults.write_description),
        write_info_json=getattr(args, "json", defaults.write_info_json),
        write_thumbnail=defaults.write_thumbnail,
        media_root=media_root,
    )
