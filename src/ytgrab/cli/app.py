"""``ytgrab`` — single-video downloader with format selection.

This module is the error boundary for the ``ytgrab`` console script.  It
catches :class:`~ytgrab.exceptions.YtgrabError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

No business logic lives here; all work is delegated to the core and
infrastructure layers.
"""

from __future__ import annotations

import argparse
import sys

from ytgrab.cli import exit_codes
from ytgrab.cli.console import (
    console,
    describe_video,
    escape,
    print_error,
    print_unexpected,
)
from ytgrab.cli.options import (
    PLACEHOLDER_HELP,
    add_path_arguments,
    default_media_root,
    options_from_args,
    positive_int,
)
from ytgrab.core.models import OutputOptions
from ytgrab.exceptions import InvalidURLError, YtgrabError
from ytgrab.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the ``ytgrab`` argument parser.

    * ``ytgrab <url> [options]``  — download one video
    * ``ytgrab doctor``           — environment diagnostics
    * ``ytgrab --version``
    """
    parser = argparse.ArgumentParser(
        prog="ytgrab",
        description="Download a YouTube video in the best (or a chosen) quality.",
        epilog=PLACEHOLDER_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="YouTube URL to download, or 'doctor' to run diagnostics.",
    )
    add_path_arguments(parser)

    fmt = parser.add_argument_group("format")
    fmt.add_argument(
        "--audio-only",
        dest="audio_only",
        action="store_true",
        help="Download audio only and convert it to mp3.",
    )
    fmt.add_argument(
        "--quality",
        type=positive_int,
        metavar="N",
        help="Minimum height for automatic selection (e.g. 720, 1080, 2160).",
    )
    fmt.add_argument(
        "--auto",
        action="store_true",
        help="Skip the interactive prompt and pick the best quality.",
    )
    # This entry point always asks for the description and info sidecars.
    parser.set_defaults(description=True, json=True)
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_download(url: str, options: OutputOptions) -> int:
    """Fetch info, choose a format, and download.

    Flow:
    1. Probe yt-dlp (and ffmpeg when audio extraction is requested).
    2. Fetch metadata.
    3. Choose a format (``--auto`` or interactive prompt).
    4. Build the request and download with Rich progress.
    """
    from ytgrab.cli.format_prompt import describe_selection, prompt_format_selection
    from ytgrab.cli.progress import RichProgressHook
    from ytgrab.core.download_service import DownloadService
    from ytgrab.core.format_selector import FormatSelector
    from ytgrab.core.metadata_service import MetadataService
    from ytgrab.infra.ffmpeg_detector import detect_ffmpeg, require_ffmpeg
    from ytgrab.infra.ytdlp_download_provider import YtDlpDownloadProvider
    from ytgrab.infra.ytdlp_probe import probe_ytdlp
    from ytgrab.infra.ytdlp_provider import YtDlpMetadataProvider

    probe_ytdlp()
    if options.audio_only:
        require_ffmpeg("extract mp3 audio")
    elif not detect_ffmpeg().found:
        console.print(
            "[yellow]Warning:[/yellow] ffmpeg not found; "
            "separate video and audio streams cannot be merged."
        )

    console.print(f"\n[bold]Fetching video info…[/bold]  {escape(url)}\n")
    metadata = MetadataService(YtDlpMetadataProvider()).fetch_video(url)

    download_service = DownloadService(YtDlpDownloadProvider())
    output_dir = download_service.resolve_output_dir(metadata, options)
    console.print(f"[bold cyan]Folder:[/bold cyan]   {escape(output_dir)}")
    describe_video(metadata)

    selector = FormatSelector(prompt_format_selection)
    selection = selector.choose(metadata, auto=options.auto)
    describe_selection(metadata, selection)

    request = download_service.build_request(url, metadata, selection, options)
    console.print(
        f"\n[bold green]Starting download…[/bold green]  "
        f"format={escape(request.format_spec)}\n"
    )

    with RichProgressHook() as hook:
        saved_to = download_service.download(request, progress_callback=hook)

    console.print(f"\n[bold green]Download complete.[/bold green]  {escape(saved_to)}")
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from ytgrab.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ``ytgrab`` CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    from ytgrab.core.metadata_service import normalize_target

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.target is None:
        parser.print_help()
        return exit_codes.SUCCESS

    target: str = args.target

    if target.lower() == "doctor":
        return _handle_doctor()

    try:
        url = normalize_target(target)
    except InvalidURLError as exc:
        print_error(exc)
        parser.print_usage(sys.stderr)
        return exit_codes.GENERAL_ERROR

    options = options_from_args(args, media_root=default_media_root())
    return _handle_download(url, options)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except YtgrabError as exc:
        print_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        print_unexpected(exc)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
