"""``ytgrab-archive`` — two-pass archival download of one video.

Downloads the pinned best video/audio pair merged to mp4 together with
the thumbnail, then a separate mp3 of the audio track into the same
folder.  Accepts a bare 11-character video ID in place of a URL.

This is also the command the batch driver runs for each input line
(``python -m ytgrab.cli.archive``).
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
    archive_media_root,
    options_from_args,
)
from ytgrab.core.models import OutputOptions
from ytgrab.exceptions import InvalidURLError, YtgrabError
from ytgrab.version import __version__


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ytgrab-archive",
        description=(
            "Archive a YouTube video: best video as mp4, thumbnail, "
            "and a separate mp3 audio track."
        ),
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
        help="YouTube URL or 11-character video ID.",
    )
    add_path_arguments(parser)

    sidecars = parser.add_argument_group("side files")
    sidecars.add_argument(
        "--desc",
        "--description",
        dest="description",
        action="store_true",
        help="Also save the video description.",
    )
    sidecars.add_argument(
        "--json",
        action="store_true",
        help="Also save the full info JSON.",
    )
    return parser


def _announce_files(options: OutputOptions) -> None:
    console.print("\n[bold]Files to save:[/bold]")
    console.print("- video (mp4)")
    console.print("- audio (mp3)")
    console.print("- thumbnail")
    if options.write_description:
        console.print("- description")
    if options.write_info_json:
        console.print("- info JSON")


def _handle_archive(url: str, options: OutputOptions) -> int:
    """Fetch info, then run the video pass and the audio pass."""
    from ytgrab.cli.progress import RichProgressHook
    from ytgrab.core.download_service import DownloadService
    from ytgrab.core.metadata_service import MetadataService
    from ytgrab.infra.ffmpeg_detector import require_ffmpeg
    from ytgrab.infra.ytdlp_download_provider import YtDlpDownloadProvider
    from ytgrab.infra.ytdlp_probe import probe_ytdlp
    from ytgrab.infra.ytdlp_provider import YtDlpMetadataProvider

    probe_ytdlp()
    require_ffmpeg("merge video and extract mp3 audio")

    console.print("[bold]Fetching video info…[/bold]")
    metadata = MetadataService(YtDlpMetadataProvider()).fetch_video(url)

    console.print()
    describe_video(metadata)
    _announce_files(options)

    service = DownloadService(YtDlpDownloadProvider())
    video, audio = service.build_archive_requests(url, metadata, options)
    console.print(f"\n[bold cyan]Saving to:[/bold cyan] {escape(video.output_dir)}")

    def _report_retry(message: str) -> None:
        console.print(f"\n[yellow]Audio download failed; retrying once.[/yellow]  {escape(message)}")

    with RichProgressHook() as hook:
        saved_to = service.download_with_audio(
            video,
            audio,
            progress_callback=hook,
            on_retry=_report_retry,
        )

    console.print(f"\n[bold green]Download complete.[/bold green]  {escape(saved_to)}")
    return exit_codes.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Run the ``ytgrab-archive`` CLI and return an exit code."""
    from ytgrab.core.metadata_service import is_youtube_url, normalize_target

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.target is None:
        parser.print_help()
        return exit_codes.SUCCESS

    try:
        url = normalize_target(args.target, allow_video_id=True)
    except InvalidURLError as exc:
        print_error(exc)
        parser.print_usage(sys.stderr)
        return exit_codes.GENERAL_ERROR

    if not is_youtube_url(args.target):
        console.print(f"Expanded video ID to {escape(url)}")

    options = options_from_args(args, media_root=archive_media_root())
    return _handle_archive(url, options)


def cli() -> None:
    """Error boundary for the ``ytgrab-archive`` console script."""
    try:
        sys.exit(main())
    except YtgrabError as exc:
        print_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        print_unexpected(exc)
        sys.exit(exit_codes.UNEXPECTED_ERROR)


if __name__ == "__main__":
    cli()
