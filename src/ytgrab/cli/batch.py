"""``ytgrab-batch`` — archive every URL listed in a text file.

Each non-blank line is handed to ``ytgrab-archive`` in a child process,
strictly one at a time.  A failing line is reported and counted; it
never stops the rest of the queue, and failures do not change the exit
status of the batch itself.
"""

from __future__ import annotations

import argparse
import subprocess
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from ytgrab.cli import exit_codes
from ytgrab.cli.console import console, escape, print_error, print_unexpected
from ytgrab.exceptions import InputFileError, YtgrabError
from ytgrab.utils.constants import DEFAULT_BATCH_FILE
from ytgrab.version import __version__

Runner = Callable[[Sequence[str]], int]

_DIVIDER = "-" * 34


@dataclass(slots=True)
class BatchSummary:
    """Running tally for one batch."""

    total: int = 0
    succeeded: int = 0
    failed: int = 0


def build_command(url: str, parent_folder: str | None) -> list[str]:
    """Return the argument vector that archives *url* in a child process."""
    command = [sys.executable, "-m", "ytgrab.cli.archive", url]
    if parent_folder:
        command.extend(["--parent-folder", parent_folder])
    return command


def run_child(command: Sequence[str]) -> int:
    """Run *command* with inherited stdio and return its exit status."""
    return subprocess.run(list(command), check=False).returncode


def read_urls(path: Path) -> list[str]:
    """Return the stripped, non-blank lines of *path*.

    Raises
    ------
    InputFileError
        If the file does not exist or cannot be decoded.
    """
    if not path.is_file():
        raise InputFileError(f"Input file not found: {path}")
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(f"Cannot read input file {path}: {exc}") from exc
    return [line.strip() for line in lines if line.strip()]


def process_urls(
    urls: Iterable[str],
    parent_folder: str | None,
    *,
    runner: Runner = run_child,
) -> BatchSummary:
    """Archive *urls* sequentially and return the tally.

    A line counts as succeeded only when its child exits with status 0.
    """
    summary = BatchSummary()
    for url in urls:
        summary.total += 1
        command = build_command(url, parent_folder)
        console.print(f"\n[bold]Running:[/bold] {escape(' '.join(command[2:]))}")

        try:
            status = runner(command)
        except OSError as exc:
            console.print(f"[red]Could not start download for {escape(url)}:[/red] {escape(exc)}")
            summary.failed += 1
            continue

        if status == exit_codes.SUCCESS:
            console.print(f"[green]Done:[/green] {escape(url)}\n\n{_DIVIDER}")
            summary.succeeded += 1
        else:
            console.print(f"[red]Failed ({status}):[/red] {escape(url)}")
            summary.failed += 1
    return summary


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ytgrab-batch",
        description="Archive every YouTube URL listed in a text file, one per line.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        default=DEFAULT_BATCH_FILE,
        type=Path,
        help=f"File with one URL per line (default: {DEFAULT_BATCH_FILE}).",
    )
    parser.add_argument(
        "parent_folder",
        nargs="?",
        default=None,
        help="Parent folder under the media root for every download.",
    )
    return parser


def main(argv: list[str] | None = None, *, runner: Runner = run_child) -> int:
    """Run the batch and return an exit code.

    Raises
    ------
    InputFileError
        If the input file is missing or unreadable.
    """
    args = _build_parser().parse_args(argv)
    urls = read_urls(args.input_file)

    console.print(f"Reading URLs from [bold]{escape(args.input_file)}[/bold]")
    if args.parent_folder:
        console.print(f"Parent folder: [bold]{escape(args.parent_folder)}[/bold]")

    summary = process_urls(urls, args.parent_folder, runner=runner)

    console.print("\n[bold]Batch results:[/bold]")
    console.print(f"Total:     {summary.total}")
    console.print(f"Succeeded: {summary.succeeded}")
    console.print(f"Failed:    {summary.failed}")
    return exit_codes.SUCCESS


def cli() -> None:
    """Error boundary for the ``ytgrab-batch`` console script."""
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
