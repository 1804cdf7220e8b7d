"""Interactive format selection UI for the CLI layer.

Renders the (already display-limited) :class:`FormatCatalog` as a
questionary list with one section per category and a trailing
auto-select entry.  The function :func:`prompt_format_selection`
satisfies the :class:`~ytgrab.core.protocols.FormatPrompt` protocol.
"""

from __future__ import annotations

from typing import Any

from ytgrab.cli.console import console, escape
from ytgrab.core.format_catalog import select_best_format
from ytgrab.core.models import FormatCatalog, MediaFormat, VideoMetadata
from ytgrab.exceptions import EnvironmentError, FormatSelectionError
from ytgrab.utils.constants import AUTO_SELECTION

_RULE = "───────────────"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Presentation helpers (pure)
# ---------------------------------------------------------------------------

def _format_filesize(filesize: int | None) -> str:
    """Convert bytes to a rounded ``"123MB"`` string, or ``"N/A"``."""
    if filesize is None:
        return "N/A"
    return f"{round(filesize / 1024 / 1024)}MB"


def _format_bitrate(abr: float | None) -> str:
    if not abr:
        return "N/A"
    return f"{abr:g}kbps"


def _video_label(fmt: MediaFormat) -> str:
    return f"  {fmt.height}p ({fmt.ext}) - {_format_filesize(fmt.filesize)}"


def _audio_label(fmt: MediaFormat) -> str:
    return f"  {fmt.ext} - {_format_bitrate(fmt.abr)}"


def build_choices(questionary: Any, catalog: FormatCatalog) -> list[Any]:
    """Build the questionary choice list for *catalog*.

    Empty categories get no heading.  The auto-select entry is always
    last.
    """
    sections: tuple[tuple[str, tuple[MediaFormat, ...], Any], ...] = (
        ("Video + audio", catalog.combined, _video_label),
        ("Video only", catalog.video_only, _video_label),
        ("Audio only", catalog.audio_only, _audio_label),
    )

    choices: list[Any] = []
    for heading, formats, label in sections:
        if not formats:
            continue
        choices.append(questionary.Separator(f"{heading} {_RULE}"))
        choices.extend(
            questionary.Choice(title=label(fmt), value=fmt.format_id)
            for fmt in formats
        )

    choices.append(questionary.Separator(_RULE))
    choices.append(
        questionary.Choice(title="Auto-select (best quality)", value=AUTO_SELECTION),
    )
    return choices


def describe_selection(metadata: VideoMetadata, selection: str) -> None:
    """Echo the chosen format back to the user."""
    if selection == AUTO_SELECTION:
        console.print("\n[green]Auto-select mode (best quality)[/green]")
        best = select_best_format(metadata.formats)
        if best is not None:
            console.print(f"Best listed format: {best.height}p ({escape(best.ext)})")
        return
    chosen = next(
        (fmt for fmt in metadata.formats if fmt.format_id == selection),
        None,
    )
    if chosen is None:
        return
    height = f"{chosen.height}p" if chosen.height else "N/A"
    console.print(
        f"\n[green]Selected format:[/green] {height} ({escape(chosen.ext)}) - "
        f"{_format_filesize(chosen.filesize)}"
    )


# ---------------------------------------------------------------------------
# Public prompt function
# ---------------------------------------------------------------------------

def prompt_format_selection(metadata: VideoMetadata, catalog: FormatCatalog) -> str:
    """Prompt the user to choose a format from *catalog*.

    Returns
    -------
    str
        The chosen ``format_id`` or ``"auto"``.

    Raises
    ------
    FormatSelectionError
        If the user cancels the prompt (Esc / Ctrl+C returns ``None``).
    """
    questionary = _import_questionary()

    console.print()
    selected: str | None = questionary.select(
        "Select a format to download:",
        choices=build_choices(questionary, catalog),
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()

    if selected is None:
        raise FormatSelectionError(
            "No format selected.",
            hint="Use arrow keys to pick a format, then press Enter.",
        )
    return selected
