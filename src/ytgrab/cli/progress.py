"""Rich progress display driven by yt-dlp progress hooks.

One hook instance may span several files: a ``bestvideo+bestaudio``
download fetches two streams, and the archive mode runs a second audio
pass.  Each new filename reported by yt-dlp gets its own progress row.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Any

from ytgrab.cli.console import get_rich_console
from ytgrab.exceptions import EnvironmentError

_MAX_LABEL_LENGTH = 50


class RichProgressHook:
    """Callable progress-hook adapter for Rich.

    Usage::

        with RichProgressHook() as hook:
            download_service.download(request, progress_callback=hook)
    """

    def __init__(self) -> None:
        try:
            from rich.progress import (
                BarColumn,
                DownloadColumn,
                Progress,
                SpinnerColumn,
                TextColumn,
                TimeRemainingColumn,
                TransferSpeedColumn,
            )
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        self._progress: Any = Progress(
            SpinnerColumn(),
            TextColumn("{task.description}", style="bold blue", markup=False),
            BarColumn(),
            DownloadColumn(),
            TransferSpeedColumn(),
            TimeRemainingColumn(),
            console=get_rich_console(),
            transient=False,
        )
        self._tasks: dict[str, Any] = {}
        self._started: bool = False

    # ------------------------------------------------------------------
    # Context manager / lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> RichProgressHook:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    def start(self) -> None:
        if not self._started:
            self._progress.start()
            self._started = True

    def stop(self) -> None:
        """Stop the display (idempotent)."""
        if self._started:
            self._progress.stop()
            self._started = False

    # ------------------------------------------------------------------
    # Hook callback
    # ------------------------------------------------------------------

    def __call__(self, d: dict[str, Any]) -> None:
        """yt-dlp progress-hook callback; ignored until :meth:`start`."""
        if not self._started:
            return

        status: str = d.get("status", "")
        if status == "downloading":
            self._handle_downloading(d)
        elif status == "finished":
            self._handle_finished(d)

    def _task_for(self, filename: str, total: int | None) -> Any:
        task_id = self._tasks.get(filename)
        if task_id is None:
            task_id = self._progress.add_task(_display_name(filename), total=total)
            self._tasks[filename] = task_id
        return task_id

    def _handle_downloading(self, d: dict[str, Any]) -> None:
        total = _safe_int(d.get("total_bytes") or d.get("total_bytes_estimate"))
        downloaded = _safe_int(d.get("downloaded_bytes")) or 0

        task_id = self._task_for(str(d.get("filename") or "Downloading"), total)
        if total is not None:
            self._progress.update(task_id, total=total, completed=downloaded)
        else:
            self._progress.update(task_id, completed=downloaded)

    def _handle_finished(self, d: dict[str, Any]) -> None:
        task_id = self._tasks.get(str(d.get("filename") or "Downloading"))
        if task_id is None:
            return
        task = self._progress.tasks[task_id]
        if task.total is not None:
            self._progress.update(task_id, completed=task.total)


# ---------------------------------------------------------------------------
# Utility
# ---------------------------------------------------------------------------

def _display_name(filename: str) -> str:
    # yt-dlp reports paths with the host separator; strip both kinds.
    name = PurePath(filename.replace("\\", "/")).name or filename
    if len(name) > _MAX_LABEL_LENGTH:
        name = name[: _MAX_LABEL_LENGTH - 3] + "..."
    return name


def _safe_int(value: object) -> int | None:
    """Convert *value* to ``int`` or return ``None``."""
    if value is None:
        return None
    try:
        if isinstance(value, (bool, int, float, str, bytes, bytearray)):
            return int(value)
        return None
    except (TypeError, ValueError):
        return None
