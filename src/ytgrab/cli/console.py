"""CLI console helpers with optional Rich support.

Rich is imported lazily so that bootstrap paths (``--help``,
``--version``) keep working when it is not installed.  All three entry
points render messages, errors and hints through this module.

Titles, URLs, paths and backend error messages are user-controlled and
routinely contain square brackets (``[lyrics]``, ``[youtube] abc:``).
Interpolate them through :func:`escape` so Rich prints them verbatim
instead of parsing them as markup.
"""

from __future__ import annotations

import sys
from typing import Any

from ytgrab.core.models import VideoMetadata
from ytgrab.exceptions import EnvironmentError, YtgrabError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def escape(value: object) -> str:
	"""Return ``str(value)`` with Rich markup brackets escaped.

	Without Rich the proxy prints plain text, so nothing needs escaping.
	"""
	try:
		_load_rich_console_class()
	except EnvironmentError:
		return str(value)
	from rich.markup import escape as rich_escape

	return rich_escape(str(value))


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def print_error(exc: YtgrabError) -> None:
	"""Render a domain error with the fixed ``Error:`` prefix and its hint."""
	console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
	if exc.hint:
		console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def print_unexpected(exc: BaseException) -> None:
	console.print(
		"[bold red]Unexpected error.[/bold red] "
		"Please report this issue.\n"
		f"  {type(exc).__name__}: {escape(exc)}"
	)


def format_duration(seconds: int | None) -> str:
	"""Render *seconds* as ``m:ss``, or ``"N/A"``."""
	if seconds is None:
		return "N/A"
	minutes, secs = divmod(seconds, 60)
	return f"{minutes}:{secs:02d}"


def format_count(value: int | None) -> str:
	"""Render *value* with thousands separators, or ``"N/A"``."""
	if value is None:
		return "N/A"
	return f"{value:,}"


def describe_video(metadata: VideoMetadata) -> None:
	"""Print title, duration, and view count."""
	console.print(f"[bold cyan]Title:[/bold cyan]    {escape(metadata.title)}")
	console.print(f"[bold cyan]Duration:[/bold cyan] {format_duration(metadata.duration)}")
	console.print(f"[bold cyan]Views:[/bold cyan]    {format_count(metadata.view_count)}")
