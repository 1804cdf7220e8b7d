"""Date/time placeholder substitution for folder-name templates.

A template such as ``"playlist_{date}_{time}"`` becomes
``"playlist_231215_143022"``.  Tokens are matched together with their
braces, so ``{m}`` can never eat the start of ``{month}`` or ``{min}``.
Unknown tokens are left exactly as written.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime

from ytgrab.core.models import DateTimeContext

Clock = Callable[[], datetime]

PLACEHOLDER_TOKENS: tuple[str, ...] = (
    "fullTime",
    "date",
    "year",
    "y",
    "month",
    "m",
    "day",
    "d",
    "time",
    "hour",
    "h",
    "minute",
    "min",
    "second",
    "sec",
)

# Token name → DateTimeContext attribute.
_TOKEN_FIELDS: dict[str, str] = {
    token: ("full_time" if token == "fullTime" else token)
    for token in PLACEHOLDER_TOKENS
}

_TOKEN_RE = re.compile(r"\{(" + "|".join(PLACEHOLDER_TOKENS) + r")\}")


def current_context(clock: Clock = datetime.now) -> DateTimeContext:
    """Snapshot *clock* into a :class:`DateTimeContext`."""
    return DateTimeContext.from_datetime(clock())


def substitute(template: str, context: DateTimeContext | None = None) -> str:
    """Replace every recognised ``{token}`` in *template*.

    A fresh context is taken from the wall clock when *context* is not
    given.
    """
    ctx = context if context is not None else current_context()
    return _TOKEN_RE.sub(
        lambda match: getattr(ctx, _TOKEN_FIELDS[match.group(1)]),
        template,
    )
