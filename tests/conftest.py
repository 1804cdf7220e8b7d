"""Shared pytest fixtures and configuration for the ytgrab test suite.

Guidelines
----------
* No internet access in any test.
* yt-dlp is mocked at the infra boundary.
* Core tests are pure; the wall clock is replaced by a fixed context.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from ytgrab.core.models import DateTimeContext
from ytgrab.utils.constants import MEDIA_ROOT_ENV_VAR

FIXED_MOMENT = datetime(2023, 3, 5, 14, 7, 9)


@pytest.fixture
def fixed_context() -> DateTimeContext:
    """2023-03-05 14:07:09 as a :class:`DateTimeContext`."""
    return DateTimeContext.from_datetime(FIXED_MOMENT)


@pytest.fixture(autouse=True)
def _isolated_media_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point every default media root at a temporary directory."""
    root = tmp_path / "media"
    monkeypatch.setenv(MEDIA_ROOT_ENV_VAR, str(root))
    return root
