"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
defaults, and the few derived properties.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ytgrab.core.models import (
    DownloadRequest,
    FormatCatalog,
    MediaFormat,
    OutputOptions,
    VideoMetadata,
)
from ytgrab.utils.constants import DEFAULT_MEDIA_ROOT


def _make_format(**overrides: object) -> MediaFormat:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "format_id": "137",
        "ext": "mp4",
        "height": 1080,
        "abr": None,
        "filesize": 50_000_000,
        "vcodec": "avc1.640028",
        "acodec": "none",
    }
    defaults.update(overrides)
    return MediaFormat(**defaults)  # type: ignore[arg-type]


class TestVideoMetadata:
    def test_defaults(self) -> None:
        m = VideoMetadata(id="a", title="T", duration=None, webpage_url="u")
        assert m.view_count is None
        assert m.formats == ()

    def test_frozen(self) -> None:
        m = VideoMetadata(id="a", title="T", duration=1, webpage_url="u")
        with pytest.raises(AttributeError):
            m.title = "Changed"  # type: ignore[misc]


class TestMediaFormat:
    def test_stream_flags(self) -> None:
        video_only = _make_format()
        assert video_only.has_video
        assert not video_only.has_audio

        audio_only = _make_format(vcodec="none", acodec="opus")
        assert not audio_only.has_video
        assert audio_only.has_audio

    def test_frozen(self) -> None:
        f = _make_format()
        with pytest.raises(AttributeError):
            f.ext = "webm"  # type: ignore[misc]


class TestFormatCatalog:
    def test_empty_is_falsy(self) -> None:
        assert not FormatCatalog()
        assert len(FormatCatalog()) == 0

    def test_len_counts_every_category(self) -> None:
        catalog = FormatCatalog(
            combined=(_make_format(acodec="aac"),),
            video_only=(_make_format(), _make_format(format_id="248")),
            audio_only=(_make_format(vcodec="none", acodec="opus"),),
        )
        assert len(catalog) == 4
        assert catalog


class TestOutputOptions:
    def test_defaults(self) -> None:
        opts = OutputOptions()
        assert opts.folder_name is None
        assert opts.parent_folder is None
        assert opts.output_dir is None
        assert opts.filename is None
        assert opts.audio_only is False
        assert opts.quality is None
        assert opts.auto is False
        assert opts.write_description is False
        assert opts.write_info_json is False
        assert opts.write_thumbnail is True
        assert opts.media_root == DEFAULT_MEDIA_ROOT

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            OutputOptions().auto = True  # type: ignore[misc]


class TestDownloadRequest:
    def test_output_template(self) -> None:
        request = DownloadRequest(
            url="https://www.youtube.com/watch?v=abc123",
            format_spec="best",
            output_dir=Path("/media/Clip"),
            filename="Clip",
        )
        assert request.output_template == str(Path("/media/Clip") / "Clip.%(ext)s")

    def test_output_template_keeps_percent_literal(self) -> None:
        request = DownloadRequest(
            url="https://www.youtube.com/watch?v=abc123",
            format_spec="best",
            output_dir=Path("/media/100%"),
            filename="%(title)s 50%",
        )
        expected_literal = str(Path("/media/100%%") / "%%(title)s 50%%")
        assert request.output_template == f"{expected_literal}.%(ext)s"

    def test_label_ignored_in_equality(self) -> None:
        kwargs: dict[str, object] = {
            "url": "u",
            "format_spec": "best",
            "output_dir": Path("out"),
            "filename": "f",
        }
        assert DownloadRequest(label="a", **kwargs) == DownloadRequest(label="b", **kwargs)  # type: ignore[arg-type]
