"""Tests for the shared argparse helpers (cli/options.py)."""

from __future__ import annotations

import argparse
from pathlib import Path
from unittest.mock import patch

import pytest

from ytgrab.cli.options import (
    add_path_arguments,
    archive_media_root,
    options_from_args,
    positive_int,
    resolve_media_root,
)
from ytgrab.utils.constants import MEDIA_ROOT_ENV_VAR


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    add_path_arguments(parser)
    return parser


class TestPositiveInt:
    def test_valid(self) -> None:
        assert positive_int("1080") == 1080

    @pytest.mark.parametrize("value", ["0", "-5"])
    def test_non_positive(self, value: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError, match="positive"):
            positive_int(value)

    def test_not_a_number(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError, match="integer"):
            positive_int("hd")


class TestPathArguments:
    @pytest.mark.parametrize(
        "argv",
        [
            ["--folderName", "a", "--parentFolder", "b"],
            ["--folder-name", "a", "--parent-folder", "b"],
        ],
    )
    def test_both_spellings(self, argv: list[str]) -> None:
        args = _parser().parse_args(argv)
        assert args.folder_name == "a"
        assert args.parent_folder == "b"

    def test_output_dir_is_path(self) -> None:
        args = _parser().parse_args(["--output-dir", "some/dir"])
        assert args.output_dir == Path("some/dir")


class TestResolveMediaRoot:
    def test_default_without_override(self) -> None:
        assert resolve_media_root(Path("/srv"), environ={}) == Path("/srv")

    def test_env_override(self) -> None:
        env = {MEDIA_ROOT_ENV_VAR: "/mnt/media"}
        assert resolve_media_root(Path("/srv"), environ=env) == Path("/mnt/media")

    def test_empty_override_ignored(self) -> None:
        env = {MEDIA_ROOT_ENV_VAR: ""}
        assert resolve_media_root(Path("/srv"), environ=env) == Path("/srv")

    def test_archive_root_on_windows(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(MEDIA_ROOT_ENV_VAR)
        with patch("ytgrab.cli.options.platform.system", return_value="Windows"):
            assert str(archive_media_root()).replace("\\", "/").startswith("Z:")

    def test_archive_root_on_posix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(MEDIA_ROOT_ENV_VAR)
        with patch("ytgrab.cli.options.platform.system", return_value="Linux"):
            assert archive_media_root() == Path("~/media").expanduser()


class TestOptionsFromArgs:
    def test_blank_strings_become_none(self) -> None:
        args = _parser().parse_args(["--folderName", "", "--filename", ""])
        opts = options_from_args(args, media_root=Path("/m"))
        assert opts.folder_name is None
        assert opts.filename is None
        assert opts.media_root == Path("/m")

    def test_missing_flags_fall_back_to_defaults(self) -> None:
        opts = options_from_args(_parser().parse_args([]), media_root=Path("/m"))
        assert opts.audio_only is False
        assert opts.quality is None
        assert opts.auto is False
        assert opts.write_description is False
        assert opts.write_info_json is False
        assert opts.write_thumbnail is True

    def test_entry_point_flags_carried(self) -> None:
        parser = _parser()
        parser.add_argument("--audio-only", dest="audio_only", action="store_true")
        parser.add_argument("--quality", type=positive_int)
        parser.add_argument("--auto", action="store_true")
        parser.set_defaults(description=True, json=True)

        args = parser.parse_args(["--audio-only", "--quality", "720", "--auto"])
        opts = options_from_args(args, media_root=Path("/m"))

        assert opts.audio_only is True
        assert opts.quality == 720
        assert opts.auto is True
        assert opts.write_description is True
        assert opts.write_info_json is True
