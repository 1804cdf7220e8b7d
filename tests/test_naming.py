"""Tests for filename / folder-name sanitisation (core/naming.py)."""

from __future__ import annotations

from ytgrab.core.naming import sanitize_filename_minimal, sanitize_folder_name


class TestSanitizeFilenameMinimal:
    def test_forbidden_characters_replaced(self) -> None:
        assert sanitize_filename_minimal("a/b:c") == "a_b_c"

    def test_every_forbidden_character(self) -> None:
        assert sanitize_filename_minimal('<>:"/\\|?*') == "_" * 9

    def test_length_preserved(self) -> None:
        name = 'What? A "great" <video>'
        assert len(sanitize_filename_minimal(name)) == len(name)

    def test_other_characters_untouched(self) -> None:
        name = "Café — 한글 (Live) [4K] !#&"
        assert sanitize_filename_minimal(name) == name

    def test_empty(self) -> None:
        assert sanitize_filename_minimal("") == ""


class TestSanitizeFolderName:
    def test_mixed_input(self) -> None:
        assert sanitize_folder_name("hello world!! 한글 test") == "hello_world_한글_test"

    def test_case_preserved(self) -> None:
        assert sanitize_folder_name("MiXeD Case") == "MiXeD_Case"

    def test_forbidden_characters_become_underscores(self) -> None:
        assert sanitize_folder_name("a/b:c") == "a_b_c"

    def test_whitespace_runs_collapse(self) -> None:
        assert sanitize_folder_name("a \t\n  b") == "a_b"

    def test_hyphen_kept(self) -> None:
        assert sanitize_folder_name("part-1") == "part-1"

    def test_punctuation_and_accents_removed(self) -> None:
        assert sanitize_folder_name("Café (Live) [4K]") == "Caf_Live_4K"

    def test_hangul_jamo_kept(self) -> None:
        assert sanitize_folder_name("ㅋㅋ ᄀ") == "ㅋㅋ_ᄀ"

    def test_emoji_and_cjk_removed(self) -> None:
        assert sanitize_folder_name("🎬漢字abc") == "abc"

    def test_truncated_to_100(self) -> None:
        assert len(sanitize_folder_name("x" * 250)) == 100

    def test_truncation_counts_code_points(self) -> None:
        result = sanitize_folder_name("가" * 150)
        assert result == "가" * 100

    def test_truncation_after_sanitising(self) -> None:
        # 100 removable characters followed by real content.
        result = sanitize_folder_name("!" * 100 + "keep")
        assert result == "keep"
