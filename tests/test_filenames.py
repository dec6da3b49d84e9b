"""Tests for ownership-file path escaping."""

import pytest

from codeowners_gen.filenames import clean_filename


class TestCleanFilename:
    @pytest.mark.parametrize(
        "raw",
        [
            "src/a.go",
            "docs/README.md",
            "scripts/it's-fine_v2.sh",
            "windows\\path\\file.txt",
        ],
    )
    def test_safe_characters_unchanged(self, raw):
        assert clean_filename(raw) == raw

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("docs/[draft].md", "docs/\\[draft\\].md"),
            ("src/*.go", "src/\\*.go"),
            ("lib/a+b.c", "lib/a\\+b.c"),
            ("#notes.md", "\\#notes.md"),
            ("app/(group)/page.tsx", "app/\\(group\\)/page.tsx"),
            ("src/!important", "src/\\!important"),
        ],
    )
    def test_special_characters_escaped(self, raw, expected):
        assert clean_filename(raw) == expected

    def test_non_ascii_letters_escaped(self):
        assert clean_filename("docs/café.md") == "docs/caf\\é.md"

    def test_rename_keeps_text_before_first_space(self):
        assert clean_filename("old.txt new.txt") == "old.txt"

    def test_rename_then_escape(self):
        assert clean_filename("a[1].txt => b.txt") == "a\\[1\\].txt"

    def test_empty(self):
        assert clean_filename("") == ""


class TestCleanFilenameIdempotence:
    @pytest.mark.parametrize("raw", ["src/a.go", "dir\\sub/file-name.txt", "old.txt new.txt"])
    def test_idempotent_without_special_characters(self, raw):
        once = clean_filename(raw)
        assert clean_filename(once) == once

    def test_backslash_is_not_escaped(self):
        assert clean_filename("a\\b") == "a\\b"

    def test_special_characters_escaped_again_on_second_pass(self):
        # The escape character is not itself escaped, so each pass adds one
        once = clean_filename("a[b]")
        assert once == "a\\[b\\]"
        assert clean_filename(once) == "a\\\\[b\\\\]"
