"""Tests for index reconciliation."""

import logging

import pytest

from mintprep.assets.reconciler import (
    ResolvedIndex,
    build_pattern,
    index_stem,
    parse_index,
    reconcile,
)
from mintprep.common import DuplicateIndexError, InvalidIndexError, MissingMediaError


class TestParseIndex:
    """Tests for parse_index."""

    def test_valid_indices(self):
        assert parse_index("0.json") == 0
        assert parse_index("42.json") == 42
        assert parse_index("7.extra.json") == 7

    def test_stem_is_text_before_first_dot(self):
        assert index_stem("12.png.json") == "12"
        assert index_stem("noext") == "noext"

    @pytest.mark.parametrize("filename", ["abc.json", "-1.json", "+1.json", "1a.json", ".json", " 1.json"])
    def test_invalid_indices(self, filename):
        """Test that anything but ASCII digits is rejected with the filename."""
        with pytest.raises(InvalidIndexError) as exc_info:
            parse_index(filename)

        assert exc_info.value.context["filename"] == filename
        assert filename in str(exc_info.value)


class TestBuildPattern:
    """Tests for build_pattern."""

    def test_exact_match_case_insensitive(self):
        pattern = build_pattern("3", ["jpg", "gif", "png"])

        assert pattern.fullmatch("3.png")
        assert pattern.fullmatch("3.JPG")
        assert not pattern.fullmatch("13.png")
        assert not pattern.fullmatch("3.png.bak")
        assert not pattern.fullmatch("3.jpeg")


class TestReconcile:
    """Tests for reconcile."""

    def test_complete_set(self):
        """Test one entry per index, none omitted, ascending order."""
        filenames = ["10.json", "10.gif", "2.json", "2.png", "2.mp4", "0.json", "0.JPG"]

        resolved = reconcile(filenames)

        assert list(resolved) == [0, 2, 10]
        assert resolved[0] == ResolvedIndex(index=0, metadata="0.json", media="0.JPG")
        assert resolved[2] == ResolvedIndex(index=2, metadata="2.json", media="2.png", animation="2.mp4")
        assert resolved[10].media == "10.gif"
        assert resolved[10].animation is None

    def test_metadata_extension_case_insensitive(self):
        resolved = reconcile(["0.JSON", "0.png"])

        assert resolved[0].metadata == "0.JSON"

    def test_unrelated_files_ignored(self):
        resolved = reconcile(["0.json", "0.png", "readme.txt", "cover.png"])

        assert list(resolved) == [0]

    def test_invalid_index_is_fatal(self):
        """Test a non-numeric metadata name aborts the whole pass."""
        with pytest.raises(InvalidIndexError):
            reconcile(["0.json", "0.png", "abc.json"])

    def test_missing_media(self):
        """Test missing media references the index."""
        with pytest.raises(MissingMediaError) as exc_info:
            reconcile(["3.json", "3.mp4", "30.png"])

        assert exc_info.value.context["index"] == 3
        assert "index 3" in str(exc_info.value)

    def test_duplicate_index(self):
        """Test two metadata files for the same integer index are rejected."""
        with pytest.raises(DuplicateIndexError) as exc_info:
            reconcile(["1.json", "01.json", "1.png", "01.png"])

        assert exc_info.value.context["index"] == 1

    def test_leading_zero_stem_matches_its_own_media(self):
        resolved = reconcile(["007.json", "007.png", "7.png"])

        assert resolved[7].media == "007.png"

    def test_multiple_media_picks_first_sorted(self, caplog):
        """Test ambiguous media picks the first filename in sorted order."""
        with caplog.at_level(logging.WARNING, logger="mintprep.assets.reconciler"):
            resolved = reconcile(["3.png", "3.json", "3.jpg", "3.webm", "3.mov"])

        assert resolved[3].media == "3.jpg"
        assert resolved[3].animation == "3.mov"
        assert "Multiple media files" in caplog.text

    def test_custom_extensions(self):
        resolved = reconcile(
            ["0.yaml", "0.svg", "0.glb"],
            metadata_extension="yaml",
            media_extensions=["svg"],
            animation_extensions=["glb"],
        )

        assert resolved[0] == ResolvedIndex(index=0, metadata="0.yaml", media="0.svg", animation="0.glb")

    def test_no_animation_extensions(self):
        resolved = reconcile(["0.json", "0.png", "0.mp4"], animation_extensions=[])

        assert resolved[0].animation is None

    def test_empty_input(self):
        assert reconcile([]) == {}
