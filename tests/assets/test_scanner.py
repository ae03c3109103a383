"""Tests for directory scanning."""

import os

import pytest

from mintprep.assets.scanner import is_hidden, scan_directory
from mintprep.common import DirectoryReadError


class TestIsHidden:
    """Tests for is_hidden."""

    def test_dotfiles(self):
        assert is_hidden(".DS_Store")
        assert is_hidden(".0.png")

    def test_regular_names(self):
        assert not is_hidden("0.png")
        assert not is_hidden("collection.json")


class TestScanDirectory:
    """Tests for scan_directory."""

    def test_lists_regular_files_sorted(self, tmp_path):
        """Test that regular files are returned in sorted order."""
        for name in ("1.json", "0.png", "0.json"):
            (tmp_path / name).touch()

        assert scan_directory(tmp_path) == ["0.json", "0.png", "1.json"]

    def test_excludes_hidden_files_and_directories(self, tmp_path):
        """Test that dotfiles and subdirectories are skipped regardless of name."""
        (tmp_path / "0.json").touch()
        (tmp_path / ".DS_Store").touch()
        (tmp_path / ".1.json").touch()
        (tmp_path / "2.png").mkdir()
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "3.json").touch()

        assert scan_directory(tmp_path) == ["0.json"]

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_symlinks(self, tmp_path):
        """Test symlinks to files are kept and symlinks to directories are not."""
        target_dir = tmp_path / "target"
        target_dir.mkdir()
        real_file = target_dir / "real.png"
        real_file.write_bytes(b"png")

        assets = tmp_path / "assets"
        assets.mkdir()
        (assets / "0.png").symlink_to(real_file)
        (assets / "1.png").symlink_to(target_dir, target_is_directory=True)
        (assets / "2.png").symlink_to(tmp_path / "missing.png")

        assert scan_directory(assets) == ["0.png"]

    def test_empty_directory(self, tmp_path):
        assert scan_directory(tmp_path) == []

    def test_missing_directory(self, tmp_path):
        """Test that an unreadable directory is fatal."""
        missing = tmp_path / "missing"

        with pytest.raises(DirectoryReadError) as exc_info:
            scan_directory(missing)

        assert exc_info.value.context["path"] == str(missing)

    def test_file_instead_of_directory(self, tmp_path):
        file_path = tmp_path / "0.json"
        file_path.touch()

        with pytest.raises(DirectoryReadError):
            scan_directory(file_path)
