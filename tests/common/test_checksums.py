"""Tests for checksum utilities."""

import hashlib

import pytest
from mintprep.common.checksums import compute_sha256_hex, SHA256_CHUNK_SIZE

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


class TestComputeSHA256Hex:
    """Tests for compute_sha256_hex function."""

    def test_same_content_same_digest(self, tmp_path):
        """Test that identical bytes produce identical digests."""
        file1 = tmp_path / "a.png"
        file2 = tmp_path / "b.png"
        file1.write_bytes(b"same bytes")
        file2.write_bytes(b"same bytes")

        assert compute_sha256_hex(file1) == compute_sha256_hex(file2)

    def test_single_bit_difference(self, tmp_path):
        """Test that flipping one bit changes the digest."""
        file1 = tmp_path / "a.bin"
        file2 = tmp_path / "b.bin"
        file1.write_bytes(b"\x00" * 100)
        file2.write_bytes(b"\x00" * 99 + b"\x01")

        assert compute_sha256_hex(file1) != compute_sha256_hex(file2)

    def test_matches_hashlib(self, tmp_path):
        """Test digest equals hashlib's lowercase hex digest."""
        content = b"0.png bytes"
        file_path = tmp_path / "0.png"
        file_path.write_bytes(content)

        result = compute_sha256_hex(file_path)

        assert result == hashlib.sha256(content).hexdigest()
        assert len(result) == 64
        assert result == result.lower()

    def test_large_file_spanning_chunks(self, tmp_path):
        """Test a file larger than the chunk size hashes its full content."""
        content = b"X" * (SHA256_CHUNK_SIZE * 2 + 17)
        large_file = tmp_path / "large.mp4"
        large_file.write_bytes(content)

        assert compute_sha256_hex(large_file) == hashlib.sha256(content).hexdigest()

    def test_chunk_size_does_not_change_digest(self, tmp_path):
        """Test any positive chunk size yields the same digest."""
        file_path = tmp_path / "data.bin"
        file_path.write_bytes(bytes(range(256)) * 10)

        expected = compute_sha256_hex(file_path)

        assert compute_sha256_hex(file_path, chunk_size=1) == expected
        assert compute_sha256_hex(file_path, chunk_size=7) == expected

    def test_invalid_chunk_size(self, tmp_path):
        """Test non-positive chunk size is rejected."""
        file_path = tmp_path / "data.bin"
        file_path.write_bytes(b"data")

        with pytest.raises(ValueError):
            compute_sha256_hex(file_path, chunk_size=0)

    def test_empty_file(self, tmp_path):
        """Test digest of an empty file."""
        empty_file = tmp_path / "empty.json"
        empty_file.write_bytes(b"")

        assert compute_sha256_hex(empty_file) == EMPTY_SHA256

    def test_nonexistent_file(self, tmp_path):
        """Test non-existent file raises OSError."""
        with pytest.raises(OSError):
            compute_sha256_hex(tmp_path / "does_not_exist.png")
