"""Checksum utilities for content hashing."""

import hashlib
from pathlib import Path

# Constants for checksum calculation
SHA256_CHUNK_SIZE = 65536  # 64 KB chunks


def compute_sha256_hex(file_path: Path, chunk_size: int = SHA256_CHUNK_SIZE) -> str:
    """
    Compute SHA-256 digest of entire file as lowercase hex string.

    Used for:
    - Cache keys for uploaded assets
    - Change detection between runs (re-upload avoidance)

    The file is streamed in chunks so large media files are never held
    in memory at once.

    Args:
        file_path: Path to the file
        chunk_size: Number of bytes read per iteration

    Returns:
        64-character lowercase hex string

    Raises:
        OSError: If file cannot be read
        ValueError: If chunk_size is not positive
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    hasher = hashlib.sha256()

    with open(file_path, 'rb') as f:
        while chunk := f.read(chunk_size):
            hasher.update(chunk)

    return hasher.hexdigest()
