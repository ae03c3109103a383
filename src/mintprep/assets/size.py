"""Byte totals for upload cost estimation."""

import logging
import os
import stat
from pathlib import Path
from typing import Iterable

from mintprep.common import DirectoryReadError, FileReadError

logger = logging.getLogger(__name__)


def get_data_size(assets_dir: Path, extension: str) -> int:
    """
    Sum the sizes of files in a directory with a given extension.

    The suffix match is case-sensitive: "png" counts 0.png but not 0.PNG.
    Hidden files are counted like any other. Symlinks are followed; a
    matched link whose target cannot be stat-ed is an error.

    Args:
        assets_dir: Directory to look in (not recursive)
        extension: Extension with or without the leading dot

    Returns:
        Total size in bytes

    Raises:
        DirectoryReadError: If the directory cannot be listed
        FileReadError: If a matching path cannot be stat-ed
    """
    suffix = f".{extension.lstrip('.')}"
    total_size = 0

    try:
        with os.scandir(assets_dir) as it:
            entries = [entry for entry in it if entry.name.endswith(suffix)]
    except OSError as e:
        raise DirectoryReadError(
            f"Failed to read assets directory '{assets_dir}': {e}",
            path=str(assets_dir),
        ) from e

    for entry in entries:
        try:
            st = entry.stat()
        except OSError as e:
            raise FileReadError(
                f"Failed to retrieve size of '{entry.path}': {e}",
                path=entry.path,
            ) from e
        if stat.S_ISDIR(st.st_mode):
            continue
        total_size += st.st_size

    logger.debug(f"Data size: {{'path': {str(assets_dir)!r}, 'extension': {extension!r}, 'bytes': {total_size}}}")
    return total_size


def get_files_size(paths: Iterable[str]) -> int:
    """
    Sum the sizes of specific files, e.g. every path of the reconciled pairs.

    Raises:
        FileReadError: If a path cannot be stat-ed
    """
    total_size = 0
    for path in paths:
        try:
            total_size += os.stat(path).st_size
        except OSError as e:
            raise FileReadError(
                f"Failed to retrieve size of '{path}': {e}",
                path=str(path),
            ) from e
    return total_size
