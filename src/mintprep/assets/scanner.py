"""Directory scanning for asset files.

Lists the regular, visible files directly inside an assets directory.
Anything that cannot be introspected is a fatal error: silently skipping
an asset could produce an incomplete mint set.
"""

import logging
import os
from pathlib import Path
from typing import List

from mintprep.common import DirectoryReadError, FileReadError

logger = logging.getLogger(__name__)


def is_hidden(name: str) -> bool:
    """Return True for dotfiles (.DS_Store, .gitkeep, ...)."""
    return name.startswith('.')


def scan_directory(assets_dir: Path) -> List[str]:
    """
    Scan an assets directory for candidate files.

    Subdirectories (including symlinks to directories) and hidden files are
    excluded. Symlinks pointing to regular files are included.

    Args:
        assets_dir: Directory to scan

    Returns:
        Sorted list of filenames (not paths)

    Raises:
        DirectoryReadError: If the directory cannot be listed
        FileReadError: If an entry's type cannot be determined or its name
            is not valid UTF-8
    """
    try:
        with os.scandir(assets_dir) as it:
            entries = list(it)
    except OSError as e:
        logger.error(f"Failed to read assets directory: {{'path': {str(assets_dir)!r}, 'error': {str(e)!r}}}")
        raise DirectoryReadError(
            f"Failed to read assets directory '{assets_dir}': {e}",
            path=str(assets_dir),
        ) from e

    filenames = []
    for entry in entries:
        try:
            entry.name.encode('utf-8')
        except UnicodeEncodeError as e:
            raise FileReadError(
                f"Failed to convert file name to valid unicode in '{assets_dir}'",
                path=entry.path,
            ) from e

        if is_hidden(entry.name):
            continue

        try:
            is_file = entry.is_file()
        except OSError as e:
            raise FileReadError(
                f"Failed to retrieve metadata from file '{entry.path}': {e}",
                path=entry.path,
            ) from e

        if is_file:
            filenames.append(entry.name)

    filenames.sort()
    logger.debug(f"Scanned assets directory: {{'path': {str(assets_dir)!r}, 'files': {len(filenames)}}}")
    return filenames
