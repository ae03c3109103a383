"""Index reconciliation for asset files.

Groups a flat list of filenames by the numeric index of each metadata file
and resolves every index to exactly one media file and at most one
animation file:

    0.json  0.png  0.mp4  1.json  1.JPG   ->   {0: (0.json, 0.png, 0.mp4),
                                                1: (1.json, 1.JPG, None)}

When several files match the same slot (e.g. both 3.jpg and 3.png) the
first one by sorted filename wins and a warning is logged.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Pattern, Sequence

from mintprep.common import DuplicateIndexError, InvalidIndexError, MissingMediaError

logger = logging.getLogger(__name__)

_INDEX_PATTERN = re.compile(r'^[0-9]+$')


@dataclass(frozen=True)
class ResolvedIndex:
    """Filenames resolved for a single asset index.

    Attributes:
        index: Asset index parsed from the metadata filename
        metadata: Metadata filename
        media: Media filename
        animation: Animation filename, if one exists
    """
    index: int
    metadata: str
    media: str
    animation: Optional[str] = None


def index_stem(filename: str) -> str:
    """Return everything before the first '.' of a filename."""
    return filename.split('.', 1)[0]


def parse_index(filename: str) -> int:
    """
    Parse the asset index from a metadata filename.

    Args:
        filename: Metadata filename such as "12.json"

    Returns:
        Non-negative integer index

    Raises:
        InvalidIndexError: If the stem is not made of ASCII digits only
    """
    stem = index_stem(filename)
    if not _INDEX_PATTERN.fullmatch(stem):
        error = InvalidIndexError(
            f"Couldn't parse filename '{filename}' to a valid index number.",
            filename=filename,
        )
        logger.error(error.message)
        raise error
    return int(stem)


def build_pattern(stem: str, extensions: Sequence[str]) -> Pattern[str]:
    """Build a case-insensitive pattern matching exactly '<stem>.<ext>'."""
    alternatives = "|".join(re.escape(ext) for ext in extensions)
    return re.compile(rf'^{re.escape(stem)}\.({alternatives})$', re.IGNORECASE)


def _select_first(index: int, kind: str, candidates: List[str]) -> Optional[str]:
    if not candidates:
        return None
    candidates = sorted(candidates)
    if len(candidates) > 1:
        logger.warning(
            f"Multiple {kind} files for index, using first by name: "
            f"{{'index': {index}, 'candidates': {candidates}, 'selected': {candidates[0]!r}}}"
        )
    return candidates[0]


def reconcile(
    filenames: Iterable[str],
    metadata_extension: str = "json",
    media_extensions: Sequence[str] = ("jpg", "gif", "png"),
    animation_extensions: Sequence[str] = ("mp4", "mov", "webm"),
) -> Dict[int, ResolvedIndex]:
    """
    Resolve scanned filenames into one entry per asset index.

    Every metadata file (matched by case-insensitive extension) defines an
    index; that index must then have a media file and may have an animation
    file. The first violation aborts the whole reconciliation.

    Args:
        filenames: Filenames found in the assets directory
        metadata_extension: Extension of metadata files, without the dot
        media_extensions: Extensions accepted for media files
        animation_extensions: Extensions accepted for animation files

    Returns:
        Mapping of index to ResolvedIndex, in ascending index order

    Raises:
        InvalidIndexError: If a metadata filename stem is not an integer
        DuplicateIndexError: If two metadata files share the same index
        MissingMediaError: If an index has no media file
    """
    names = sorted(filenames)
    suffix = f".{metadata_extension.lower()}"
    metadata_filenames = [name for name in names if name.lower().endswith(suffix)]

    by_index: Dict[int, str] = {}
    for metadata_filename in metadata_filenames:
        index = parse_index(metadata_filename)
        if index in by_index:
            error = DuplicateIndexError(
                f"Files '{by_index[index]}' and '{metadata_filename}' both resolve to index {index}.",
                index=index,
                filenames=[by_index[index], metadata_filename],
            )
            logger.error(error.message)
            raise error
        by_index[index] = metadata_filename

    resolved: Dict[int, ResolvedIndex] = {}
    for index in sorted(by_index):
        metadata_filename = by_index[index]
        stem = index_stem(metadata_filename)

        media_regex = build_pattern(stem, media_extensions)
        media = _select_first(index, "media", [n for n in names if media_regex.fullmatch(n)])
        if media is None:
            error = MissingMediaError(
                f"Couldn't find a media file for index {index}.",
                index=index,
                metadata=metadata_filename,
            )
            logger.error(error.message)
            raise error

        animation = None
        if animation_extensions:
            animation_regex = build_pattern(stem, animation_extensions)
            animation = _select_first(
                index, "animation", [n for n in names if animation_regex.fullmatch(n)]
            )

        resolved[index] = ResolvedIndex(
            index=index,
            metadata=metadata_filename,
            media=media,
            animation=animation,
        )

    logger.debug(f"Reconciled asset indices: {{'indices': {len(resolved)}}}")
    return resolved
