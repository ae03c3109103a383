"""Rewriting metadata documents to point at uploaded files."""

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

from mintprep.common import MintPrepError

from .batch import BatchReport, run_batch
from .metadata import ANIMATION_FILE_POSITION, MEDIA_FILE_POSITION, load_metadata
from .pairs import AssetPair

logger = logging.getLogger(__name__)

# (media_link, animation_link)
Links = Tuple[str, Optional[str]]


def get_updated_metadata(
    metadata_file: Path,
    media_link: str,
    animation_link: Optional[str] = None,
) -> str:
    """
    Re-read a metadata document and point it at uploaded files.

    Sets `image` and files[0].uri to the media link and, when an animation
    link is given, `animation_url` and files[1].uri to it. Nothing is
    written to disk.

    Args:
        metadata_file: Path to the metadata JSON file
        media_link: Remote link of the uploaded media file
        animation_link: Remote link of the uploaded animation file, if any

    Returns:
        Updated document as compact JSON text

    Raises:
        FileReadError: If the file cannot be read
        MetadataParseError: If the document is malformed
        MissingFileEntryError: If an animation link is given but the document
            has no second file entry
    """
    metadata = load_metadata(Path(metadata_file))

    metadata.image = media_link
    metadata.set_file_uri(MEDIA_FILE_POSITION, media_link)

    if animation_link is not None:
        metadata.animation_url = animation_link
        metadata.set_file_uri(ANIMATION_FILE_POSITION, animation_link)

    return metadata.to_json()


def rewrite_all(
    pairs: Mapping[int, AssetPair],
    links: Mapping[int, Links],
) -> Tuple[Dict[int, str], BatchReport]:
    """
    Rewrite the metadata of every asset pair that has links.

    Each index is independent: a failure for one index is recorded in the
    report and the others are still rewritten. An index with no links is
    reported as a failure.

    Args:
        pairs: Asset pairs keyed by index
        links: (media_link, animation_link) keyed by index

    Returns:
        Tuple of (updated documents keyed by index, BatchReport)
    """
    def rewrite(index: int, pair: AssetPair) -> str:
        if index not in links:
            raise MintPrepError(f"No upload links for index {index}.", index=index)
        media_link, animation_link = links[index]
        return get_updated_metadata(Path(pair.metadata), media_link, animation_link)

    documents, report = run_batch(
        ((index, pairs[index]) for index in sorted(pairs)),
        rewrite,
    )
    logger.debug(f"Rewrote metadata: {{'documents': {len(documents)}, 'failed': {report.failed_count}}}")
    return documents, report
