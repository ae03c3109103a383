"""Asset pair building.

Combines reconciled filenames with the parsed metadata document and the
content hashes of every file into one AssetPair per index. This is where
reconciliation, parse and I/O failures all surface; any one of them aborts
the whole pass and no partial mapping is returned.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from mintprep.common import FileReadError, LogContext, compute_sha256_hex

from .cache import CacheItem
from .config import AssetsConfig
from .metadata import load_metadata
from .reconciler import ResolvedIndex, reconcile
from .scanner import scan_directory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetPair:
    """Validated metadata/media/animation files sharing one index.

    Attributes:
        name: Display name from the metadata document
        metadata: Absolute path to the metadata file
        metadata_hash: SHA-256 hex digest of the metadata file
        media: Absolute path to the media file
        media_hash: SHA-256 hex digest of the media file
        animation: Absolute path to the animation file, if any
        animation_hash: SHA-256 hex digest of the animation file, if any
    """
    name: str
    metadata: str
    metadata_hash: str
    media: str
    media_hash: str
    animation: Optional[str] = None
    animation_hash: Optional[str] = None

    def into_cache_item(self) -> CacheItem:
        """Create a fresh, not yet uploaded cache record."""
        return CacheItem(
            name=self.name,
            media_hash=self.media_hash,
            media_link="",
            metadata_hash=self.metadata_hash,
            metadata_link="",
            uploaded=False,
            animation_hash=self.animation_hash,
            animation_link="" if self.animation is not None else None,
        )


def hash_file(file_path: Path) -> str:
    """SHA-256 of a file, with read failures raised as FileReadError."""
    try:
        return compute_sha256_hex(file_path)
    except OSError as e:
        raise FileReadError(
            f"Failed to hash file '{file_path}': {e}",
            path=str(file_path),
        ) from e


def build_asset_pair(assets_dir: Path, resolved: ResolvedIndex) -> AssetPair:
    """
    Build the AssetPair for one resolved index.

    Args:
        assets_dir: Directory the resolved filenames live in
        resolved: Filenames for the index

    Returns:
        AssetPair with absolute paths and content hashes

    Raises:
        FileReadError: If a file cannot be read
        MetadataParseError: If the metadata document is malformed
    """
    base = Path(assets_dir).absolute()
    metadata_path = base / resolved.metadata
    media_path = base / resolved.media
    animation_path = base / resolved.animation if resolved.animation else None

    metadata = load_metadata(metadata_path)

    return AssetPair(
        name=metadata.name,
        metadata=str(metadata_path),
        metadata_hash=hash_file(metadata_path),
        media=str(media_path),
        media_hash=hash_file(media_path),
        animation=str(animation_path) if animation_path else None,
        animation_hash=hash_file(animation_path) if animation_path else None,
    )


def get_asset_pairs(
    assets_dir: Path,
    config: Optional[AssetsConfig] = None,
) -> Dict[int, AssetPair]:
    """
    Scan, reconcile and hash an assets directory.

    Args:
        assets_dir: Directory holding <index>.<ext> files
        config: Naming convention (defaults to AssetsConfig())

    Returns:
        Mapping of index to AssetPair, in ascending index order

    Raises:
        MintPrepError: On the first failure of any kind; no partial result
    """
    config = config or AssetsConfig()
    assets_dir = Path(assets_dir)

    with LogContext(logger, assets_dir=str(assets_dir)):
        filenames = scan_directory(assets_dir)
        resolved = reconcile(
            filenames,
            metadata_extension=config.metadata_extension,
            media_extensions=config.media_extensions,
            animation_extensions=config.animation_extensions,
        )

        asset_pairs: Dict[int, AssetPair] = {}
        for index, entry in resolved.items():
            asset_pairs[index] = build_asset_pair(assets_dir, entry)
            logger.debug(
                f"Built asset pair: {{'index': {index}, 'name': {asset_pairs[index].name!r}, "
                f"'animation': {entry.animation is not None}}}"
            )

        logger.info(f"Asset pairs ready: {{'count': {len(asset_pairs)}, 'files_scanned': {len(filenames)}}}")

    return asset_pairs
