"""CLI command for preparing an assets directory."""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from mintprep.common import ConfigLoader, LoggingConfig, MintPrepError, setup_logging_from_config

from .config import MintPrepConfig
from .pairs import get_asset_pairs
from .size import get_data_size, get_files_size

APP_NAME = "mintprep"


def prepare_command(config: MintPrepConfig, assets_dir_override: Optional[Path] = None) -> int:
    """Build asset pairs and report what would be uploaded.

    Args:
        config: Configuration object
        assets_dir_override: Optional override for the assets directory

    Returns:
        Exit code (0 for success)
    """
    logger = logging.getLogger(__package__ or __name__)
    assets_dir = assets_dir_override if assets_dir_override else Path(config.assets.assets_dir)

    logger.info(f"Configuration: {{'assets_dir': {str(assets_dir)!r}, 'media_extensions': {config.assets.media_extensions}, 'animation_extensions': {config.assets.animation_extensions}}}")

    if not assets_dir.is_dir():
        logger.error(f"Assets directory does not exist: {{'path': {str(assets_dir)!r}}}")
        return 1

    try:
        asset_pairs = get_asset_pairs(assets_dir, config.assets)

        for index, pair in asset_pairs.items():
            logger.info(f"Asset: {{'index': {index}, 'name': {pair.name!r}, 'media_hash': {pair.media_hash!r}, 'animation': {pair.animation is not None}}}")

        extensions = (
            [config.assets.metadata_extension]
            + config.assets.media_extensions
            + config.assets.animation_extensions
        )
        total = 0
        for extension in extensions:
            size = get_data_size(assets_dir, extension)
            total += size
            if size:
                logger.info(f"Data size: {{'extension': {extension!r}, 'bytes': {size}}}")

        # Reconciliation matches extensions case-insensitively, the per-extension sums do not
        paired_paths = [
            path
            for pair in asset_pairs.values()
            for path in (pair.metadata, pair.media, pair.animation)
            if path is not None
        ]
        paired_total = get_files_size(paired_paths)
        if paired_total != total:
            logger.warning(
                f"Per-extension sizes differ from paired files (e.g. upper-case extensions): "
                f"{{'extension_bytes': {total}, 'paired_bytes': {paired_total}}}"
            )

        logger.info(f"Prepare complete: {{'assets': {len(asset_pairs)}, 'total_bytes': {paired_total}}}")

        return 0

    except MintPrepError as e:
        logger.error(f"Prepare failed: {e.message}")
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the prepare command."""
    parser = argparse.ArgumentParser(
        description="Validate and hash an NFT assets directory before upload"
    )
    parser.add_argument(
        "--assets-dir",
        type=Path,
        required=False,
        help="Directory containing <index>.<ext> asset files (overrides config)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (defaults.toml)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        required=False,
        help="Log level (overrides config)"
    )

    args = parser.parse_args(argv)

    loader = ConfigLoader(config_class=MintPrepConfig, app_name=APP_NAME)
    config = loader.load(defaults_path=args.config)
    if args.log_level:
        config.logging = LoggingConfig(**{**config.logging.model_dump(), "level": args.log_level})

    setup_logging_from_config(config.logging)

    return prepare_command(config=config, assets_dir_override=args.assets_dir)


if __name__ == "__main__":
    raise SystemExit(main())
