"""Prepare directories of NFT assets for upload."""

__version__ = "0.1.0"
