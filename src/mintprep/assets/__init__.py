"""Asset pairing and integrity engine."""

from .batch import BatchFailure, BatchReport, run_batch
from .cache import CacheItem, CacheStore, InMemoryCacheStore, sync_cache
from .config import AssetsConfig, MintPrepConfig
from .metadata import FileEntry, Metadata, Properties, load_metadata
from .pairs import AssetPair, build_asset_pair, get_asset_pairs
from .reconciler import ResolvedIndex, parse_index, reconcile
from .rewriter import get_updated_metadata, rewrite_all
from .scanner import is_hidden, scan_directory
from .size import get_data_size

__all__ = [
    'AssetPair',
    'AssetsConfig',
    'BatchFailure',
    'BatchReport',
    'CacheItem',
    'CacheStore',
    'FileEntry',
    'InMemoryCacheStore',
    'Metadata',
    'MintPrepConfig',
    'Properties',
    'ResolvedIndex',
    'build_asset_pair',
    'get_asset_pairs',
    'get_data_size',
    'get_updated_metadata',
    'is_hidden',
    'load_metadata',
    'parse_index',
    'reconcile',
    'rewrite_all',
    'run_batch',
    'scan_directory',
    'sync_cache',
]
