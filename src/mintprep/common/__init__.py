"""Common utilities for mintprep packages."""

from .config import ConfigLoader
from .logging import setup_logging, setup_logging_from_config, get_logger, LogContext
from .logging_config import LoggingConfig
from .errors import (
    MintPrepError, FileSystemError, DirectoryReadError, FileReadError,
    NamingConventionError, InvalidIndexError, MissingMediaError, DuplicateIndexError,
    DocumentStructureError, MetadataParseError, MissingFileEntryError,
    classify_error,
)
from .checksums import compute_sha256_hex

__all__ = [
    'ConfigLoader',
    'LoggingConfig',
    'setup_logging',
    'setup_logging_from_config',
    'get_logger',
    'LogContext',
    'MintPrepError',
    'FileSystemError',
    'DirectoryReadError',
    'FileReadError',
    'NamingConventionError',
    'InvalidIndexError',
    'MissingMediaError',
    'DuplicateIndexError',
    'DocumentStructureError',
    'MetadataParseError',
    'MissingFileEntryError',
    'classify_error',
    'compute_sha256_hex',
]
