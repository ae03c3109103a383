"""Base error definitions for mintprep packages."""

from typing import Any, Dict


class MintPrepError(Exception):
    """Base exception for all mintprep errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class FileSystemError(MintPrepError):
    """Base exception for filesystem access errors."""
    pass


class DirectoryReadError(FileSystemError):
    """Assets directory could not be listed."""
    pass


class FileReadError(FileSystemError):
    """File could not be opened, read or stat-ed."""
    pass


class NamingConventionError(MintPrepError):
    """Base exception for asset naming convention violations."""
    pass


class InvalidIndexError(NamingConventionError):
    """Metadata filename stem is not a valid index number."""
    pass


class MissingMediaError(NamingConventionError):
    """No media file exists for an index."""
    pass


class DuplicateIndexError(NamingConventionError):
    """Two metadata files resolve to the same index."""
    pass


class DocumentStructureError(MintPrepError):
    """Base exception for metadata document errors."""
    pass


class MetadataParseError(DocumentStructureError):
    """Metadata document is malformed."""
    pass


class MissingFileEntryError(DocumentStructureError):
    """Metadata document lacks the file entry being written."""
    pass


def classify_error(exception: Exception) -> str:
    """
    Classify an exception into an error category.

    Args:
        exception: The exception to classify

    Returns:
        Error category string: 'filesystem', 'naming', 'document' or 'unknown'
    """
    if isinstance(exception, FileSystemError):
        return 'filesystem'
    elif isinstance(exception, NamingConventionError):
        return 'naming'
    elif isinstance(exception, DocumentStructureError):
        return 'document'
    elif isinstance(exception, OSError):
        return 'filesystem'
    elif isinstance(exception, (ValueError, KeyError, IndexError)):
        return 'document'
    else:
        return 'unknown'
