"""Metadata document models.

A metadata document describes one asset:

    {
      "name": "Foo #0",
      "image": "0.png",
      "animation_url": "0.mp4",
      "properties": {
        "files": [
          {"uri": "0.png", "type": "image/png"},
          {"uri": "0.mp4", "type": "video/mp4"}
        ]
      }
    }

File entries are positional: entry 0 is the media file and entry 1, when
present, is the animation file. Fields not modelled here (symbol,
description, attributes, creators, ...) are kept as-is on serialization.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mintprep.common import FileReadError, MetadataParseError, MissingFileEntryError

logger = logging.getLogger(__name__)

MEDIA_FILE_POSITION = 0
ANIMATION_FILE_POSITION = 1


class FileEntry(BaseModel):
    """A single entry of properties.files."""

    model_config = ConfigDict(extra='allow')

    uri: str
    type: str


class Properties(BaseModel):
    """The properties block of a metadata document."""

    model_config = ConfigDict(extra='allow')

    files: List[FileEntry] = Field(default_factory=list)


class Metadata(BaseModel):
    """Asset metadata document."""

    model_config = ConfigDict(extra='allow')

    name: str
    image: str
    animation_url: Optional[str] = None
    properties: Properties

    def set_file_uri(self, position: int, uri: str) -> None:
        """
        Overwrite the URI of the file entry at a fixed position.

        Raises:
            MissingFileEntryError: If the document has no entry at that position
        """
        files = self.properties.files
        if not 0 <= position < len(files):
            raise MissingFileEntryError(
                f"Metadata for '{self.name}' has {len(files)} file entries, "
                f"cannot write entry {position}.",
                name=self.name,
                position=position,
                entries=len(files),
            )
        files[position].uri = uri

    def to_json(self) -> str:
        """Serialize to compact JSON text.

        Only an unset animation_url is omitted; null values in other fields
        are written back unchanged.
        """
        exclude = {'animation_url'} if self.animation_url is None else None
        return self.model_dump_json(exclude=exclude)


def load_metadata(metadata_path: Path) -> Metadata:
    """
    Read and validate a metadata document.

    Args:
        metadata_path: Path to the metadata JSON file

    Returns:
        Parsed Metadata

    Raises:
        FileReadError: If the file cannot be read
        MetadataParseError: If the content is not valid JSON or does not
            have the expected shape
    """
    try:
        with open(metadata_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse metadata: {{'path': {str(metadata_path)!r}, 'error': {str(e)!r}}}")
        raise MetadataParseError(
            f"Invalid JSON in metadata file '{metadata_path}': {e}",
            path=str(metadata_path),
            line=e.lineno,
            column=e.colno,
        ) from e
    except UnicodeDecodeError as e:
        raise MetadataParseError(
            f"Metadata file '{metadata_path}' is not valid UTF-8",
            path=str(metadata_path),
        ) from e
    except OSError as e:
        raise FileReadError(
            f"Failed to read metadata file '{metadata_path}': {e}",
            path=str(metadata_path),
        ) from e

    try:
        return Metadata.model_validate(data)
    except ValidationError as e:
        logger.error(f"Invalid metadata document: {{'path': {str(metadata_path)!r}, 'errors': {e.error_count()}}}")
        raise MetadataParseError(
            f"Metadata file '{metadata_path}' does not match the expected format: {e}",
            path=str(metadata_path),
            errors=e.errors(include_url=False),
        ) from e
