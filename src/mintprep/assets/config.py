"""Configuration models for asset preparation."""

from typing import List

from pydantic import BaseModel, Field, ConfigDict, field_validator

from mintprep.common import LoggingConfig


def _normalize_extension(value: str) -> str:
    return value.strip().lstrip('.').lower()


class AssetsConfig(BaseModel):
    """Naming convention for the assets directory."""

    model_config = ConfigDict(extra='forbid')

    assets_dir: str = Field(
        default="assets",
        description="Directory holding <index>.<ext> asset files"
    )
    metadata_extension: str = Field(
        default="json",
        description="Extension of metadata documents (case-insensitive)"
    )
    media_extensions: List[str] = Field(
        default_factory=lambda: ["jpg", "gif", "png"],
        description="Extensions accepted as the media file of an index"
    )
    animation_extensions: List[str] = Field(
        default_factory=lambda: ["mp4", "mov", "webm"],
        description="Extensions accepted as the optional animation file of an index"
    )

    @field_validator('metadata_extension', mode='after')
    @classmethod
    def normalize_metadata_extension(cls, v: str) -> str:
        """Store extension lowercase without leading dot."""
        v = _normalize_extension(v)
        if not v:
            raise ValueError("metadata_extension must not be empty")
        return v

    @field_validator('media_extensions', 'animation_extensions', mode='before')
    @classmethod
    def split_extensions(cls, v: object) -> object:
        """Accept "png" or "jpg,png" as well as a list."""
        if isinstance(v, str):
            return v.split(',')
        return v

    @field_validator('media_extensions', 'animation_extensions', mode='after')
    @classmethod
    def normalize_extensions(cls, v: List[str]) -> List[str]:
        """Store extensions lowercase without leading dot, dropping blanks."""
        return [ext for ext in (_normalize_extension(e) for e in v) if ext]

    @field_validator('media_extensions', mode='after')
    @classmethod
    def require_media_extensions(cls, v: List[str]) -> List[str]:
        """An asset cannot exist without media, so the set must be non-empty."""
        if not v:
            raise ValueError("media_extensions must contain at least one extension")
        return v


class MintPrepConfig(BaseModel):
    """Root configuration for mintprep."""

    model_config = ConfigDict(extra='forbid')

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    assets: AssetsConfig = Field(default_factory=AssetsConfig)
