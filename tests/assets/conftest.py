"""Fixtures for building asset directories."""

import json
from pathlib import Path
from typing import Optional

import pytest


def metadata_document(name: str, index: int, animation: Optional[str] = None) -> dict:
    files = [{"uri": f"{index}.png", "type": "image/png"}]
    document = {
        "name": name,
        "symbol": "TST",
        "description": "Test asset",
        "seller_fee_basis_points": 500,
        "image": f"{index}.png",
        "attributes": [{"trait_type": "Background", "value": "Blue"}],
        "properties": {"files": files, "category": "image"},
    }
    if animation:
        document["animation_url"] = animation
        files.append({"uri": animation, "type": "video/mp4"})
    return document


@pytest.fixture
def write_asset():
    """Write <index>.json plus the given media/animation files."""

    def _write(
        assets_dir: Path,
        index: int,
        name: str = "Foo",
        media_ext: Optional[str] = "png",
        animation_ext: Optional[str] = None,
    ) -> None:
        animation = f"{index}.{animation_ext}" if animation_ext else None
        (assets_dir / f"{index}.json").write_text(
            json.dumps(metadata_document(name, index, animation)), encoding="utf-8"
        )
        if media_ext:
            (assets_dir / f"{index}.{media_ext}").write_bytes(f"media {index}".encode())
        if animation_ext:
            (assets_dir / f"{index}.{animation_ext}").write_bytes(f"animation {index}".encode())

    return _write


@pytest.fixture
def make_document():
    """Build a metadata document dict."""
    return metadata_document
