"""Upload cache records and the store they live in.

The cache survives between runs so that assets whose content did not
change are not uploaded again. Persisting it is left to the caller; this
module only defines the record, the store interface and the merge logic.
"""

import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Mapping, Optional, Protocol

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from .pairs import AssetPair

logger = logging.getLogger(__name__)


class CacheItem(BaseModel):
    """Upload state of a single asset index."""

    model_config = ConfigDict(extra='forbid', validate_assignment=True)

    name: str
    media_hash: str
    media_link: str = ""
    metadata_hash: str
    metadata_link: str = ""
    uploaded: bool = False
    animation_hash: Optional[str] = None
    animation_link: Optional[str] = None

    def needs_upload(self) -> bool:
        """True while any link is missing or the item is not marked uploaded."""
        if not self.uploaded or not self.media_link or not self.metadata_link:
            return True
        return self.animation_hash is not None and not self.animation_link


class CacheStore(Protocol):
    """Key-value store of cache items, keyed by asset index as a string."""

    def get(self, key: str) -> Optional[CacheItem]:
        ...

    def put(self, key: str, item: CacheItem) -> None:
        ...

    def keys(self) -> Iterable[str]:
        ...


class InMemoryCacheStore:
    """CacheStore backed by a dict."""

    def __init__(self, items: Optional[Mapping[str, CacheItem]] = None) -> None:
        self._items: Dict[str, CacheItem] = dict(items or {})

    def get(self, key: str) -> Optional[CacheItem]:
        return self._items.get(key)

    def put(self, key: str, item: CacheItem) -> None:
        self._items[key] = item

    def keys(self) -> Iterable[str]:
        return list(self._items.keys())

    def __len__(self) -> int:
        return len(self._items)


def _merge(previous: CacheItem, pair: "AssetPair") -> CacheItem:
    """Carry over links from a previous run for every hash that still matches."""
    item = previous.model_copy()
    item.name = pair.name
    changed = False

    if item.media_hash != pair.media_hash:
        item.media_hash = pair.media_hash
        item.media_link = ""
        changed = True

    if item.animation_hash != pair.animation_hash:
        item.animation_hash = pair.animation_hash
        item.animation_link = "" if pair.animation_hash is not None else None
        changed = True

    # Metadata has to be rewritten whenever a link it points at is reset
    if item.metadata_hash != pair.metadata_hash or changed:
        item.metadata_hash = pair.metadata_hash
        item.metadata_link = ""
        changed = True

    if changed:
        item.uploaded = False

    return item


def sync_cache(pairs: Mapping[int, "AssetPair"], store: CacheStore) -> List[int]:
    """
    Merge freshly built asset pairs into a cache store.

    Items whose hashes all match the previous run are left untouched. Items
    with changed content have the affected links cleared and are marked as
    not uploaded. Unknown indices get a new item.

    Args:
        pairs: Asset pairs keyed by index
        store: Cache store from the previous run (updated in place)

    Returns:
        Ascending list of indices that still need uploading
    """
    pending = []

    for index in sorted(pairs):
        pair = pairs[index]
        key = str(index)
        previous = store.get(key)

        if previous is None:
            item = pair.into_cache_item()
        else:
            item = _merge(previous, pair)
            if item != previous:
                logger.info(f"Asset changed since last run: {{'index': {index}, 'name': {pair.name!r}}}")

        store.put(key, item)
        if item.needs_upload():
            pending.append(index)

    logger.info(f"Cache synchronized: {{'assets': {len(pairs)}, 'pending_upload': {len(pending)}}}")
    return pending
