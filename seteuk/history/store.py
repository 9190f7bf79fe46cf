"""Bounded, persisted log of past generation results.

One store exists per record category. Items are kept newest first and the
sequence never grows past ``max_items``. Every mutation rewrites the full
snapshot under the store's key; the in-memory sequence stays authoritative
when a write fails.
"""

import dataclasses
import json
import time
from collections.abc import Callable

from seteuk.logging.logger import Log
from seteuk.records.codec import history_item_from_dict, history_item_to_dict
from seteuk.records.exceptions import RecordValidationError
from seteuk.records.models import GeneratedResult, HistoryItem
from seteuk.storage.base import BaseKeyValueStorage
from seteuk.storage.exceptions import PersistenceCorruptionError, StorageError

DEFAULT_MAX_ITEMS = 50


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def decode_history(raw: str) -> list[HistoryItem]:
    """Decode a persisted history snapshot.

    Raises:
        PersistenceCorruptionError: if the snapshot is not a list of valid items.
    """
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PersistenceCorruptionError(f"History is not valid JSON: {exc}") from exc
    if not isinstance(parsed, list):
        raise PersistenceCorruptionError("History snapshot must be a list")
    try:
        return [history_item_from_dict(entry) for entry in parsed]
    except RecordValidationError as exc:
        raise PersistenceCorruptionError(f"Invalid history item: {exc}") from exc


def encode_history(items: list[HistoryItem]) -> str:
    return json.dumps([history_item_to_dict(item) for item in items], ensure_ascii=False)


class HistoryStore:
    """Newest-first history of generated results for one storage key."""

    def __init__(
        self,
        storage: BaseKeyValueStorage,
        key: str,
        max_items: int = DEFAULT_MAX_ITEMS,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        if max_items < 1:
            raise ValueError("max_items must be at least 1")
        self._storage = storage
        self._key = key
        self._max_items = max_items
        self._clock = clock
        self._items: list[HistoryItem] = self.load()

    @property
    def key(self) -> str:
        return self._key

    @property
    def items(self) -> list[HistoryItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def load(self) -> list[HistoryItem]:
        """Read the persisted snapshot. Unreadable or corrupt history yields an empty list."""
        try:
            raw = self._storage.get(self._key)
        except StorageError as exc:
            Log.error(f"Failed to read history {self._key}: {exc}")
            return []
        if raw is None:
            Log.debug(f"No history stored under {self._key}, starting fresh")
            return []
        try:
            items = decode_history(raw)
        except PersistenceCorruptionError as exc:
            Log.error(f"Discarding corrupt history {self._key}: {exc}")
            return []
        Log.info(f"Loaded {len(items)} history items from {self._key}")
        return items[: self._max_items]

    def get(self, item_id: str) -> HistoryItem | None:
        return next((item for item in self._items if item.id == item_id), None)

    def add(self, result: GeneratedResult, summary: str | None = None) -> str:
        """Prepend a new item, evict beyond the cap, persist, and return the new id."""
        timestamp = self._clock()
        item = HistoryItem(
            id=self._next_id(timestamp),
            timestamp=timestamp,
            result=result,
            summary=summary,
        )
        self._items = [item, *self._items][: self._max_items]
        self._persist()
        return item.id

    def update(
        self,
        item_id: str,
        *,
        result: GeneratedResult | None = None,
        summary: str | None = None,
    ) -> None:
        """Replace fields of the matching item. Unknown ids are ignored."""
        changes: dict[str, object] = {}
        if result is not None:
            changes["result"] = result
        if summary is not None:
            changes["summary"] = summary
        index = self._index_of(item_id)
        if index is None or not changes:
            return
        self._items[index] = dataclasses.replace(self._items[index], **changes)
        self._persist()

    def remove(self, item_id: str) -> None:
        index = self._index_of(item_id)
        if index is None:
            return
        del self._items[index]
        self._persist()

    def clear(self) -> None:
        self._items = []
        try:
            self._storage.remove(self._key)
        except StorageError as exc:
            Log.error(f"Failed to remove history {self._key}: {exc}")

    def _index_of(self, item_id: str) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def _next_id(self, timestamp: int) -> str:
        # Ids derive from the creation time but must stay unique within a burst.
        newest = max((int(item.id) for item in self._items if item.id.isdigit()), default=0)
        return str(max(timestamp, newest + 1))

    def _persist(self) -> None:
        try:
            self._storage.set(self._key, encode_history(self._items))
        except StorageError as exc:
            Log.error("Failed to persist history", key=self._key, error=exc)
            return
        Log.debug(f"Saved {len(self._items)} history items to {self._key}")
