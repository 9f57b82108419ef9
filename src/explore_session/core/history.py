"""Per-data-source query history.

History lists are most-recent-first, hold at most one item per query
expression, and are capped in length. They are persisted whole under
``<prefix>.<datasource_id>`` on every change; there is no incremental
write and no locking, so concurrent writers race and the last one wins.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from explore_session.core.queries import query_content
from explore_session.infrastructure.store import KeyValueStore, get_default_store
from explore_session.schemas import ExploreSettings, HistoryItem
from explore_session.schemas.defaults import (
    DEFAULT_HISTORY_KEY_PREFIX,
    DEFAULT_HISTORY_MAX_ITEMS,
    DEFAULT_QUERY_FIELD,
)
from explore_session.schemas.state import now_ms

logger = logging.getLogger(__name__)

HistoryInput = Iterable[HistoryItem | Mapping[str, Any]]


def history_key(datasource_id: str, prefix: str = DEFAULT_HISTORY_KEY_PREFIX) -> str:
    """Storage key for a data source's history."""
    return f"{prefix}.{datasource_id}"


def _as_items(history: HistoryInput) -> list[HistoryItem]:
    return [
        item if isinstance(item, HistoryItem) else HistoryItem.model_validate(item)
        for item in history
    ]


def merge_history(
    history: HistoryInput,
    queries: Iterable[Mapping[str, Any]],
    max_items: int = DEFAULT_HISTORY_MAX_ITEMS,
    field: str = DEFAULT_QUERY_FIELD,
) -> list[HistoryItem]:
    """Fold freshly run queries into a history list without persisting.

    Queries are taken in order and each one is put in front, so the last
    query of the batch ends up first. Only the first (newest) item per
    content is kept, which also collapses duplicates already present in a
    stale `history`. Blank queries are skipped.
    """
    ts = now_ms()
    fresh = [
        HistoryItem(query=dict(query), ts=ts)
        for query in queries
        if query_content(query, field)
    ]
    merged: list[HistoryItem] = []
    seen: set[str] = set()
    for item in [*reversed(fresh), *_as_items(history)]:
        content = item.query.get(field)
        if isinstance(content, str):
            if content in seen:
                continue
            seen.add(content)
        merged.append(item)
    return merged[:max_items]


class HistoryStore:
    """Reads and writes history lists in a key-value store.

    Attributes:
        store: Backend holding the serialized lists.
        max_items: Capacity of each list.
        key_prefix: Prefix of every storage key.
    """

    def __init__(
        self, store: KeyValueStore, settings: ExploreSettings | None = None
    ) -> None:
        settings = settings or ExploreSettings()
        self.store = store
        self.max_items = settings.history_max_items
        self.key_prefix = settings.history_key_prefix

    def key(self, datasource_id: str) -> str:
        return history_key(datasource_id, self.key_prefix)

    def load(self, datasource_id: str) -> list[HistoryItem]:
        """Read the stored history, or [] if there is none or it is unreadable."""
        if not datasource_id:
            return []
        key = self.key(datasource_id)
        raw = self.store.get_object(key, [])
        if not isinstance(raw, list):
            logger.warning(f"Ignoring history under {key}: not a list")
            return []
        try:
            return _as_items(raw)
        except ValidationError as e:
            logger.warning(
                f"Ignoring history under {key}: {e.error_count()} bad item(s)"
            )
            return []

    def update(
        self,
        history: HistoryInput,
        datasource_id: str,
        queries: Sequence[Mapping[str, Any]],
    ) -> list[HistoryItem]:
        """Add queries to a history list and persist the result.

        Args:
            history: Current list held by the caller (may be stale).
            datasource_id: Data source the queries ran against.
            queries: Queries that were just run.

        Returns:
            The new list, identical to what was written. With an empty
            `datasource_id` nothing is written and `history` is returned.
        """
        if not datasource_id:
            logger.warning("Not recording history without a datasource id")
            return _as_items(history)

        items = merge_history(history, queries, self.max_items)
        key = self.key(datasource_id)
        self.store.set_object(key, [item.model_dump(mode="json") for item in items])
        logger.debug(f"Saved {len(items)} history item(s) under {key}")
        return items

    def clear(self, datasource_id: str) -> None:
        """Delete the stored history of a data source."""
        if not datasource_id:
            return
        self.store.remove(self.key(datasource_id))
        logger.info(f"Cleared history for {datasource_id}")


def update_history(
    history: HistoryInput,
    datasource_id: str,
    queries: Sequence[Mapping[str, Any]],
    store: KeyValueStore | None = None,
    settings: ExploreSettings | None = None,
) -> list[HistoryItem]:
    """Add queries to a history list; see `HistoryStore.update`.

    Uses the process default store unless one is given.
    """
    if store is None:
        store = get_default_store()
    return HistoryStore(store, settings).update(history, datasource_id, queries)


def clear_history(
    datasource_id: str,
    store: KeyValueStore | None = None,
    settings: ExploreSettings | None = None,
) -> None:
    """Delete a data source's stored history; see `HistoryStore.clear`."""
    if store is None:
        store = get_default_store()
    HistoryStore(store, settings).clear(datasource_id)
