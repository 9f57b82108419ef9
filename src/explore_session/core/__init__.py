"""Core Explore logic: URL codec, query history and query helpers.

Nothing here touches UI state; persistence goes through an injected
key-value store.
"""

from explore_session.core.codec import (
    DEFAULT_RANGE,
    parse_url_state,
    serialize_state_to_url_param,
)
from explore_session.core.history import (
    HistoryStore,
    clear_history,
    history_key,
    update_history,
)
from explore_session.core.queries import ensure_queries, has_non_empty_query
from explore_session.errors import ExploreError, StoreError, UrlStateError

__all__ = [
    "DEFAULT_RANGE",
    "ExploreError",
    "HistoryStore",
    "StoreError",
    "UrlStateError",
    "clear_history",
    "ensure_queries",
    "has_non_empty_query",
    "history_key",
    "parse_url_state",
    "serialize_state_to_url_param",
    "update_history",
]
