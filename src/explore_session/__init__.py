"""Shareable Explore sessions and per-data-source query history."""

from explore_session.core import (
    DEFAULT_RANGE,
    HistoryStore,
    clear_history,
    ensure_queries,
    has_non_empty_query,
    history_key,
    parse_url_state,
    serialize_state_to_url_param,
    update_history,
)
from explore_session.errors import ExploreError, StoreError, UrlStateError
from explore_session.schemas import (
    ExploreSettings,
    HistoryItem,
    Query,
    Range,
    SessionState,
    UrlState,
)

__all__ = [
    "DEFAULT_RANGE",
    "ExploreError",
    "ExploreSettings",
    "HistoryItem",
    "HistoryStore",
    "Query",
    "Range",
    "SessionState",
    "StoreError",
    "UrlState",
    "UrlStateError",
    "clear_history",
    "ensure_queries",
    "has_non_empty_query",
    "history_key",
    "parse_url_state",
    "serialize_state_to_url_param",
    "update_history",
]
