"""Query helpers: emptiness guard and caller-side bookkeeping.

`refId` and `key` are assigned by the session that owns the queries. They
are stripped before queries go into a share link and regenerated when a
session is restored from one.
"""

import random
import time
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from explore_session.schemas.defaults import (
    DEFAULT_QUERY_FIELD,
    QUERY_BOOKKEEPING_FIELDS,
)
from explore_session.schemas.state import Query


def query_content(query: Mapping[str, Any], field: str = DEFAULT_QUERY_FIELD) -> str:
    """Return the stripped content of `field`, or "" if missing or not text."""
    value = query.get(field)
    if not isinstance(value, str):
        return ""
    return value.strip()


def has_non_empty_query(
    queries: Iterable[Mapping[str, Any]], field: str = DEFAULT_QUERY_FIELD
) -> bool:
    """Check whether at least one query carries non-blank content.

    Args:
        queries: Queries to inspect.
        field: Primary content field of the provider (``expr`` by default).

    Returns:
        False for an empty collection or when every query is blank.
    """
    return any(query_content(q, field) for q in queries)


def generate_ref_id(index: int = 0) -> str:
    """Ref ids are 1-based positions: "1", "2", ..."""
    return str(index + 1)


def generate_key(index: int = 0) -> str:
    """Unique row key for a query, stable for the lifetime of the row."""
    return f"Q-{int(time.time() * 1000)}-{random.random()}-{index}"


def generate_empty_query(index: int = 0) -> Query:
    return {"refId": generate_ref_id(index), "key": generate_key(index)}


def ensure_queries(queries: Sequence[Mapping[str, Any]] | None = None) -> list[Query]:
    """Give every query fresh bookkeeping ids.

    A session restored from a link has no `refId`/`key` values (or stale
    ones), so they are always regenerated. An empty or missing list yields
    a single empty query so the editor has a row to show.
    """
    if queries:
        return [{**q, **generate_empty_query(i)} for i, q in enumerate(queries)]
    return [generate_empty_query()]


def clear_query_keys(query: Mapping[str, Any]) -> Query:
    """Copy of `query` without the caller bookkeeping fields."""
    return {k: v for k, v in query.items() if k not in QUERY_BOOKKEEPING_FIELDS}
