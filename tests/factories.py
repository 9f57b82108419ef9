"""Test data factories for generating valid schema objects."""

from typing import Any

from explore_session.schemas import HistoryItem, Query, Range, SessionState


def create_query(expr: str = "metric", ref_id: str = "1", **kwargs: Any) -> Query:
    """Create a query mapping with overrideable fields."""
    return {"refId": ref_id, "expr": expr, **kwargs}


def create_session_state(
    datasource_name: str | None = "foo", **kwargs: Any
) -> SessionState:
    """Create a valid SessionState."""
    defaults = {
        "range": Range(from_="now-5h", to="now"),
        "initial_queries": [
            create_query('metric{test="a/b"}', "1"),
            create_query('super{foo="x/z"}', "2"),
        ],
    }
    data = {**defaults, **kwargs}
    return SessionState(datasource_name=datasource_name, **data)


def create_history_item(
    expr: str = "metric", ts: int = 0, **kwargs: Any
) -> HistoryItem:
    """Create a HistoryItem for a query with the given expression."""
    return HistoryItem(query=create_query(expr, **kwargs), ts=ts)
