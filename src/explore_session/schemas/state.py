"""Session, URL and history schemas."""

import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .defaults import DEFAULT_RANGE_FROM, DEFAULT_RANGE_TO

# Queries are provider-specific mappings. Only `refId`, `key` and the
# content field (usually `expr`) have meaning here; everything else must
# survive encode/decode untouched, key order included.
Query = dict[str, Any]


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


class Range(BaseModel):
    """Time bounds of a session, relative (``now-1h``) or absolute."""

    from_: str = Field(..., alias="from", description="Start of the range")
    to: str = Field(..., description="End of the range")

    # Absolute ranges in older links may carry epoch millis as numbers.
    model_config = ConfigDict(
        frozen=True, populate_by_name=True, coerce_numbers_to_str=True
    )


DEFAULT_RANGE = Range(from_=DEFAULT_RANGE_FROM, to=DEFAULT_RANGE_TO)


class UrlState(BaseModel):
    """The subset of a session that travels inside a share link."""

    datasource: str | None = Field(None, description="Data source name")
    queries: list[Query] = Field(
        default_factory=list, description="Queries in display order"
    )
    range: Range = Field(DEFAULT_RANGE, description="Time range")

    model_config = ConfigDict(frozen=True)


class HistoryItem(BaseModel):
    """One remembered query invocation."""

    query: Query
    ts: int = Field(
        default_factory=now_ms, description="Time the query ran (epoch ms)"
    )

    model_config = ConfigDict(frozen=True)


class SessionState(BaseModel):
    """In-memory Explore session as held by the host.

    Only the fields the codec and history care about are modelled; any
    other host field is ignored on validation.
    """

    datasource_name: str | None = Field(
        None, alias="datasourceName", description="Selected data source"
    )
    range: Range = Field(DEFAULT_RANGE, description="Time range")
    initial_queries: list[Query] = Field(
        default_factory=list,
        alias="initialQueries",
        description="Queries the session was opened with",
    )
    history: list[HistoryItem] = Field(
        default_factory=list, description="History of the selected data source"
    )

    model_config = ConfigDict(populate_by_name=True)
