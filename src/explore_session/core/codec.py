"""URL state codec.

Converts an Explore session into the text carried by the ``state`` URL
parameter and back. Two wire formats exist:

- object:  ``{"datasource":..,"queries":[..],"range":{"from":..,"to":..}}``
- compact: ``[from, to, datasource, query1, query2, ...]``

Serialization emits the object form unless ``compact`` is requested;
parsing accepts both and tells them apart by JSON type. Percent-encoding
is the caller's job in both directions.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from explore_session.core.queries import clear_query_keys
from explore_session.errors import UrlStateError
from explore_session.schemas import DEFAULT_RANGE, SessionState, UrlState

logger = logging.getLogger(__name__)

# from, to, datasource
COMPACT_HEADER_LENGTH = 3

__all__ = [
    "COMPACT_HEADER_LENGTH",
    "DEFAULT_RANGE",
    "parse_url_state",
    "serialize_state_to_url_param",
    "to_url_state",
]


def _dumps(value: Any) -> str:
    # Same text as JSON.stringify: no whitespace, unicode kept, "/" unescaped.
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def to_url_state(state: SessionState | Mapping[str, Any]) -> UrlState:
    """Project a session onto the fields that travel in a link.

    Args:
        state: A SessionState, or a mapping using either the Python field
            names or the host's camelCase names.

    Returns:
        UrlState with bookkeeping fields removed from every query.
    """
    if not isinstance(state, SessionState):
        # null means "not set", as in parse_url_state
        state = SessionState.model_validate(
            {k: v for k, v in state.items() if v is not None}
        )
    return UrlState(
        datasource=state.datasource_name,
        queries=[clear_query_keys(q) for q in state.initial_queries],
        range=state.range,
    )


def serialize_state_to_url_param(
    state: SessionState | Mapping[str, Any], compact: bool = False
) -> str:
    """Serialize a session to URL parameter text.

    Args:
        state: Session to serialize.
        compact: Emit the legacy positional array instead of an object.

    Returns:
        JSON text, not percent-encoded.
    """
    data = to_url_state(state).model_dump(mode="json", by_alias=True)
    if compact:
        time_range = data["range"]
        return _dumps(
            [time_range["from"], time_range["to"], data["datasource"], *data["queries"]]
        )
    return _dumps(data)


def parse_url_state(param_value: str | None) -> UrlState:
    """Decode URL parameter text produced by either wire format.

    Args:
        param_value: Percent-decoded parameter text. Empty or None yields
            the default state.

    Returns:
        UrlState with missing fields defaulted. Queries are taken as-is;
        assigning ref ids is left to the caller.

    Raises:
        UrlStateError: If the text is not JSON, or is JSON of the wrong
            shape (scalar, short compact array, bad field types).
    """
    if not param_value:
        return UrlState(datasource=None, queries=[], range=DEFAULT_RANGE)

    try:
        parsed = json.loads(param_value)
    except json.JSONDecodeError as e:
        raise UrlStateError(f"URL state is not valid JSON: {e}", param_value) from e

    if isinstance(parsed, list):
        if len(parsed) < COMPACT_HEADER_LENGTH:
            raise UrlStateError(
                f"Compact URL state needs at least {COMPACT_HEADER_LENGTH} "
                f"elements, got {len(parsed)}",
                param_value,
            )
        range_from, range_to, datasource, *queries = parsed
        data = {
            "datasource": datasource,
            "queries": queries,
            "range": {"from": range_from, "to": range_to},
        }
    elif isinstance(parsed, dict):
        # null means "not set" for everything but the datasource
        data = {
            k: v for k, v in parsed.items() if v is not None or k == "datasource"
        }
    else:
        raise UrlStateError(
            f"URL state must be a JSON object or array, got {type(parsed).__name__}",
            param_value,
        )

    try:
        url_state = UrlState.model_validate(data)
    except ValidationError as e:
        raise UrlStateError(
            f"URL state has an invalid shape ({e.error_count()} error(s))",
            param_value,
        ) from e

    logger.debug(
        f"Parsed {'compact' if isinstance(parsed, list) else 'object'} URL state "
        f"with {len(url_state.queries)} queries"
    )
    return url_state
