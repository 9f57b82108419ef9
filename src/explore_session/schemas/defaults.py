"""Default values for Explore session state and query history.

These constants are used as `Field(default=...)` values in the Pydantic
schemas. They live in the schemas layer so that `schemas` does not depend
on `core`.
"""

# --- Time Range ---
# Relative bounds understood by the host's time picker. Opaque to this package.
DEFAULT_RANGE_FROM = "now-6h"
DEFAULT_RANGE_TO = "now"

# --- Query History ---
# Full storage key is f"{DEFAULT_HISTORY_KEY_PREFIX}.{datasource_id}".
DEFAULT_HISTORY_KEY_PREFIX = "grafana.explore.history"
DEFAULT_HISTORY_MAX_ITEMS = 100

# --- Queries ---
# Primary content field checked by the emptiness guard and used for dedup.
DEFAULT_QUERY_FIELD = "expr"
# Caller-local bookkeeping, never part of the wire format.
QUERY_BOOKKEEPING_FIELDS = ("refId", "key")

# --- URL ---
DEFAULT_URL_PARAM = "state"
DEFAULT_EXPLORE_PATH = "/explore"

# --- Logging ---
DEFAULT_LOG_LEVEL = "INFO"
