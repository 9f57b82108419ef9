"""Explore service - restores, shares and records Explore sessions.

This module ties the URL codec, the query guard and the history store to
a reactive ExploreState. It holds no state of its own; everything lives
in the injected collaborators.
"""

import logging
from typing import TYPE_CHECKING, Any, Mapping, Sequence
from urllib.parse import parse_qs, quote

from explore_session.core.codec import parse_url_state, serialize_state_to_url_param
from explore_session.core.history import HistoryStore
from explore_session.core.queries import ensure_queries, has_non_empty_query
from explore_session.errors import UrlStateError
from explore_session.infrastructure.store import create_store
from explore_session.schemas import ExploreSettings, HistoryItem, UrlState
from explore_session.schemas.defaults import DEFAULT_EXPLORE_PATH, DEFAULT_URL_PARAM

if TYPE_CHECKING:
    from explore_session.state.explore import ExploreState

logger = logging.getLogger(__name__)


class ExploreService:
    """Session operations with dependency injection.

    Attributes:
        state: Reactive session state to read from and write to.
        history_store: Store for per-data-source query history.
        param_name: Name of the URL query parameter holding the state.
    """

    def __init__(
        self,
        state: "ExploreState",
        history_store: HistoryStore,
        param_name: str = DEFAULT_URL_PARAM,
    ) -> None:
        self.state = state
        self.history_store = history_store
        self.param_name = param_name

    @classmethod
    def from_settings(
        cls, state: "ExploreState", settings: ExploreSettings
    ) -> "ExploreService":
        """Build a service whose history store follows `settings`."""
        store = create_store(settings.store_path)
        logger.info(
            f"History store: {type(store).__name__}, "
            f"max {settings.history_max_items} items"
        )
        return cls(state, HistoryStore(store, settings))

    # --- Restoring ---

    def restore(self, param_value: str | None) -> UrlState:
        """Load a session from percent-decoded parameter text.

        An unreadable parameter is logged and treated like an absent one,
        so a broken link still opens an empty session.
        """
        try:
            url_state = parse_url_state(param_value)
        except UrlStateError as e:
            logger.warning(f"Ignoring unreadable URL state: {e}")
            url_state = parse_url_state(None)

        self.state.apply_url_state(url_state, ensure_queries(url_state.queries))
        self.state.history.value = self.history_store.load(url_state.datasource or "")
        logger.info(
            f"Restored session: datasource={url_state.datasource!r}, "
            f"{len(url_state.queries)} queries"
        )
        return url_state

    def load_from_url(self, search: str) -> UrlState:
        """Restore from a URL search string such as ``?state=%7B...%7D``."""
        query = search[1:] if search.startswith("?") else search
        # parse_qs does the percent-decoding
        values = parse_qs(query).get(self.param_name)
        return self.restore(values[0] if values else None)

    # --- Sharing ---

    def url_param(self, compact: bool = False) -> str:
        """Current session as (not percent-encoded) parameter text."""
        return serialize_state_to_url_param(self.state.to_session_state(), compact)

    def share_url(self, base: str = DEFAULT_EXPLORE_PATH, compact: bool = False) -> str:
        """Link that reopens the current session."""
        return f"{base}?{self.param_name}={quote(self.url_param(compact), safe='')}"

    # --- Data source and history ---

    def set_datasource(self, name: str | None) -> list[HistoryItem]:
        """Switch data source and load its history."""
        self.state.datasource_name.value = name
        self.state.history.value = self.history_store.load(name or "")
        return self.state.history.value

    def record_queries(self, queries: Sequence[Mapping[str, Any]]) -> bool:
        """Remember queries that just ran against the current data source.

        Returns:
            False if every query was blank and nothing was recorded.
        """
        if not has_non_empty_query(queries):
            logger.debug("Not recording history: all queries are empty")
            return False

        datasource_id = self.state.datasource_name.value
        if not datasource_id:
            logger.warning("Not recording history: no datasource selected")
            return False

        self.state.history.value = self.history_store.update(
            self.state.history.value, datasource_id, queries
        )
        return True

    def clear_history(self) -> None:
        """Forget the history of the current data source."""
        datasource_id = self.state.datasource_name.value
        if datasource_id:
            self.history_store.clear(datasource_id)
        self.state.history.value = []
