"""Explore session state - reactive values bound to the host UI."""

import solara

from explore_session.core.codec import DEFAULT_RANGE
from explore_session.schemas import HistoryItem, Query, Range, SessionState, UrlState


class ExploreState:
    """Reactive state of one Explore session.

    Holds what the share link carries (data source, queries, range) plus
    the history list of the selected data source.
    """

    def __init__(self):
        self.datasource_name: solara.Reactive[str | None] = solara.reactive(None)
        self.range: solara.Reactive[Range] = solara.reactive(DEFAULT_RANGE)
        self.queries: solara.Reactive[list[Query]] = solara.reactive([])
        self.history: solara.Reactive[list[HistoryItem]] = solara.reactive([])

    def reset(self) -> None:
        """Back to an empty session."""
        self.datasource_name.value = None
        self.range.value = DEFAULT_RANGE
        self.queries.value = []
        self.history.value = []

    def to_session_state(self) -> SessionState:
        """Snapshot the reactive values for serialization."""
        return SessionState(
            datasource_name=self.datasource_name.value,
            range=self.range.value,
            initial_queries=list(self.queries.value),
            history=list(self.history.value),
        )

    def apply_url_state(self, url_state: UrlState, queries: list[Query]) -> None:
        """Load a decoded link.

        `queries` are the link's queries after the caller assigned ids.
        """
        self.datasource_name.value = url_state.datasource
        self.range.value = url_state.range
        self.queries.value = queries


# Singleton instance
explore_state = ExploreState()
