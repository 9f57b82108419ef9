"""Reactive session state for hosts built on Solara."""

from explore_session.state.explore import ExploreState, explore_state

__all__ = ["ExploreState", "explore_state"]
