"""Shared test fixtures."""

from typing import Callable

import pytest

from explore_session.core.history import HistoryStore
from explore_session.infrastructure import store as store_module
from explore_session.infrastructure.store import MemoryStore
from explore_session.schemas import ExploreSettings, HistoryItem, SessionState
from explore_session.services.explore_service import ExploreService
from explore_session.state.explore import ExploreState
from factories import create_history_item, create_session_state


@pytest.fixture(autouse=True)
def default_store(monkeypatch) -> MemoryStore:
    """Give every test a fresh process default store."""
    fresh = MemoryStore()
    monkeypatch.setattr(store_module, "_default_store", fresh)
    return fresh


@pytest.fixture
def session_state_factory() -> Callable[..., SessionState]:
    """Fixture that returns the session state factory function."""
    return create_session_state


@pytest.fixture
def history_item_factory() -> Callable[..., HistoryItem]:
    """Fixture that returns the history item factory function."""
    return create_history_item


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def small_settings() -> ExploreSettings:
    """Settings with a tiny history capacity."""
    return ExploreSettings(history_max_items=3)


@pytest.fixture
def history_store(memory_store: MemoryStore) -> HistoryStore:
    return HistoryStore(memory_store)


@pytest.fixture
def explore_state() -> ExploreState:
    """Return a fresh, unshared session state."""
    return ExploreState()


@pytest.fixture
def service(explore_state: ExploreState, history_store: HistoryStore) -> ExploreService:
    """Return a service wired to in-memory collaborators."""
    return ExploreService(explore_state, history_store)
