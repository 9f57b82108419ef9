"""Schemas package.

- state.py: Session, URL and history models (SessionState, UrlState, etc.)
- config.py: Package settings (ExploreSettings)
- defaults.py: Default values shared by the models
"""

from .config import ExploreSettings
from .state import (
    DEFAULT_RANGE,
    HistoryItem,
    Query,
    Range,
    SessionState,
    UrlState,
)

__all__ = [
    "DEFAULT_RANGE",
    "ExploreSettings",
    "HistoryItem",
    "Query",
    "Range",
    "SessionState",
    "UrlState",
]
