"""Singleton instance of the ExploreService.

Separated from explore_service.py to avoid circular imports with the state
module. Built from ``settings/explore.json`` when present; an unreadable
settings file is logged and the defaults are used instead.
"""

import logging

from pydantic import ValidationError

from explore_session.infrastructure.config_manager import load_settings_or_default
from explore_session.schemas import ExploreSettings
from explore_session.services.explore_service import ExploreService
from explore_session.state.explore import explore_state

logger = logging.getLogger(__name__)


def build_service() -> ExploreService:
    """Service bound to the shared state, configured from the settings file."""
    try:
        settings = load_settings_or_default()
    except ValidationError as e:
        logger.error(f"Invalid settings file, using defaults: {e}")
        settings = ExploreSettings()
    return ExploreService.from_settings(explore_state, settings)


# Singleton instance with the default state injected
explore = build_service()
