"""Services package for Explore session orchestration.

This package contains:
- explore_service.py: ExploreService for restoring, sharing and recording sessions
- explore_instance.py: Singleton service built from the settings file
"""

from explore_session.services.explore_instance import explore
from explore_session.services.explore_service import ExploreService

__all__ = ["ExploreService", "explore"]
