"""Configuration schema for the Explore session package."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .defaults import (
    DEFAULT_HISTORY_KEY_PREFIX,
    DEFAULT_HISTORY_MAX_ITEMS,
)


class ExploreSettings(BaseModel):
    """Root settings for query history persistence."""

    history_max_items: int = Field(
        DEFAULT_HISTORY_MAX_ITEMS,
        gt=0,
        description="Maximum number of history items kept per data source",
    )
    history_key_prefix: str = Field(
        DEFAULT_HISTORY_KEY_PREFIX,
        min_length=1,
        description="Storage key prefix; the data source id is appended",
    )
    store_path: Path | None = Field(
        None, description="JSON file backing the store. None = in-memory."
    )

    model_config = ConfigDict(frozen=True)
