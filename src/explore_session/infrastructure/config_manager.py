"""Settings loading.

Settings live in ``settings/explore.json`` under the working directory.
The file is optional; without it every setting takes its built-in default.
"""

import logging
from pathlib import Path

from ..schemas import ExploreSettings

logger = logging.getLogger(__name__)

SETTINGS_DIR = Path.cwd() / "settings"
DEFAULT_SETTINGS_FILE = "explore.json"


def load_settings(filename: str = DEFAULT_SETTINGS_FILE) -> ExploreSettings:
    """Load and validate settings from a JSON file in SETTINGS_DIR.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValidationError: If the text is not JSON or doesn't match the schema.
    """
    file_path = SETTINGS_DIR / filename
    if not file_path.exists():
        raise FileNotFoundError(f"Settings file not found: {file_path}")

    settings = ExploreSettings.model_validate_json(file_path.read_text("utf-8"))
    logger.info(f"Loaded settings from {file_path}")
    return settings


def load_settings_or_default(filename: str = DEFAULT_SETTINGS_FILE) -> ExploreSettings:
    """Like `load_settings`, but a missing file yields the defaults.

    An invalid file is still an error.
    """
    if not (SETTINGS_DIR / filename).exists():
        return ExploreSettings()
    return load_settings(filename)
