"""Logging setup for hosts embedding the package."""

import logging
from pathlib import Path

from explore_session.schemas.defaults import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int | str = DEFAULT_LOG_LEVEL, log_file: Path | str | None = None
) -> logging.Logger:
    """Attach stream (and optionally file) handlers to the package logger.

    Existing handlers are removed first so repeated calls do not duplicate
    output.
    """
    logger = logging.getLogger("explore_session")
    logger.setLevel(level)
    if logger.handlers:
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
