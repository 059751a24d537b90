"""Configure logging for applications embedding Seymour.

The library itself only creates module loggers under ``seymour.*``; it
never installs handlers unless an application calls
:func:`configure_logging`.
"""

from __future__ import annotations

import logging

from seymour.core.config import get_settings

LOGGER_NAME = "seymour"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a console handler to the ``seymour`` logger.

    Args:
        level: Log level name or number. Defaults to ``Settings.log_level``.

    Returns:
        The configured ``seymour`` logger.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates
    logger.handlers = []

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)

    return logger
