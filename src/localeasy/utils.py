"""Common utilities shared by localeasy modules."""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_config_dir

# store configuration in a platform-specific user config directory
CONFIG_FILE = Path(user_config_dir("localeasy")) / "localeasy_config.json"

# central logger for the project
logger = logging.getLogger("localeasy")
logger.propagate = False

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(
    level: str = "ERROR", handler: logging.Handler | None = None
) -> logging.Logger:
    """Configure and return the package logger."""
    name = str(level).upper()
    numeric = getattr(logging, name) if name in LOG_LEVELS else logging.ERROR
    logger.setLevel(numeric)
    logger.handlers.clear()
    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)

    # forward warnings.warn() calls through the logging system
    logging.captureWarnings(True)
    wlog = logging.getLogger("py.warnings")
    wlog.setLevel(numeric)
    wlog.handlers.clear()
    wlog.addHandler(handler)
    wlog.propagate = False
    return logger


# configure default logging on import
configure_logging()


__all__ = ["CONFIG_FILE", "LOG_LEVELS", "configure_logging", "logger"]
