"""User configuration providing command line defaults."""

from __future__ import annotations

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from localeasy import utils

CONFIG_PATH = utils.CONFIG_FILE

DEFAULT_CONFIG: dict[str, Any] = {
    "log_level": "ERROR",
    "init_directory": "./locales",
    "init_languages": "en,ru",
}


def _coerce(raw: Any) -> dict[str, Any]:
    """Keep known keys whose values have the expected type."""
    if not isinstance(raw, dict):
        return {}
    cfg = {
        key: value
        for key, value in raw.items()
        if key in DEFAULT_CONFIG and isinstance(value, type(DEFAULT_CONFIG[key]))
    }
    if str(cfg.get("log_level", "ERROR")).upper() not in utils.LOG_LEVELS:
        del cfg["log_level"]
    return cfg


def load_config_at(path: Path) -> dict[str, Any]:
    """Load configuration from a specific path.

    Missing or malformed files leave the defaults in place.
    """
    cfg = DEFAULT_CONFIG.copy()
    if path.exists():
        with suppress(Exception):
            cfg.update(_coerce(json.loads(path.read_text(encoding="utf-8"))))
    return cfg


def load_config() -> dict[str, Any]:
    """Load configuration using :data:`CONFIG_PATH`."""
    return load_config_at(CONFIG_PATH)


__all__ = ["CONFIG_PATH", "DEFAULT_CONFIG", "load_config", "load_config_at"]
