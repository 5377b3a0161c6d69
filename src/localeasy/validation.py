"""Validation predicates for keys, language codes, values and paths.

Every validator is total: it returns ``False`` for unexpected input types
instead of raising, so callers can gate user input before touching the disk.
"""

from __future__ import annotations

import os
import re
from typing import Any

LOCALE_SUFFIX = ".json"

_KEY_RE = re.compile(r"^[A-Za-z0-9._-]+$")
_LANGUAGE_RE = re.compile(r"^[A-Za-z-]+$")

ERR_INVALID_KEY = (
    "Invalid key format. Key should contain only letters, numbers, dots, "
    "underscores and hyphens"
)
ERR_INVALID_VALUE = "Invalid value. Value must be a string"
ERR_INVALID_LANGUAGE = "Invalid language code: {code}"
ERR_INVALID_FILE = "Invalid file path. File should be a .json file"
ERR_INVALID_DIRECTORY = "Invalid directory path"


def _as_text(path: Any) -> str | None:
    if isinstance(path, str):
        return path
    if isinstance(path, os.PathLike):
        raw = os.fspath(path)
        return raw if isinstance(raw, str) else None
    return None


def validate_key(key: Any) -> bool:
    """Return ``True`` when *key* is a non-empty ``[A-Za-z0-9._-]`` string."""
    if not isinstance(key, str) or not key:
        return False
    return _KEY_RE.fullmatch(key) is not None


def validate_language(code: Any) -> bool:
    """Return ``True`` for codes made of letters and hyphens, e.g. ``en-US``."""
    if not isinstance(code, str) or len(code) < 2:
        return False
    return _LANGUAGE_RE.fullmatch(code) is not None


def validate_value(value: Any) -> bool:
    """Return ``True`` when *value* is a string; the empty string is allowed."""
    return isinstance(value, str)


def validate_file_path(path: Any) -> bool:
    """Return ``True`` when *path* is non-empty and ends exactly in ``.json``."""
    text = _as_text(path)
    if not text:
        return False
    return text.endswith(LOCALE_SUFFIX)


def validate_directory_path(path: Any) -> bool:
    """Return ``True`` when *path* is a string or path-like object.

    Only the type is checked. Existence is left to the caller.
    """
    return _as_text(path) is not None


def parse_languages(raw: str) -> list[str]:
    """Split a comma-separated language list, dropping blank items."""
    return [part.strip() for part in raw.split(",") if part.strip()]


__all__ = [
    "ERR_INVALID_DIRECTORY",
    "ERR_INVALID_FILE",
    "ERR_INVALID_KEY",
    "ERR_INVALID_LANGUAGE",
    "ERR_INVALID_VALUE",
    "LOCALE_SUFFIX",
    "parse_languages",
    "validate_directory_path",
    "validate_file_path",
    "validate_key",
    "validate_language",
    "validate_value",
]
