"""Read, write and discover locale JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from localeasy import storage
from localeasy.errors import DirectoryReadError, LocaleReadError, LocaleWriteError
from localeasy.validation import LOCALE_SUFFIX

LocaleData = dict[str, str]

INDENT = 2


def read_locale_file(path: str | Path) -> LocaleData:
    """Load the mapping stored at *path*.

    Raises ``LocaleReadError`` when the file cannot be read, is not valid JSON
    or holds something other than an object. ``null`` and other falsy JSON
    documents are treated as an empty mapping.
    """
    try:
        data = json.loads(storage.read_file(path))
    except (OSError, ValueError) as exc:
        raise LocaleReadError.for_path(path) from exc
    if not data:
        return {}
    if not isinstance(data, dict):
        raise LocaleReadError.not_an_object(path)
    return data


def serialize_locale_data(data: LocaleData) -> str:
    """Return the canonical on-disk text for *data*."""
    return json.dumps(data, indent=INDENT, ensure_ascii=False) + "\n"


def write_locale_file(path: str | Path, data: LocaleData) -> None:
    """Replace the content of *path* with *data*."""
    try:
        storage.write_file(path, serialize_locale_data(data))
    except (OSError, TypeError, ValueError) as exc:
        raise LocaleWriteError.for_path(path) from exc


def find_locale_files(directory: str | Path) -> list[Path]:
    """Return the ``.json`` files directly inside *directory*, sorted by name."""
    try:
        names = storage.list_dir(directory)
    except OSError as exc:
        raise DirectoryReadError.for_path(directory) from exc
    base = Path(directory)
    return [base / name for name in sorted(names) if name.endswith(LOCALE_SUFFIX)]


__all__ = [
    "INDENT",
    "LocaleData",
    "find_locale_files",
    "read_locale_file",
    "serialize_locale_data",
    "write_locale_file",
]
