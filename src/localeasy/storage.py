"""Filesystem primitives used by the locale codec and orchestrator.

Read, write and listing helpers let ``OSError`` propagate. The ``is_*``
probes never raise and report ``False`` for paths that cannot be inspected.
"""

from __future__ import annotations

import shutil
from pathlib import Path

ERR_NULL_BYTES = "path contains null bytes"


def _checked(path: str | Path) -> Path:
    if "\x00" in str(path):
        raise OSError(ERR_NULL_BYTES)
    return Path(path)


def read_file(path: str | Path) -> str:
    """Return the UTF-8 text stored at *path*."""
    return _checked(path).read_text(encoding="utf-8")


def write_file(path: str | Path, content: str) -> None:
    """Replace the content of *path* with *content* encoded as UTF-8."""
    _checked(path).write_text(content, encoding="utf-8")


def list_dir(path: str | Path) -> list[str]:
    """Return the names of the immediate entries of directory *path*."""
    return [entry.name for entry in _checked(path).iterdir()]


def create_dir(path: str | Path) -> None:
    """Create *path* and any missing parents."""
    _checked(path).mkdir(parents=True, exist_ok=True)


def delete_file(path: str | Path) -> None:
    """Remove the file at *path*."""
    _checked(path).unlink()


def delete_dir(path: str | Path) -> None:
    """Remove directory *path* together with its content."""
    shutil.rmtree(_checked(path))


def is_directory(path: str | Path) -> bool:
    """Return ``True`` when *path* is an existing directory."""
    try:
        return _checked(path).is_dir()
    except (OSError, ValueError):
        return False


def is_file(path: str | Path) -> bool:
    """Return ``True`` when *path* is an existing regular file."""
    try:
        return _checked(path).is_file()
    except (OSError, ValueError):
        return False


__all__ = [
    "create_dir",
    "delete_dir",
    "delete_file",
    "is_directory",
    "is_file",
    "list_dir",
    "read_file",
    "write_file",
]
