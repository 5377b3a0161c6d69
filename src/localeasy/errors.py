"""Exception hierarchy raised by localeasy operations."""

from __future__ import annotations

from pathlib import Path
from typing import Self

ERR_READ_LOCALE = "Failed to read locale file: {path}"
ERR_NOT_OBJECT = "Failed to read locale file: {path} (expected a JSON object)"
ERR_WRITE_LOCALE = "Failed to write locale file: {path}"
ERR_CREATE_DIRECTORY = "Failed to create directory: {path}"
ERR_READ_DIRECTORY = "Failed to read directory: {path}"
ERR_PATH_NOT_FOUND = "Path does not exist: {path}"
ERR_KEY_EXISTS = (
    "Key '{key}' already exists with value: '{value}'\n"
    "Use --force to overwrite or choose a different key"
)
ERR_KEY_NOT_FOUND = "Key '{key}' not found in file: {path}"
ERR_KEY_NOT_IN_MAPPING = "Key '{key}' not found"
ERR_CANCELLED = "Deletion cancelled"


class LocaleasyError(RuntimeError):
    """Base class for errors reported to command line users."""


class ValidationError(LocaleasyError, ValueError):
    """Raised when a key, value, language code or path is malformed."""


class LocaleReadError(LocaleasyError):
    """Raised when a locale file cannot be read or parsed."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = path

    @classmethod
    def for_path(cls, path: str | Path) -> Self:
        return cls(ERR_READ_LOCALE.format(path=path), path)

    @classmethod
    def not_an_object(cls, path: str | Path) -> Self:
        return cls(ERR_NOT_OBJECT.format(path=path), path)


class LocaleWriteError(LocaleasyError):
    """Raised when a locale file cannot be written."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = path

    @classmethod
    def for_path(cls, path: str | Path) -> Self:
        return cls(ERR_WRITE_LOCALE.format(path=path), path)

    @classmethod
    def directory(cls, path: str | Path) -> Self:
        return cls(ERR_CREATE_DIRECTORY.format(path=path), path)


class DirectoryReadError(LocaleasyError):
    """Raised when a directory cannot be listed."""

    @classmethod
    def for_path(cls, path: str | Path) -> Self:
        return cls(ERR_READ_DIRECTORY.format(path=path))


class PathNotFoundError(LocaleasyError):
    """Raised when a path is neither an existing file nor a directory."""

    @classmethod
    def for_path(cls, path: str | Path) -> Self:
        return cls(ERR_PATH_NOT_FOUND.format(path=path))


class KeyExistsError(LocaleasyError):
    """Raised when a single-file add would overwrite a key without force."""

    @classmethod
    def for_key(cls, key: str, value: object) -> Self:
        return cls(ERR_KEY_EXISTS.format(key=key, value=value))


class KeyNotFoundError(LocaleasyError):
    """Raised when deleting a key that the locale file does not contain."""

    @classmethod
    def for_key(cls, key: str, path: str | Path) -> Self:
        return cls(ERR_KEY_NOT_FOUND.format(key=key, path=path))

    @classmethod
    def for_mapping(cls, key: str) -> Self:
        return cls(ERR_KEY_NOT_IN_MAPPING.format(key=key))


class OperationCancelledError(LocaleasyError):
    """Raised when the user declines an interactive confirmation."""

    @classmethod
    def deletion(cls) -> Self:
        return cls(ERR_CANCELLED)


__all__ = [
    "DirectoryReadError",
    "KeyExistsError",
    "KeyNotFoundError",
    "LocaleReadError",
    "LocaleWriteError",
    "LocaleasyError",
    "OperationCancelledError",
    "PathNotFoundError",
    "ValidationError",
]
