"""Pure operations over locale mappings.

None of these functions mutate their input; each returns a fresh ``dict``.
"""

from __future__ import annotations

from collections.abc import Mapping

from localeasy.codec import LocaleData


def has_key(data: Mapping[str, str], key: str) -> bool:
    """Return ``True`` when *key* is present in *data*."""
    return key in data


def add_key(data: Mapping[str, str], key: str, value: str) -> LocaleData:
    """Return a copy of *data* with *key* set to *value*."""
    return {**data, key: value}


def remove_key(data: Mapping[str, str], key: str) -> LocaleData:
    """Return a copy of *data* without *key*."""
    return {k: v for k, v in data.items() if k != key}


def sort_locale_data(data: Mapping[str, str]) -> LocaleData:
    """Return a copy of *data* ordered by key."""
    return {key: data[key] for key in sorted(data)}


def is_sorted(data: Mapping[str, str]) -> bool:
    keys = list(data)
    return keys == sorted(keys)


def seed_locale_data(language: str) -> LocaleData:
    """Return the starter entries written by ``init`` for *language*."""
    return {
        "welcome": f"Welcome to {language}",
        "hello": f"Hello in {language}",
    }


__all__ = [
    "add_key",
    "has_key",
    "is_sorted",
    "remove_key",
    "seed_locale_data",
    "sort_locale_data",
]
