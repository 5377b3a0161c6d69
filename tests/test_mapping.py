from __future__ import annotations

import pytest

from localeasy.mapping import (
    add_key,
    has_key,
    is_sorted,
    remove_key,
    seed_locale_data,
    sort_locale_data,
)

SAMPLES = [
    {},
    {"hello": "Hello"},
    {"zebra": "Z", "apple": "A", "Mango": "M", "apple.pie": "P"},
]


@pytest.mark.parametrize("data", SAMPLES)
def test_add_key_sets_value_without_mutating(data):
    original = dict(data)
    updated = add_key(data, "new.key", "value")
    assert has_key(updated, "new.key")
    assert updated["new.key"] == "value"
    assert data == original
    assert updated is not data


def test_add_key_overwrites_existing_value():
    data = {"hello": "Hi"}
    assert add_key(data, "hello", "Hello") == {"hello": "Hello"}
    assert data == {"hello": "Hi"}


@pytest.mark.parametrize("data", SAMPLES)
def test_remove_key(data):
    original = dict(data)
    for key in list(data):
        assert not has_key(remove_key(data, key), key)
    assert remove_key(data, "absent") == data
    assert remove_key(data, "absent") is not data
    assert data == original


def test_sort_locale_data_orders_by_code_point():
    data = {"zebra": "Z", "apple": "A", "Mango": "M", "apple.pie": "P"}
    result = sort_locale_data(data)
    assert list(result) == ["Mango", "apple", "apple.pie", "zebra"]
    assert result == data
    assert list(data) == ["zebra", "apple", "Mango", "apple.pie"]


@pytest.mark.parametrize("data", SAMPLES)
def test_sort_is_idempotent(data):
    once = sort_locale_data(data)
    twice = sort_locale_data(once)
    assert list(once) == list(twice)
    assert is_sorted(once)


def test_is_sorted():
    assert is_sorted({})
    assert is_sorted({"a": "1", "b": "2"})
    assert not is_sorted({"b": "2", "a": "1"})


def test_seed_locale_data():
    assert seed_locale_data("en") == {
        "welcome": "Welcome to en",
        "hello": "Hello in en",
    }
