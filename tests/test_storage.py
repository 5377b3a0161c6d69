from __future__ import annotations

import pytest

from localeasy import storage


def test_write_then_read_file(tmp_path):
    path = tmp_path / "note.txt"
    storage.write_file(path, "Привет")
    assert storage.read_file(path) == "Привет"
    storage.write_file(path, "new")
    assert storage.read_file(path) == "new"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        storage.read_file(tmp_path / "missing.json")


def test_list_and_create_dir(tmp_path):
    target = tmp_path / "a" / "b"
    storage.create_dir(target)
    storage.create_dir(target)
    (target / "en.json").write_text("{}")
    (target / "notes.md").write_text("")
    assert sorted(storage.list_dir(target)) == ["en.json", "notes.md"]


def test_list_missing_dir_raises(tmp_path):
    with pytest.raises(OSError):
        storage.list_dir(tmp_path / "missing")


def test_delete_file_and_dir(tmp_path):
    directory = tmp_path / "d"
    directory.mkdir()
    file_path = directory / "x.json"
    file_path.write_text("{}")
    storage.delete_file(file_path)
    assert not file_path.exists()
    (directory / "y.json").write_text("{}")
    storage.delete_dir(directory)
    assert not directory.exists()


def test_type_probes(tmp_path):
    file_path = tmp_path / "en.json"
    file_path.write_text("{}")
    assert storage.is_file(file_path)
    assert not storage.is_directory(file_path)
    assert storage.is_directory(tmp_path)
    assert not storage.is_file(tmp_path)
    assert not storage.is_file(tmp_path / "missing")
    assert not storage.is_directory(tmp_path / "missing")


def test_null_bytes_are_rejected(tmp_path):
    bad = f"{tmp_path}/en\x00.json"
    assert not storage.is_file(bad)
    assert not storage.is_directory(bad)
    with pytest.raises(OSError, match="null bytes"):
        storage.read_file(bad)
