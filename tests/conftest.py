import json
from pathlib import Path

import pytest

from localeasy import config


def _write_locale(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def user_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch):
    path = tmp_path_factory.mktemp("config") / "localeasy_config.json"
    monkeypatch.setattr(config, "CONFIG_PATH", path)
    return path


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "locales"
    directory.mkdir()
    _write_locale(directory / "en.json", {})
    _write_locale(directory / "ru.json", {})
    return directory


@pytest.fixture
def en_file(tmp_path: Path) -> Path:
    return _write_locale(tmp_path / "en.json", {"hello": "Hi"})
