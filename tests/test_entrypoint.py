import runpy

import pytest

from localeasy import cli


def test_package_run_calls_cli_main(monkeypatch):
    called = []

    def fake_main():
        called.append(True)
        return 0

    monkeypatch.setattr(cli, "main", fake_main)
    with pytest.raises(SystemExit) as info:
        runpy.run_module("localeasy", run_name="__main__")
    assert info.value.code == 0
    assert called
