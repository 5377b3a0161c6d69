"""Check how modules under src/localeasy import each other."""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

_SRC = Path(__file__).resolve().parents[1] / "src" / "localeasy"
_SOURCES = sorted(_SRC.glob("*.py"))
# the command surface sits on top; nothing below it may reach back up
_CORE = [path for path in _SOURCES if path.stem not in {"cli", "__main__"}]


def _imports(path: Path) -> list[ast.ImportFrom | ast.Import]:
    tree = ast.parse(path.read_text(encoding="utf8"))
    return [
        node for node in ast.walk(tree) if isinstance(node, ast.ImportFrom | ast.Import)
    ]


@pytest.mark.parametrize("path", _SOURCES, ids=lambda path: path.stem)
def test_no_relative_imports(path: Path) -> None:
    for node in _imports(path):
        if isinstance(node, ast.ImportFrom) and node.level != 0:
            msg = f"Relative import found in {path} on line {node.lineno}"
            raise AssertionError(msg)


@pytest.mark.parametrize("path", _CORE, ids=lambda path: path.stem)
def test_core_does_not_import_cli(path: Path) -> None:
    for node in _imports(path):
        names = (
            [node.module or ""]
            if isinstance(node, ast.ImportFrom)
            else [alias.name for alias in node.names]
        )
        assert "localeasy.cli" not in names, f"{path.name}:{node.lineno}"
