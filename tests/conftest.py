# tests/conftest.py
from __future__ import annotations

import pytest

from typesplit.runtime import reset as _rt_reset


@pytest.fixture(autouse=True)
def _isolated_workspace(tmp_path, monkeypatch):
    """Point the workspace at a temp folder and start every test with a fresh runtime."""
    home = tmp_path / "home"
    monkeypatch.setenv("TYPESPLIT_HOME", str(home))
    rt = _rt_reset()
    rt.color = False
    yield home
    _rt_reset()


@pytest.fixture
def write_input(tmp_path):
    """Create an input file from a list of lines (joined with '\\n', trailing newline)."""
    def _write(name: str, lines: list[str], newline: str = "\n") -> str:
        p = tmp_path / name
        p.write_bytes((newline.join(lines) + newline).encode("utf-8") if lines else b"")
        return str(p)
    return _write
