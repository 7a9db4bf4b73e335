from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_home(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Use a fake home so tests never touch the developer's real profile."""

    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("ENVPERM_BACKEND", raising=False)
    monkeypatch.delenv("ENVPERM_DEBUG", raising=False)
