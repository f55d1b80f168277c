"""Shared fixtures for crane tests."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

import crane.display as display_mod


@pytest.fixture()
def home(tmp_path):
    """An empty directory standing in for the user's home."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture()
def write_config(home):
    """Factory fixture: writes text to <home>/.crane/config.toml and returns the path."""

    def _write(text: str) -> Path:
        path = home / ".crane" / "config.toml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def output(monkeypatch):
    """Swap the shared console for one writing to a StringIO buffer; returns the buffer."""
    buf = StringIO()
    monkeypatch.setattr(display_mod, "console", Console(file=buf, width=120))
    return buf
