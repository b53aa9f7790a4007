"""Shared pytest fixtures and test helpers for notectl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from notectl.infrastructure.store import NoteStore


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's NOTECTL_* environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("NOTECTL_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_root_handlers() -> Iterator[None]:
    """CLI invocations reconfigure logging onto streams that close afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    root.handlers = handlers


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """Note directory inside the temp dir (not created yet)."""
    return tmp_path / "notes"


@pytest.fixture
def store(notes_dir: Path) -> NoteStore:
    """Flat note store on a temp directory."""
    return NoteStore(notes_dir)


@pytest.fixture
def _isolated_store(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir holding a notectl.toml that points at ./notes.

    Use via ``@pytest.mark.usefixtures("_isolated_store")`` on command test
    classes.
    """
    (tmp_path / "notectl.toml").write_text(
        '[notes]\ndirectory = "notes"\nknown_categories = ["philosophy"]\n'
        "[plugins]\nenabled = false\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def at(day: int, hour: int = 9, minute: int = 0, second: int = 0) -> datetime:
    """A fixed October 2020 timestamp."""
    return datetime(2020, 10, day, hour, minute, second)


def create_note(
    store: NoteStore,
    title: str,
    categories: Sequence[str] = (),
    **kwargs: Any,
) -> dict[str, Any]:
    """Create a note via CreateService, asserting success."""
    from notectl.services.create import CreateService

    result = CreateService(store).create_note(title, categories=list(categories), **kwargs)
    assert result.ok, result.error
    return result.data


def write_raw(store: NoteStore, filename: str, text: str = "") -> Path:
    """Drop a file into the store without going through the service layer."""
    path = store.root / filename
    path.write_text(text, encoding="utf-8")
    return path
