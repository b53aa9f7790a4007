"""Tests for configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from notectl.config.models import NoteConfig, NotesConfig, PluginsConfig


class TestNotesConfig:
    def test_defaults(self) -> None:
        cfg = NotesConfig()
        assert cfg.directory == Path("~/Documents/notes")
        assert cfg.known_categories == []
        assert cfg.listing == "flat"
        assert cfg.category_subdirs is False
        assert cfg.seed_separator == "* * *"

    def test_comma_separated_categories(self) -> None:
        cfg = NotesConfig(known_categories="economics, politics,")
        assert cfg.known_categories == ["economics", "politics"]

    def test_unknown_listing_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NotesConfig(listing="index")

    def test_subdirs_require_recursive(self) -> None:
        with pytest.raises(ValidationError, match="category_subdirs"):
            NotesConfig(category_subdirs=True)
        assert NotesConfig(category_subdirs=True, listing="recursive").category_subdirs

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            NotesConfig().listing = "recursive"  # type: ignore[misc]


class TestNoteConfig:
    def test_sections(self) -> None:
        cfg = NoteConfig.model_validate({"notes": {"listing": "recursive"}})
        assert cfg.notes.listing == "recursive"
        assert cfg.plugins == PluginsConfig()
