"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, notectl.toml only contains overrides.
A fresh setup needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Self

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_DIRECTORY = Path("~/Documents/notes")


class NotesConfig(BaseModel):
    """[notes] section."""

    model_config = {"frozen": True}

    directory: Path = DEFAULT_DIRECTORY
    known_categories: list[str] = Field(default_factory=list)
    listing: Literal["flat", "recursive"] = "flat"
    category_subdirs: bool = False
    seed_separator: str = "* * *"

    @field_validator("known_categories", mode="before")
    @classmethod
    def _split_string(cls, value: object) -> object:
        # Accept the comma-separated form, e.g. known_categories = "economics, politics".
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @model_validator(mode="after")
    def _subdirs_need_recursive_listing(self) -> Self:
        if self.category_subdirs and self.listing != "recursive":
            msg = "category_subdirs requires listing = 'recursive'"
            raise ValueError(msg)
        return self


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True


class NoteConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    notes: NotesConfig = Field(default_factory=NotesConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
