"""Locating and reading ``notectl.toml``.

Lookup order: ``NOTECTL_CONFIG`` if set (even when it points nowhere),
otherwise the first ``notectl.toml`` in the start directory or one of its
parents.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from notectl.config.models import NoteConfig

CONFIG_FILENAME = "notectl.toml"
CONFIG_ENV_VAR = "NOTECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> NoteConfig:
    """Read and validate a config file; defaults when there is none.

    Without *path*, the file is looked up from *cwd*.
    """
    path = path or find_config(cwd)
    if path is None:
        return NoteConfig()
    with path.open("rb") as fh:
        return NoteConfig.model_validate(tomllib.load(fh))
