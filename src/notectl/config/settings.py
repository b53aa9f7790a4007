"""NoteSettings — one frozen object for CLI flags, env vars and notectl.toml.

Precedence, highest first:

1. keyword arguments (the CLI flags that were actually given)
2. ``NOTECTL_*`` environment variables, ``__`` between section and key
   (``NOTECTL_NOTES__LISTING=recursive``)
3. the discovered ``notectl.toml``
4. defaults on the section models
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from notectl.config.discovery import find_config
from notectl.config.models import NotesConfig, PluginsConfig

# The TOML file for the settings object under construction.
_toml_file: ContextVar[Path | None] = ContextVar("notectl_toml_file", default=None)


class NoteSettings(BaseSettings):
    """Resolved settings for one CLI invocation.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        directory: ``--directory`` override for ``[notes] directory``.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="NOTECTL_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None
    directory: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    notes: NotesConfig = Field(default_factory=NotesConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @property
    def notes_directory(self) -> Path:
        """The note store directory, fully resolved.

        ``--directory`` wins over ``[notes] directory``. A relative
        configured directory is taken relative to the config file.
        """
        if self.directory is not None:
            return self.directory.expanduser().resolve()
        configured = self.notes.directory.expanduser()
        if not configured.is_absolute() and self.config_path is not None:
            configured = self.config_path.parent / configured
        return configured.resolve()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_file = _toml_file.get()
        if toml_file is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_file))
        return tuple(sources)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        directory: Path | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> NoteSettings:
        """Build settings for a CLI run.

        *config_path* names the TOML file explicitly; otherwise it is
        discovered from *start* (default: cwd). Only flags the user set
        should be passed in *cli_flags*, so env vars can still apply.

        Raises:
            ValueError: If the TOML file or a setting is invalid.
        """
        toml_file: Path | None
        if config_path:
            candidate = Path(config_path).expanduser()
            toml_file = candidate if candidate.is_file() else None
        else:
            toml_file = find_config(start)

        init: dict[str, Any] = {"config_path": toml_file, **cli_flags}
        if directory is not None:
            init["directory"] = directory

        token = _toml_file.set(toml_file)
        try:
            return cls(**init)
        finally:
            _toml_file.reset(token)
