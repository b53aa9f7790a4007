"""AppContext — what every command receives via ``@click.pass_obj``.

Holds the resolved settings, builds the NoteStore on demand and prints
ServiceResults with the right stream and exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notectl.config.logging import configure_logging
from notectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from notectl.config.settings import NoteSettings
    from notectl.infrastructure.store import NoteStore
    from notectl.services.result import ServiceResult


class AppContext:
    """Per-invocation state shared by the root group and its commands.

    The store is built on first access, so ``--help``, ``--version`` and
    ``--examples`` never create the note directory or load plugins.
    """

    def __init__(self, settings: NoteSettings) -> None:
        self.settings = settings
        self._store: NoteStore | None = None
        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            directory=settings.notes_directory,
        )

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    @property
    def store(self) -> NoteStore:
        if self._store is None:
            from notectl.infrastructure.store import NoteStore

            store = NoteStore.from_settings(self.settings)
            if self.settings.plugins.enabled:
                store.init_plugins()
            self._store = store
        return self._store

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit with status 1 if it is a failure.

        Successful output goes to stdout. Failures, and the warnings of a
        successful human-readable run, go to stderr. In ``--json`` mode the
        warnings are part of the payload instead.
        """
        output_settings = self.output_settings
        text = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not output_settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
