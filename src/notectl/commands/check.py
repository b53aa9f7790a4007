"""Command: link consistency checking and repair."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notectl.commands._base import NoteCommand

if TYPE_CHECKING:
    from notectl.commands._context import AppContext


@click.command(
    cls=NoteCommand,
    examples="""\
  notectl check
  notectl check --errors-only
  notectl check --fix""",
)
@click.option("--errors-only", is_flag=True, help="Hide warnings.")
@click.option("--fix", is_flag=True, help="Add missing counterpart links and drop repeats.")
@click.pass_obj
def check(app: AppContext, errors_only: bool, fix: bool) -> None:
    """Check that every link is recorded in both notes."""
    from notectl.services.check import CheckService

    svc = CheckService(app.store)
    if fix:
        app.emit(svc.fix())
    else:
        app.emit(svc.check(min_severity="error" if errors_only else "warning"))
