"""Commands: read-only views of the note store."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notectl.commands._base import NoteCommand
from notectl.services.categories import CategoryService
from notectl.services.query import QueryService

if TYPE_CHECKING:
    from notectl.commands._context import AppContext


@click.command(
    "list",
    cls=NoteCommand,
    examples="""\
  notectl list
  notectl list --category economics
  notectl -q list | fzf""",
)
@click.option("--category", default=None, help="Only notes in this category.")
@click.pass_obj
def list_cmd(app: AppContext, category: str | None) -> None:
    """List notes, oldest first."""
    app.emit(QueryService(app.store).list_notes(category=category))


@click.command(
    cls=NoteCommand,
    examples="""\
  notectl find 20201008_093000
  $EDITOR $(notectl -q find 20201008_093000)""",
)
@click.argument("note_id")
@click.pass_obj
def find(app: AppContext, note_id: str) -> None:
    """Find the note with id NOTE_ID."""
    app.emit(QueryService(app.store).find_note(note_id))


@click.command(
    cls=NoteCommand,
    examples="""\
  notectl categories
  notectl --json categories""",
)
@click.pass_obj
def categories(app: AppContext) -> None:
    """List categories in use, then the configured ones."""
    app.emit(CategoryService(app.store).list_categories())
