"""Commands: insert, list and follow links between notes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notectl.commands._base import NoteCommand
from notectl.services.links import LinkService

if TYPE_CHECKING:
    from notectl.commands._context import AppContext


@click.command(
    cls=NoteCommand,
    examples="""\
  notectl link 20201008_093000--economics--my-note.txt 20201009_101500
  notectl link ~/Documents/notes/20201008_093000--economics--my-note.txt 20201009_101500 --at 120""",
)
@click.argument("source")
@click.argument("target_id")
@click.option(
    "--at",
    "position",
    type=click.IntRange(min=0),
    default=None,
    help="Character offset for the inline marker (default: end of body).",
)
@click.pass_obj
def link(app: AppContext, source: str, target_id: str, position: int | None) -> None:
    """Link SOURCE to the note with id TARGET_ID, in both directions."""
    app.emit(LinkService(app.store).insert_link(source, target_id, position=position))


@click.command(
    cls=NoteCommand,
    examples="""\
  notectl links 20201008_093000--economics--my-note.txt
  notectl links 20201008_093000--economics--my-note.txt --direction outgoing
  notectl -q links 20201008_093000--economics--my-note.txt --direction all""",
)
@click.argument("source")
@click.option(
    "--direction",
    type=click.Choice(["incoming", "outgoing", "all"]),
    default="incoming",
    help="Which reference lines to read.",
)
@click.pass_obj
def links(app: AppContext, source: str, direction: str) -> None:
    """List the notes SOURCE references."""
    app.emit(LinkService(app.store).list_links(source, direction=direction))


@click.command(
    cls=NoteCommand,
    examples="""\
  notectl follow 20201008_093000--economics--my-note.txt 20201009_101500--politics--other.txt
  $EDITOR $(notectl -q follow SOURCE FILENAME)""",
)
@click.argument("source")
@click.argument("filename")
@click.pass_obj
def follow(app: AppContext, source: str, filename: str) -> None:
    """Print the path of FILENAME, a note referenced from SOURCE."""
    app.emit(LinkService(app.store).follow_link(source, filename))
