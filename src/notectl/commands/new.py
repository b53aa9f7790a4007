"""Command: create a new note."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

import click

from notectl.commands._base import NoteCommand
from notectl.services.create import CreateService

if TYPE_CHECKING:
    from notectl.commands._context import AppContext


def _is_interactive(app: AppContext) -> bool:
    """Return True when interactive prompts should fire.

    Prompts require: no ``--json``, no ``--quiet``, and stdin is a TTY.
    """
    return not app.settings.json_output and not app.settings.quiet and sys.stdin.isatty()


def _split_categories(values: tuple[str, ...]) -> list[str]:
    """Accept both ``-c a -c b`` and ``-c a,b``."""
    return [part.strip() for value in values for part in value.split(",") if part.strip()]


@click.command(
    cls=NoteCommand,
    examples="""\
  notectl new "My First Note!"
  notectl new "Market failures" -c economics -c politics
  notectl new "Quote of the day" -c philosophy --seed "Know thyself."
  xclip -o | notectl new "Clipped" --seed-file -""",
)
@click.argument("title")
@click.option(
    "-c",
    "--category",
    "categories",
    multiple=True,
    help="Category (repeatable, or comma-separated).",
)
@click.option("--seed", default=None, help="Text to quote at the top of the body.")
@click.option(
    "--seed-file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Read the quoted text from a file ('-' for stdin).",
)
@click.pass_obj
def new(
    app: AppContext,
    title: str,
    categories: tuple[str, ...],
    seed: str | None,
    seed_file: TextIO | None,
) -> None:
    """Create a new note and print its path."""
    if seed is not None and seed_file is not None:
        raise click.UsageError("Use either --seed or --seed-file, not both.")
    if seed_file is not None:
        seed = seed_file.read()

    chosen = _split_categories(categories)
    if not chosen and _is_interactive(app):
        from notectl.services.categories import CategoryService

        known = CategoryService(app.store).list_categories().data["items"]
        hint = f" [{', '.join(known)}]" if known else ""
        raw = click.prompt(f"Categories{hint} (comma-separated, empty for none)", default="")
        chosen = _split_categories((raw,))

    result = CreateService(app.store).create_note(title, categories=chosen, seed=seed)
    app.emit(result)
