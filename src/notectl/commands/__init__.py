"""Subcommand modules for notectl.

Provides register_commands() which uses deferred imports to keep
``notectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from notectl.commands.check import check
    from notectl.commands.links import follow, link, links
    from notectl.commands.new import new
    from notectl.commands.query import categories, find, list_cmd

    cli.add_command(new)
    cli.add_command(link)
    cli.add_command(links)
    cli.add_command(follow)
    cli.add_command(list_cmd)
    cli.add_command(find)
    cli.add_command(categories)
    cli.add_command(check)
