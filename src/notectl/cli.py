"""Root CLI group for notectl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from notectl import __version__
from notectl.commands import register_commands
from notectl.commands._context import AppContext
from notectl.config.settings import NoteSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="notectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (filenames and paths only).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-d",
    "--directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Note directory (overrides [notes] directory).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    directory: Path | None,
) -> None:
    """notectl — plain-text notes with categories and backlinks."""
    flags = {
        key: value
        for key, value in {
            "json_output": json_output,
            "quiet": quiet,
            "verbose": verbose,
            "log_json": log_json,
        }.items()
        if value
    }
    try:
        settings = NoteSettings.from_cli(config_path=config_path, directory=directory, **flags)
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main() -> None:
    cli()
