"""Root CLI group for oopnotes with global flags and command registration."""

from __future__ import annotations

import click

from oopnotes import __version__
from oopnotes.commands import register_commands
from oopnotes.commands._base import NotesGroup
from oopnotes.commands._context import AppContext
from oopnotes.config.settings import NotesSettings


@click.group(
    cls=NotesGroup,
    invoke_without_command=True,
    examples="""\
  oopnotes list --category creational
  oopnotes show singleton
  oopnotes run singleton
  oopnotes verify
  oopnotes --json quiz --count 3""",
)
@click.version_option(version=__version__, prog_name="oopnotes")
@click.option("--json", "json_output", is_flag=True, help="Print the result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Ids and bare output only.")
@click.option("-v", "--verbose", is_flag=True, help="More detail, plus debug logging.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", default=None, help="Use this oopnotes.toml.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Study notes on OOP principles, SOLID and creational patterns."""
    ctx.obj = AppContext(
        NotesSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
