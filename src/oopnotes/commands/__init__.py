"""Subcommand modules for oopnotes.

register_commands() imports lazily so ``oopnotes --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every subcommand on the root group."""
    from oopnotes.commands.export import export
    from oopnotes.commands.glossary import glossary
    from oopnotes.commands.list_cmd import list_cmd
    from oopnotes.commands.quiz import quiz
    from oopnotes.commands.run import run
    from oopnotes.commands.show import show
    from oopnotes.commands.verify import verify

    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(run)
    cli.add_command(verify)
    cli.add_command(export)
    cli.add_command(quiz)
    cli.add_command(glossary)
