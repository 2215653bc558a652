"""Click classes that add an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints ready-to-paste invocations
and exits before any argument is validated.
"""

from __future__ import annotations

from typing import Any

import click


def examples_option(examples: str) -> click.Option:
    """Build an eager ``--examples`` flag that prints *examples*."""

    def _print(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=_print,
        help="Show usage examples and exit.",
    )


class NotesCommand(click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(examples_option(examples))


class NotesGroup(click.Group):
    """Root group; subcommands default to :class:`NotesCommand`."""

    command_class = NotesCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(examples_option(examples))
