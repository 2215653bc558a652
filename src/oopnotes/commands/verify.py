"""Command: verify documented lesson output."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from oopnotes.commands._base import NotesCommand

if TYPE_CHECKING:
    from oopnotes.commands._context import AppContext


@click.command(
    cls=NotesCommand,
    examples="""\
  oopnotes verify
  oopnotes verify singleton builder
  oopnotes verify --strict
  oopnotes --json verify""",
)
@click.argument("topic_ids", nargs=-1)
@click.option(
    "--strict",
    is_flag=True,
    help="Also fail lessons whose note documents no output.",
)
@click.pass_obj
def verify(app: AppContext, topic_ids: tuple[str, ...], strict: bool) -> None:
    """Check that lessons print what their notes say (all topics by default)."""
    from oopnotes.services.verify import VerifyService

    fail_on_missing = strict or app.settings.verify.fail_on_missing_output
    app.emit(
        VerifyService(app.library).verify(
            list(topic_ids) or None,
            fail_on_missing_output=fail_on_missing,
        )
    )
