"""Command: show one topic's note and lesson code."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from oopnotes.commands._base import NotesCommand

if TYPE_CHECKING:
    from oopnotes.commands._context import AppContext


@click.command(
    cls=NotesCommand,
    examples="""\
  oopnotes show encapsulation
  oopnotes show builder --no-code
  oopnotes --json show singleton""",
)
@click.argument("topic_id")
@click.option("--no-code", is_flag=True, help="Hide the lesson source code.")
@click.pass_obj
def show(app: AppContext, topic_id: str, no_code: bool) -> None:
    """Show the note for TOPIC_ID."""
    from oopnotes.services.catalog import CatalogService

    app.emit(CatalogService(app.library).show_topic(topic_id, include_code=not no_code))
