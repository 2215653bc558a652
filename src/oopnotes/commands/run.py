"""Command: run a topic's lesson."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from oopnotes.commands._base import NotesCommand

if TYPE_CHECKING:
    from oopnotes.commands._context import AppContext


@click.command(
    cls=NotesCommand,
    examples="""\
  oopnotes run encapsulation
  oopnotes -q run liskov-substitution""",
)
@click.argument("topic_id")
@click.pass_obj
def run(app: AppContext, topic_id: str) -> None:
    """Run the lesson for TOPIC_ID and compare with its documented output."""
    from oopnotes.services.run import RunService

    app.emit(RunService(app.library).run(topic_id))
