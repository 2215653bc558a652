"""Command: glossary lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from oopnotes.commands._base import NotesCommand

if TYPE_CHECKING:
    from oopnotes.commands._context import AppContext


@click.command(
    cls=NotesCommand,
    examples="""\
  oopnotes glossary
  oopnotes glossary polymorphism
  oopnotes glossary open-closed""",
)
@click.argument("term", required=False)
@click.pass_obj
def glossary(app: AppContext, term: str | None) -> None:
    """Define TERM, or list every glossary entry."""
    from oopnotes.services.glossary import GlossaryService

    app.emit(GlossaryService().glossary(term))
