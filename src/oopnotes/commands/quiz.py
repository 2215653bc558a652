"""Command: random interview questions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from oopnotes.commands._base import NotesCommand
from oopnotes.domain.categories import CATEGORY_ORDER

if TYPE_CHECKING:
    from oopnotes.commands._context import AppContext


@click.command(
    cls=NotesCommand,
    examples="""\
  oopnotes quiz
  oopnotes quiz --category solid --count 3
  oopnotes quiz --seed 7""",
)
@click.option(
    "--category",
    type=click.Choice([c.value for c in CATEGORY_ORDER], case_sensitive=False),
    default=None,
    help="Only ask about one category.",
)
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Number of questions (default from config).",
)
@click.option("--seed", type=int, default=None, help="Seed for a repeatable draw.")
@click.pass_obj
def quiz(app: AppContext, category: str | None, count: int | None, seed: int | None) -> None:
    """Draw random interview questions from the notes."""
    from oopnotes.services.quiz import QuizService

    app.emit(
        QuizService(app.library).quiz(
            category=category,
            count=count or app.settings.quiz.default_count,
            seed=seed,
        )
    )
