"""Command: export a combined markdown study guide."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from oopnotes.commands._base import NotesCommand
from oopnotes.domain.categories import CATEGORY_ORDER

if TYPE_CHECKING:
    from oopnotes.commands._context import AppContext


@click.command(
    cls=NotesCommand,
    examples="""\
  oopnotes export > study-guide.md
  oopnotes export --output build/study-guide.md
  oopnotes export --category creational --no-glossary""",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of stdout.",
)
@click.option(
    "--category",
    type=click.Choice([c.value for c in CATEGORY_ORDER], case_sensitive=False),
    default=None,
    help="Only export one category.",
)
@click.option(
    "--glossary/--no-glossary",
    "include_glossary",
    default=None,
    help="Append the glossary (default from config).",
)
@click.pass_obj
def export(
    app: AppContext,
    output: Path | None,
    category: str | None,
    include_glossary: bool | None,
) -> None:
    """Render all notes into one markdown study guide."""
    from oopnotes.services.export import ExportService

    cfg = app.settings.export
    app.emit(
        ExportService(app.library).export_guide(
            app.settings.resolve_path(output) if output else None,
            category=category,
            template=cfg.template,
            include_glossary=cfg.include_glossary if include_glossary is None else include_glossary,
            include_questions=cfg.include_questions,
        )
    )
