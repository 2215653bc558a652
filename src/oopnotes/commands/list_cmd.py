"""Command: list topics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from oopnotes.commands._base import NotesCommand
from oopnotes.domain.categories import CATEGORY_ORDER

if TYPE_CHECKING:
    from oopnotes.commands._context import AppContext


@click.command(
    "list",
    cls=NotesCommand,
    examples="""\
  oopnotes list
  oopnotes list --category solid
  oopnotes list --tag factory
  oopnotes -q list""",
)
@click.option(
    "--category",
    type=click.Choice([c.value for c in CATEGORY_ORDER], case_sensitive=False),
    default=None,
    help="Only topics in this category.",
)
@click.option("--tag", default=None, help="Only topics carrying this tag.")
@click.pass_obj
def list_cmd(app: AppContext, category: str | None, tag: str | None) -> None:
    """List topics, grouped by category."""
    from oopnotes.services.catalog import CatalogService

    app.emit(CatalogService(app.library).list_topics(category=category, tag=tag))
