"""Jinja2 template loading with per-project override support."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

OVERRIDE_DIR = Path(".oopnotes") / "templates"


def build_template_environment(group: str, *, project_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    Overrides are read from ``<project>/.oopnotes/templates/<group>/`` and
    then ``<project>/.oopnotes/templates/``.
    """
    loaders: list[BaseLoader] = []
    if project_root is not None:
        template_root = project_root / OVERRIDE_DIR
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("oopnotes", f"templates/{group}"))
    return Environment(
        loader=ChoiceLoader(loaders),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
