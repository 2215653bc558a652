"""Shared pytest fixtures and test helpers for oopnotes tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from oopnotes.config.logging import HANDLER_NAME
from oopnotes.config.settings import NotesSettings
from oopnotes.infrastructure.library import Library


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's OOPNOTES_* environment out of the tests."""
    monkeypatch.delenv("OOPNOTES_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Drop the stderr handler configure_logging installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("oopnotes").setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty project directory; notes written by tests go under ``notes/``."""
    (tmp_path / "notes").mkdir()
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> NotesSettings:
    return NotesSettings.from_cli(project_root=project_root)


@pytest.fixture
def library(settings: NotesSettings) -> Library:
    """The packaged notes only."""
    return Library(settings)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from an empty project directory."""
    monkeypatch.chdir(project_root)


NoteWriter = Callable[..., Path]


@pytest.fixture
def write_note() -> NoteWriter:
    """Write a markdown note into a directory.

    Usage::

        write_note(dir, "my-topic", lesson="lesson.py:demo", output=["hi"])
    """

    def _write(
        directory: Path,
        topic_id: str,
        *,
        title: str | None = None,
        category: str = "oop",
        order: int = 10,
        tags: list[str] | None = None,
        lesson: str | None = None,
        output: list[str] | None = None,
        questions: list[str] | None = None,
        body: str = "Some prose.",
        filename: str | None = None,
    ) -> Path:
        lines = [
            "---",
            f"id: {topic_id}",
            f"title: {title or topic_id.replace('-', ' ').title()}",
            f"category: {category}",
            f"order: {order}",
            f"tags: [{', '.join(tags or [])}]",
        ]
        if lesson:
            lines.append(f"lesson: {lesson}")
        if questions:
            lines.append("questions:")
            lines.extend(f"  - {q}" for q in questions)
        lines += ["---", f"# {title or topic_id}", "", body, ""]
        if output is not None:
            lines += ["```output", *output, "```", ""]
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / (filename or f"{topic_id}.md")
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def local_settings(project_root: Path) -> NotesSettings:
    """Settings that read only ``<project>/notes``, not the packaged notes."""
    toml = project_root / "oopnotes.toml"
    toml.write_text('[library]\ninclude_builtin = false\nextra_dirs = ["notes"]\n')
    return NotesSettings.from_cli(project_root=project_root)


@pytest.fixture
def local_library(local_settings: NotesSettings) -> Library:
    return Library(local_settings)
