"""Tests for NotesSettings source priority."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from oopnotes.config.settings import NotesSettings


def _write_toml(directory: Path, text: str) -> Path:
    path = directory / "oopnotes.toml"
    path.write_text(text, encoding="utf-8")
    return path


class TestDefaults:
    def test_no_config_file(self, tmp_path: Path) -> None:
        settings = NotesSettings.from_cli(project_root=tmp_path)
        assert settings.config_path is None
        assert settings.library.include_builtin is True
        assert settings.quiz.default_count == 5
        assert settings.export.template == "study_guide.md.j2"
        assert settings.json_output is False

    def test_settings_are_frozen(self, tmp_path: Path) -> None:
        settings = NotesSettings.from_cli(project_root=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_walk_up_discovery(self, tmp_path: Path) -> None:
        _write_toml(tmp_path, "[quiz]\ndefault_count = 9\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = NotesSettings.from_cli(project_root=nested)
        assert settings.quiz.default_count == 9
        assert settings.config_path == tmp_path / "oopnotes.toml"

    def test_explicit_config_sets_project_root(self, tmp_path: Path) -> None:
        cfg = _write_toml(tmp_path, "[verify]\nfail_on_missing_output = true\n")
        settings = NotesSettings.from_cli(config_path=str(cfg))
        assert settings.verify.fail_on_missing_output is True
        assert settings.project_root == tmp_path

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="not found"):
            NotesSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        _write_toml(tmp_path, "[quiz\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            NotesSettings.from_cli(project_root=tmp_path)

    def test_config_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        other = tmp_path / "elsewhere"
        other.mkdir()
        cfg = _write_toml(other, "[export]\ninclude_glossary = false\n")
        monkeypatch.setenv("OOPNOTES_CONFIG", str(cfg))
        settings = NotesSettings.from_cli(project_root=tmp_path)
        assert settings.export.include_glossary is False


class TestPriority:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_toml(tmp_path, "[quiz]\ndefault_count = 7\n")
        monkeypatch.setenv("OOPNOTES_QUIZ__DEFAULT_COUNT", "3")
        settings = NotesSettings.from_cli(project_root=tmp_path)
        assert settings.quiz.default_count == 3

    def test_cli_flags_beat_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OOPNOTES_VERBOSE", "false")
        settings = NotesSettings.from_cli(project_root=tmp_path, verbose=True)
        assert settings.verbose is True


def test_resolve_path(tmp_path: Path) -> None:
    settings = NotesSettings.from_cli(project_root=tmp_path)
    assert settings.resolve_path("notes") == tmp_path / "notes"
    assert settings.resolve_path(tmp_path / "abs") == tmp_path / "abs"


def test_invalid_values_are_click_errors(tmp_path: Path) -> None:
    _write_toml(tmp_path, "[quiz]\ndefault_count = 0\n")
    with pytest.raises(click.ClickException, match="Invalid configuration"):
        NotesSettings.from_cli(project_root=tmp_path)
