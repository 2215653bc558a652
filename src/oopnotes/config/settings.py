"""NotesSettings: CLI flags, environment and oopnotes.toml merged into one object.

Highest priority first:

1. keyword arguments (the global CLI flags)
2. ``OOPNOTES_*`` environment variables, ``__`` separating nested keys
   (``OOPNOTES_QUIZ__DEFAULT_COUNT=3``)
3. the discovered or explicit ``oopnotes.toml``
4. defaults in :mod:`oopnotes.config.models`
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from oopnotes.config.discovery import find_config
from oopnotes.config.models import (
    ExportConfig,
    LibraryConfig,
    PluginsConfig,
    QuizConfig,
    VerifyConfig,
)


def _read_toml(path: Path | None) -> dict[str, Any]:
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by an already-parsed TOML document."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# pydantic-settings builds sources inside __init__, so the parsed TOML
# for the settings under construction travels through a thread-local.
_pending = threading.local()


def _locate_config(config_path: str | None, project_root: Path | None) -> Path | None:
    if not config_path:
        return find_config(project_root)
    path = Path(config_path)
    if not path.is_file():
        raise click.ClickException(f"Config file not found: {config_path}")
    return path


class NotesSettings(BaseSettings):
    """Frozen settings for one CLI invocation.

    Attributes:
        project_root: Base for relative paths in the config; the directory
            holding ``oopnotes.toml``, or CWD without one.
        config_path: The TOML file that was read, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "OOPNOTES_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    library: LibraryConfig = Field(default_factory=LibraryConfig)
    verify: VerifyConfig = Field(default_factory=VerifyConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    quiz: QuizConfig = Field(default_factory=QuizConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_data = getattr(_pending, "toml_data", None) or {}
        return (init_settings, env_settings, TomlSettingsSource(settings_cls, toml_data))

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **flags: Any,
    ) -> NotesSettings:
        """Build settings from the global CLI flags.

        An explicit *config_path* must exist. Without one, ``oopnotes.toml``
        is searched for upward from *project_root* (or CWD).
        """
        toml_path = _locate_config(config_path, project_root)
        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        _pending.toml_data = _read_toml(toml_path)
        try:
            return cls(project_root=project_root, config_path=toml_path, **flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            raise click.ClickException(f"Invalid configuration in {source}:\n{exc}") from exc
        finally:
            _pending.toml_data = None

    def resolve_path(self, value: str | Path) -> Path:
        """*value* as an absolute path, relative ones taken from the project root."""
        path = Path(value).expanduser()
        return path if path.is_absolute() else self.project_root / path
