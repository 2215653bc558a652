"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, oopnotes.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LibraryConfig(BaseModel):
    """[library] section."""

    model_config = {"frozen": True}

    include_builtin: bool = True
    extra_dirs: list[str] = Field(default_factory=list)


class VerifyConfig(BaseModel):
    """[verify] section."""

    model_config = {"frozen": True}

    fail_on_missing_output: bool = False


class ExportConfig(BaseModel):
    """[export] section."""

    model_config = {"frozen": True}

    template: str = "study_guide.md.j2"
    include_glossary: bool = True
    include_questions: bool = True


class QuizConfig(BaseModel):
    """[quiz] section."""

    model_config = {"frozen": True}

    default_count: int = Field(default=5, ge=1)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".oopnotes/plugins"

