"""Topic model: frontmatter schema, markdown body, documented output.

A note file is YAML frontmatter followed by a markdown body::

    ---
    id: encapsulation
    title: Encapsulation
    category: oop
    lesson: oopnotes.lessons.oop.encapsulation:demo
    ---
    # Encapsulation
    ...
    ```output
    Balance after deposit: 150
    ```

The first fenced block tagged ``output`` is what the lesson is expected
to print. Pure parsing lives here; reading files is the library's job.
"""

from __future__ import annotations

import re
from io import StringIO
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from oopnotes.domain.categories import Category

_FRONTMATTER_DELIMITER = "---"
_ID_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
_FENCE_PATTERN = re.compile(r"^(`{3,}|~{3,})\s*([\w+-]*)")

OUTPUT_FENCE_INFO = "output"


class FrontmatterError(ValueError):
    """Raised when a note's YAML frontmatter can't be parsed."""


def _new_yaml() -> YAML:
    """Fresh safe-mode parser per call; YAML instances carry state."""
    return YAML(typ="safe", pure=True)


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Split markdown *content* into ``(frontmatter, body)``.

    Content that doesn't open with a ``---`` line, or never closes the
    block, is returned unchanged as ``({}, content)``.
    """
    normalized = content.replace("\r\n", "\n")
    lines = normalized.split("\n")
    if not lines or lines[0].strip() != _FRONTMATTER_DELIMITER:
        return {}, content

    end_idx: int | None = None
    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == _FRONTMATTER_DELIMITER:
            end_idx = i
            break
    if end_idx is None:
        return {}, content

    yaml_block = "\n".join(lines[1:end_idx])
    body = "\n".join(lines[end_idx + 1 :])
    if body.startswith("\n"):
        body = body[1:]

    try:
        data = _new_yaml().load(StringIO(yaml_block))
    except YAMLError as exc:
        raise FrontmatterError(f"Invalid YAML frontmatter: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontmatterError("Frontmatter must be a mapping")
    return dict(data), body


def normalize_output(text: str) -> list[str]:
    """Lines with trailing whitespace and trailing blank lines removed."""
    lines = [line.rstrip() for line in text.replace("\r\n", "\n").split("\n")]
    while lines and not lines[-1]:
        lines.pop()
    return lines


def extract_expected_output(body: str) -> list[str] | None:
    """Return the normalized lines of the first ```output block, or None."""
    fence: str | None = None
    collected: list[str] = []
    for line in body.replace("\r\n", "\n").split("\n"):
        if fence is None:
            match = _FENCE_PATTERN.match(line.strip())
            if match and match.group(2) == OUTPUT_FENCE_INFO:
                fence = match.group(1)
            continue
        if line.strip().startswith(fence[0] * len(fence)) and not line.strip().strip(fence[0]):
            return normalize_output("\n".join(collected))
        collected.append(line)
    # unterminated block
    return None


class TopicFrontmatter(BaseModel):
    """Schema for a note's YAML frontmatter."""

    model_config = {"frozen": True, "extra": "forbid"}

    id: str
    title: str
    category: Category
    order: int = 0
    tags: list[str] = Field(default_factory=list)
    summary: str = ""
    lesson: str | None = None
    questions: list[str] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str) -> str:
        if not _ID_PATTERN.match(value):
            raise ValueError(f"id must be a lowercase kebab-case slug, got {value!r}")
        return value

    @field_validator("category", mode="before")
    @classmethod
    def _lower_category(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("lesson")
    @classmethod
    def _check_lesson(cls, value: str | None) -> str | None:
        if value is None:
            return None
        module, sep, func = value.partition(":")
        if not sep or not module.strip() or not func.strip():
            raise ValueError(f"lesson must look like 'module:function', got {value!r}")
        return value.strip()


class Topic(BaseModel):
    """A loaded note: frontmatter, body and where it came from."""

    model_config = {"frozen": True}

    meta: TopicFrontmatter
    body: str
    path: Path
    source: str = "builtin"

    @property
    def id(self) -> str:
        return self.meta.id

    @property
    def title(self) -> str:
        return self.meta.title

    @property
    def category(self) -> Category:
        return self.meta.category

    @property
    def has_lesson(self) -> bool:
        return self.meta.lesson is not None

    @property
    def expected_output(self) -> list[str] | None:
        return extract_expected_output(self.body)

    def sort_key(self) -> tuple[int, int, str]:
        return (self.category.rank, self.meta.order, self.id)

    def summary_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category.value,
            "tags": list(self.meta.tags),
            "has_lesson": self.has_lesson,
            "source": self.source,
        }

    @classmethod
    def from_text(cls, text: str, *, path: Path, source: str = "builtin") -> Topic:
        """Parse a note. Raises FrontmatterError or pydantic.ValidationError."""
        frontmatter, body = parse_frontmatter(text)
        if not frontmatter:
            raise FrontmatterError("Missing YAML frontmatter")
        meta = TopicFrontmatter.model_validate(frontmatter)
        return cls(meta=meta, body=body, path=path, source=source)
