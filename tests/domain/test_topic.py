"""Tests for frontmatter parsing and the Topic model."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from oopnotes.domain.categories import Category
from oopnotes.domain.topic import (
    FrontmatterError,
    Topic,
    TopicFrontmatter,
    extract_expected_output,
    normalize_output,
    parse_frontmatter,
)

NOTE = """\
---
id: encapsulation
title: Encapsulation
category: OOP
order: 1
tags: [oop, state]
lesson: oopnotes.lessons.oop.encapsulation:demo
---
# Encapsulation

Prose.

```python
print("not the output")
```

```output
line one   
line two

```
"""


class TestParseFrontmatter:
    def test_splits_frontmatter_and_body(self) -> None:
        fm, body = parse_frontmatter("---\nid: x\n---\n# Title\n")
        assert fm == {"id": "x"}
        assert body == "# Title\n"

    def test_no_frontmatter(self) -> None:
        assert parse_frontmatter("# Just markdown") == ({}, "# Just markdown")

    def test_unclosed_frontmatter_left_alone(self) -> None:
        text = "---\nid: x\n# never closed"
        assert parse_frontmatter(text) == ({}, text)

    def test_empty_block(self) -> None:
        assert parse_frontmatter("---\n---\nbody") == ({}, "body")

    def test_crlf(self) -> None:
        fm, body = parse_frontmatter("---\r\nid: x\r\n---\r\nbody")
        assert fm == {"id": "x"}
        assert body == "body"

    def test_invalid_yaml(self) -> None:
        with pytest.raises(FrontmatterError, match="Invalid YAML"):
            parse_frontmatter("---\nid: [unclosed\n---\n")

    def test_non_mapping(self) -> None:
        with pytest.raises(FrontmatterError, match="mapping"):
            parse_frontmatter("---\n- a\n- b\n---\n")


class TestOutputBlocks:
    def test_normalize_output(self) -> None:
        assert normalize_output("a  \nb\n\n\n") == ["a", "b"]
        assert normalize_output("") == []

    def test_first_output_block_only(self) -> None:
        body = "```output\nfirst\n```\n\n```output\nsecond\n```\n"
        assert extract_expected_output(body) == ["first"]

    def test_other_fences_ignored(self) -> None:
        body = "```python\nprint(1)\n```\n"
        assert extract_expected_output(body) is None

    def test_unterminated_block(self) -> None:
        assert extract_expected_output("```output\nhanging\n") is None

    def test_longer_fence(self) -> None:
        body = "````output\n```\nstill inside\n````\n"
        assert extract_expected_output(body) == ["```", "still inside"]

    def test_empty_block(self) -> None:
        assert extract_expected_output("```output\n```\n") == []


class TestTopicFrontmatter:
    def test_defaults(self) -> None:
        meta = TopicFrontmatter(id="x", title="X", category="solid")
        assert meta.category is Category.SOLID
        assert meta.order == 0
        assert meta.lesson is None
        assert meta.questions == []

    @pytest.mark.parametrize("bad_id", ["Has Caps", "trailing-", "snake_case", ""])
    def test_id_must_be_kebab_case(self, bad_id: str) -> None:
        with pytest.raises(ValidationError):
            TopicFrontmatter(id=bad_id, title="X", category="oop")

    @pytest.mark.parametrize("bad_lesson", ["no_colon", ":demo", "module:"])
    def test_lesson_target_format(self, bad_lesson: str) -> None:
        with pytest.raises(ValidationError):
            TopicFrontmatter(id="x", title="X", category="oop", lesson=bad_lesson)

    def test_unknown_category(self) -> None:
        with pytest.raises(ValidationError):
            TopicFrontmatter(id="x", title="X", category="behavioral")

    def test_unknown_keys_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TopicFrontmatter(id="x", title="X", category="oop", author="me")


class TestTopic:
    def test_from_text(self, tmp_path: Path) -> None:
        topic = Topic.from_text(NOTE, path=tmp_path / "encapsulation.md", source="local")
        assert topic.id == "encapsulation"
        assert topic.category is Category.OOP
        assert topic.has_lesson
        assert topic.expected_output == ["line one", "line two"]
        assert topic.sort_key() == (0, 1, "encapsulation")
        assert topic.summary_dict() == {
            "id": "encapsulation",
            "title": "Encapsulation",
            "category": "oop",
            "tags": ["oop", "state"],
            "has_lesson": True,
            "source": "local",
        }

    def test_missing_frontmatter(self, tmp_path: Path) -> None:
        with pytest.raises(FrontmatterError, match="Missing"):
            Topic.from_text("# No metadata", path=tmp_path / "x.md")

    def test_topic_is_frozen(self, tmp_path: Path) -> None:
        topic = Topic.from_text(NOTE, path=tmp_path / "x.md")
        with pytest.raises(ValidationError):
            topic.body = "changed"  # type: ignore[misc]
