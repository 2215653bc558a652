"""Tests for CatalogService."""

from __future__ import annotations

from pathlib import Path

from oopnotes.infrastructure.library import Library
from oopnotes.services.catalog import CatalogService


class TestListTopics:
    def test_all_topics(self, library: Library) -> None:
        result = CatalogService(library).list_topics()
        assert result.ok
        assert result.op == "list_topics"
        assert result.data["count"] == 17
        assert result.data["items"][0]["id"] == "oop-overview"

    def test_by_category(self, library: Library) -> None:
        result = CatalogService(library).list_topics(category="Creational")
        ids = [item["id"] for item in result.data["items"]]
        assert ids == [
            "creational-overview",
            "singleton",
            "factory-method",
            "abstract-factory",
            "prototype",
            "builder",
        ]

    def test_by_tag(self, library: Library) -> None:
        result = CatalogService(library).list_topics(tag="interfaces")
        assert {item["id"] for item in result.data["items"]} == {
            "abstraction",
            "interface-segregation",
        }

    def test_unknown_category(self, library: Library) -> None:
        result = CatalogService(library).list_topics(category="behavioral")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"

    def test_load_issues_become_warnings(self, local_library: Library, project_root: Path) -> None:
        (project_root / "notes" / "bad.md").write_text("---\nid: [\n---\n")
        result = CatalogService(local_library).list_topics()
        assert result.ok
        assert result.data["count"] == 0
        assert len(result.warnings) == 1
        assert "bad.md" in result.warnings[0]


class TestShowTopic:
    def test_show_with_code(self, library: Library) -> None:
        result = CatalogService(library).show_topic("builder")
        assert result.ok
        data = result.data
        assert data["title"] == "Builder"
        assert data["category_label"] == "Creational Patterns"
        assert data["lesson"] == "oopnotes.lessons.creational.builder:demo"
        assert "class ComputerBuilder" in data["code"]
        assert data["questions"]
        assert data["body"].startswith("# Builder")

    def test_show_without_code(self, library: Library) -> None:
        result = CatalogService(library).show_topic("builder", include_code=False)
        assert "code" not in result.data

    def test_overview_has_no_code(self, library: Library) -> None:
        result = CatalogService(library).show_topic("solid-overview")
        assert result.ok
        assert result.data["lesson"] is None
        assert "code" not in result.data

    def test_not_found_suggests(self, library: Library) -> None:
        result = CatalogService(library).show_topic("protoype")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert "prototype" in result.error.detail["suggestions"]
        assert "did you mean: prototype" in result.error.message

    def test_unresolvable_lesson_is_a_warning(
        self, local_library: Library, project_root: Path, write_note
    ) -> None:
        write_note(project_root / "notes", "ghost", lesson="ghost.py:demo")
        result = CatalogService(local_library).show_topic("ghost")
        assert result.ok
        assert "code" not in result.data
        assert "not found" in result.warnings[0]
