"""Tests for the study guide export."""

from __future__ import annotations

from pathlib import Path

from oopnotes.infrastructure.library import Library
from oopnotes.services.export import DEFAULT_TITLE, ExportService, demote_headings


class TestDemoteHeadings:
    def test_drops_h1_and_demotes(self) -> None:
        body = "# Title\n\nIntro\n\n## Part\n\n### Sub\n"
        assert demote_headings(body) == "Intro\n\n#### Part\n\n##### Sub"

    def test_code_fences_untouched(self) -> None:
        body = "## Code\n```python\n# a comment\n```\n"
        assert demote_headings(body) == "#### Code\n```python\n# a comment\n```"

    def test_capped_at_h6(self) -> None:
        assert demote_headings("###### Deep") == "###### Deep"


class TestExportGuide:
    def test_content_returned_without_output(self, library: Library) -> None:
        result = ExportService(library).export_guide()
        assert result.ok
        content = result.data["content"]
        assert content.startswith(f"# {DEFAULT_TITLE}\n")
        assert "- [Object-Oriented Principles](#object-oriented-principles)" in content
        assert "## SOLID Principles" in content
        assert "### Abstract Factory" in content
        assert "#### Practice questions" in content
        assert "## Glossary" in content
        assert "- **Liskov Substitution**:" in content
        assert result.data["topics"] == 17
        assert result.data["categories"] == ["oop", "solid", "creational"]

    def test_sections_follow_category_order(self, library: Library) -> None:
        content = ExportService(library).export_guide().data["content"]
        assert (
            content.index("## Object-Oriented Principles")
            < content.index("## SOLID Principles")
            < content.index("## Creational Patterns")
        )

    def test_single_category_without_extras(self, library: Library) -> None:
        result = ExportService(library).export_guide(
            category="solid", include_glossary=False, include_questions=False
        )
        content = result.data["content"]
        assert result.data["topics"] == 6
        assert "## Creational Patterns" not in content
        assert "## Glossary" not in content
        assert "Practice questions" not in content

    def test_write_to_file(self, library: Library, tmp_path: Path) -> None:
        target = tmp_path / "out" / "guide.md"
        result = ExportService(library).export_guide(target)
        assert result.ok
        assert result.data["path"] == str(target)
        assert "content" not in result.data
        assert result.data["bytes"] == len(target.read_bytes())

    def test_unwritable_output(self, library: Library, tmp_path: Path) -> None:
        result = ExportService(library).export_guide(tmp_path)
        assert result.error is not None
        assert result.error.code == "EXPORT_FAILED"

    def test_unknown_category(self, library: Library) -> None:
        result = ExportService(library).export_guide(category="nope")
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"

    def test_missing_template(self, library: Library) -> None:
        result = ExportService(library).export_guide(template="nope.j2")
        assert result.error is not None
        assert result.error.code == "EXPORT_FAILED"

    def test_project_template_override(self, library: Library, project_root: Path) -> None:
        override = project_root / ".oopnotes" / "templates" / "export"
        override.mkdir(parents=True)
        (override / "short.md.j2").write_text(
            "{% for s in sections %}{{ s.label }}={{ s.topics | length }}\n{% endfor %}"
        )
        result = ExportService(library).export_guide(template="short.md.j2")
        assert result.data["content"] == (
            "Object-Oriented Principles=5\nSOLID Principles=6\nCreational Patterns=6\n"
        )
