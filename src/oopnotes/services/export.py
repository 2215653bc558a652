"""ExportService: render every note into one markdown study guide."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from jinja2 import TemplateError

from oopnotes.domain.categories import CATEGORY_ORDER, Category, parse_category
from oopnotes.domain.glossary import GLOSSARY
from oopnotes.infrastructure.templates import build_template_environment
from oopnotes.services.base import BaseService
from oopnotes.services.result import ServiceResult

logger = logging.getLogger(__name__)

_FENCE = re.compile(r"^\s*(`{3,}|~{3,})")
_HEADING = re.compile(r"^(#{1,6})(\s)")

DEFAULT_TITLE = "OOP, SOLID & Creational Patterns: Study Guide"


def demote_headings(body: str, *, levels: int = 2) -> str:
    """Push markdown headings down *levels*, drop the leading H1, leave code alone."""
    lines = body.strip("\n").split("\n")
    if lines and lines[0].startswith("# "):
        lines = lines[1:]
        while lines and not lines[0].strip():
            lines.pop(0)

    out: list[str] = []
    in_fence = False
    for line in lines:
        if _FENCE.match(line):
            in_fence = not in_fence
        elif not in_fence:
            line = _HEADING.sub(lambda m: "#" * min(len(m.group(1)) + levels, 6) + m.group(2), line)
        out.append(line)
    return "\n".join(out)


class ExportService(BaseService):
    def export_guide(
        self,
        output: Path | None = None,
        *,
        category: str | None = None,
        template: str = "study_guide.md.j2",
        include_glossary: bool = True,
        include_questions: bool = True,
        title: str = DEFAULT_TITLE,
    ) -> ServiceResult:
        """Render the guide; write it to *output* or return it in ``data["content"]``."""
        op = "export"
        try:
            categories = [parse_category(category)] if category else list(CATEGORY_ORDER)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_ARGUMENT", str(exc))

        sections = [self._section(c) for c in categories]
        sections = [s for s in sections if s["topics"]]
        topic_count = sum(len(s["topics"]) for s in sections)

        env = build_template_environment("export", project_root=self._library.project_root)
        try:
            content = env.get_template(template).render(
                title=title,
                sections=sections,
                include_questions=include_questions,
                glossary=list(GLOSSARY) if include_glossary else [],
            )
        except TemplateError as exc:
            return ServiceResult.failure(
                op, "EXPORT_FAILED", f"Template {template!r} failed: {exc}"
            )

        data: dict[str, Any] = {
            "topics": topic_count,
            "categories": [s["category"] for s in sections],
        }
        if output is None:
            data["content"] = content
            return ServiceResult(ok=True, op=op, data=data)

        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(content, encoding="utf-8")
        except OSError as exc:
            return ServiceResult.failure(op, "EXPORT_FAILED", f"Cannot write {output}: {exc}")
        logger.debug("Wrote study guide to %s", output)
        data["path"] = str(output)
        data["bytes"] = len(content.encode("utf-8"))
        return ServiceResult(ok=True, op=op, data=data)

    def _section(self, category: Category) -> dict[str, Any]:
        topics = self._library.topics(category=category)
        return {
            "category": category.value,
            "label": category.label,
            "anchor": category.label.lower().replace(" ", "-"),
            "topics": [
                {
                    "id": t.id,
                    "title": t.title,
                    "summary": t.meta.summary,
                    "body": demote_headings(t.body),
                    "questions": list(t.meta.questions),
                }
                for t in topics
            ],
        }
