"""CatalogService: browse topics and read a single note."""

from __future__ import annotations

from oopnotes.domain.categories import parse_category
from oopnotes.infrastructure.runner import LessonResolutionError, lesson_source
from oopnotes.services.base import BaseService
from oopnotes.services.result import ServiceResult


class CatalogService(BaseService):
    """Read-only views over the library."""

    def list_topics(
        self,
        *,
        category: str | None = None,
        tag: str | None = None,
    ) -> ServiceResult:
        op = "list_topics"
        try:
            parsed = parse_category(category) if category else None
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_ARGUMENT", str(exc))

        topics = self._library.topics(category=parsed, tag=tag)
        warnings = [f"{issue.path}: {issue.message}" for issue in self._library.issues]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "items": [t.summary_dict() for t in topics],
                "count": len(topics),
            },
            warnings=warnings,
        )

    def show_topic(self, topic_id: str, *, include_code: bool = True) -> ServiceResult:
        """Full note content, plus the lesson's source when it has one."""
        op = "show_topic"
        found = self._topic_or_error(op, topic_id)
        if isinstance(found, ServiceResult):
            return found
        topic = found

        warnings: list[str] = []
        data = {
            **topic.summary_dict(),
            "category_label": topic.category.label,
            "summary": topic.meta.summary,
            "lesson": topic.meta.lesson,
            "questions": list(topic.meta.questions),
            "path": str(topic.path),
            "body": topic.body,
        }
        if include_code and topic.meta.lesson:
            try:
                data["code"] = lesson_source(topic.meta.lesson, topic.path.parent)
            except LessonResolutionError as exc:
                warnings.append(str(exc))
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
