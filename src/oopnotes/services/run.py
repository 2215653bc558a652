"""RunService: execute one topic's lesson and show what it printed."""

from __future__ import annotations

import logging

from oopnotes.domain.topic import normalize_output
from oopnotes.infrastructure.runner import LessonResolutionError, run_lesson
from oopnotes.services.base import BaseService
from oopnotes.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class RunService(BaseService):
    def run(self, topic_id: str) -> ServiceResult:
        op = "run"
        found = self._topic_or_error(op, topic_id)
        if isinstance(found, ServiceResult):
            return found
        topic = found

        if topic.meta.lesson is None:
            return ServiceResult.failure(
                op,
                "NO_LESSON",
                f"Topic {topic.id!r} has no runnable lesson",
                detail={"id": topic.id},
            )

        warnings: list[str] = []
        try:
            lesson_run = run_lesson(topic.meta.lesson, topic.path.parent)
        except LessonResolutionError as exc:
            return ServiceResult.failure(op, "LESSON_ERROR", str(exc), detail={"id": topic.id})

        logger.debug("Ran lesson %s in %.2fms", topic.meta.lesson, lesson_run.duration_ms)
        self._dispatch_event("post_run", {"topic_id": topic.id, "ok": lesson_run.ok}, warnings)

        output = normalize_output(lesson_run.stdout)
        expected = topic.expected_output
        data = {
            "id": topic.id,
            "title": topic.title,
            "lesson": topic.meta.lesson,
            "output": output,
            "expected": expected,
            "matches_expected": None if expected is None else output == expected,
        }
        meta = {"duration_ms": lesson_run.duration_ms}
        if not lesson_run.ok:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                warnings=warnings,
                meta=meta,
                error=ServiceError(
                    code="LESSON_ERROR", message=f"Lesson raised {lesson_run.error}"
                ),
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings, meta=meta)
