"""VerifyService: check that every lesson still prints what its note documents.

Statuses per topic:

- ``pass``: captured output equals the ```output block
- ``fail``: it doesn't; a unified diff is attached
- ``error``: the lesson raised, or its target can't be resolved
- ``missing_output``: the lesson runs but the note documents no output
- ``skipped``: the note has no lesson
- ``invalid``: the note file couldn't be loaded at all
"""

from __future__ import annotations

import difflib
import logging
from collections import Counter
from typing import TYPE_CHECKING, Any

from oopnotes.domain.topic import normalize_output
from oopnotes.infrastructure.runner import LessonResolutionError, run_lesson
from oopnotes.services.base import BaseService
from oopnotes.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from oopnotes.domain.topic import Topic

logger = logging.getLogger(__name__)

STATUSES = ("pass", "fail", "error", "missing_output", "skipped", "invalid")
_FAILING = frozenset({"fail", "error", "invalid"})


class VerifyService(BaseService):
    def verify(
        self,
        topic_ids: list[str] | None = None,
        *,
        fail_on_missing_output: bool = False,
    ) -> ServiceResult:
        """Run lessons and compare their output to the notes.

        With *topic_ids* only those topics are checked, each once, and load
        issues are not reported; unknown ids fail the whole call with NOT_FOUND.
        """
        op = "verify"
        warnings: list[str] = []

        if topic_ids:
            topics: list[Topic] = []
            missing: list[str] = []
            for topic_id in dict.fromkeys(topic_ids):
                topic = self._library.get(topic_id)
                if topic is None:
                    missing.append(topic_id)
                else:
                    topics.append(topic)
            if missing:
                return ServiceResult.failure(
                    op,
                    "NOT_FOUND",
                    f"Unknown topic ids: {', '.join(missing)}",
                    detail={"ids": missing},
                )
            results = [self._check_topic(t) for t in topics]
        else:
            results = [self._check_topic(t) for t in self._library.topics()]
            results.extend(
                {
                    "id": issue.path.stem,
                    "title": "",
                    "status": "invalid",
                    "message": issue.message,
                    "path": str(issue.path),
                }
                for issue in self._library.issues
            )

        counts = Counter(r["status"] for r in results)
        failing = set(_FAILING)
        if fail_on_missing_output:
            failing.add("missing_output")
        failed = sum(counts[s] for s in failing)

        self._dispatch_event(
            "post_verify", {"passed": counts["pass"], "failed": failed}, warnings
        )
        logger.debug("Verified %d topics: %s", len(results), dict(counts))

        data: dict[str, Any] = {
            "results": results,
            "count": len(results),
            "counts": {status: counts[status] for status in STATUSES},
            "healthy": failed == 0,
        }
        if failed:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code="VERIFICATION_FAILED",
                    message=f"{failed} of {len(results)} topics failed verification",
                    detail={"failed": sorted(r["id"] for r in results if r["status"] in failing)},
                ),
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def _check_topic(self, topic: Topic) -> dict[str, Any]:
        entry: dict[str, Any] = {"id": topic.id, "title": topic.title}
        if topic.meta.lesson is None:
            return {**entry, "status": "skipped", "message": "no lesson"}

        try:
            lesson_run = run_lesson(topic.meta.lesson, topic.path.parent)
        except LessonResolutionError as exc:
            return {**entry, "status": "error", "message": str(exc)}
        if not lesson_run.ok:
            return {**entry, "status": "error", "message": f"lesson raised {lesson_run.error}"}

        expected = topic.expected_output
        if expected is None:
            return {**entry, "status": "missing_output", "message": "no ```output block"}

        actual = normalize_output(lesson_run.stdout)
        if actual == expected:
            return {**entry, "status": "pass", "message": ""}

        diff = list(
            difflib.unified_diff(
                expected,
                actual,
                fromfile=f"{topic.id} (documented)",
                tofile=f"{topic.id} (actual)",
                lineterm="",
            )
        )
        return {**entry, "status": "fail", "message": "output differs", "diff": diff}
