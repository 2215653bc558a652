"""QuizService: draw interview questions from the notes."""

from __future__ import annotations

import random

from oopnotes.domain.categories import parse_category
from oopnotes.services.base import BaseService
from oopnotes.services.result import ServiceResult


class QuizService(BaseService):
    def quiz(
        self,
        *,
        category: str | None = None,
        count: int = 5,
        seed: int | None = None,
    ) -> ServiceResult:
        """Pick up to *count* distinct questions; the same *seed* gives the same picks."""
        op = "quiz"
        if count < 1:
            return ServiceResult.failure(op, "INVALID_ARGUMENT", "count must be at least 1")
        try:
            parsed = parse_category(category) if category else None
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_ARGUMENT", str(exc))

        pool = [
            {"topic_id": t.id, "topic": t.title, "question": q}
            for t in self._library.topics(category=parsed)
            for q in t.meta.questions
        ]
        if not pool:
            return ServiceResult.failure(op, "NOT_FOUND", "No questions available")

        warnings: list[str] = []
        if count > len(pool):
            warnings.append(f"Only {len(pool)} questions available")
        picked = random.Random(seed).sample(pool, k=min(count, len(pool)))
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": picked, "count": len(picked), "pool_size": len(pool)},
            warnings=warnings,
        )
