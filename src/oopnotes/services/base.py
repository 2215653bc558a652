"""BaseService: shared foundation for oopnotes services.

Every service receives the :class:`Library` at construction time and
reads notes through it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from oopnotes.services.result import ServiceResult

if TYPE_CHECKING:
    from oopnotes.domain.topic import Topic
    from oopnotes.infrastructure.library import Library

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes."""

    def __init__(self, library: Library) -> None:
        self._library = library

    def _topic_or_error(self, op: str, topic_id: str) -> Topic | ServiceResult:
        """Look up a topic, or build a NOT_FOUND result with suggestions."""
        topic = self._library.get(topic_id)
        if topic is not None:
            return topic
        suggestions = self._library.suggest(topic_id)
        message = f"No topic with id {topic_id!r}"
        if suggestions:
            message += f" (did you mean: {', '.join(suggestions)}?)"
        return ServiceResult.failure(
            op,
            "NOT_FOUND",
            message,
            detail={"id": topic_id, "suggestions": suggestions},
        )

    def _dispatch_event(self, hook_name: str, payload: dict[str, Any], warnings: list[str]) -> None:
        """Notify plugins. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        plugins = self._library.plugin_manager
        if plugins is None:
            return
        try:
            plugins.notify(hook_name, **payload)
        except Exception:
            logger.debug("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
