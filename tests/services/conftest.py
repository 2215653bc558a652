"""Service-level fixtures."""

from __future__ import annotations

import pytest

from oopnotes.plugins import PluginManager, hookimpl


class EventRecorder:
    """Plugin that remembers every notification it receives."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []

    @hookimpl
    def post_run(self, topic_id: str, ok: bool) -> None:
        self.events.append(("post_run", {"topic_id": topic_id, "ok": ok}))

    @hookimpl
    def post_verify(self, passed: int, failed: int) -> None:
        self.events.append(("post_verify", {"passed": passed, "failed": failed}))


class ExplodingPlugin:
    @hookimpl
    def post_run(self, topic_id: str, ok: bool) -> None:
        raise RuntimeError("plugin bug")


@pytest.fixture
def exploding_plugin() -> ExplodingPlugin:
    return ExplodingPlugin()


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def plugin_manager(recorder: EventRecorder) -> PluginManager:
    pm = PluginManager()
    pm.register_plugin(recorder)
    return pm
