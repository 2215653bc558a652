"""Pluggy hook specifications for oopnotes.

One setup-time hook lets plugins contribute note directories; two
notification hooks fire after a lesson run and after verification.
"""

from __future__ import annotations

from pathlib import Path

import pluggy

PROJECT_NAME = "oopnotes"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class OopnotesHookSpec:
    """Hook specifications for the oopnotes plugin system."""

    @hookspec
    def register_note_dirs(self) -> list[Path] | None:
        """Return directories of extra markdown notes to load."""

    @hookspec
    def post_run(self, topic_id: str, ok: bool) -> None:
        """Called after a lesson has been run."""

    @hookspec
    def post_verify(self, passed: int, failed: int) -> None:
        """Called after documented outputs have been verified."""
