"""Library: the loaded set of notes.

Sources are read in override order, later winning on id collisions:

1. the notes packaged with oopnotes (unless ``library.include_builtin``
   is false)
2. directories contributed by plugins via ``register_note_dirs``
3. ``library.extra_dirs`` from config, relative to the project root

A note that can't be parsed is recorded as a :class:`LoadIssue`; loading
never fails because of one bad file.
"""

from __future__ import annotations

import difflib
import logging
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from oopnotes.domain.categories import Category
from oopnotes.domain.topic import FrontmatterError, Topic

if TYPE_CHECKING:
    from oopnotes.config.settings import NotesSettings
    from oopnotes.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

BUILTIN_SOURCE = "builtin"
LOCAL_SOURCE = "local"
NOTE_SUFFIX = ".md"


@dataclass(frozen=True)
class LoadIssue:
    """A note file (or configured directory) that couldn't be loaded."""

    path: Path
    message: str
    source: str

    def to_dict(self) -> dict[str, str]:
        return {"path": str(self.path), "message": self.message, "source": self.source}


def builtin_notes_dir() -> Path:
    return Path(str(files("oopnotes") / "notes"))


def iter_note_files(directory: Path) -> list[Path]:
    """Markdown files under *directory*, skipping ``_`` and ``.`` prefixed names."""
    return sorted(
        p
        for p in directory.rglob(f"*{NOTE_SUFFIX}")
        if p.is_file() and not p.name.startswith(("_", "."))
    )


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err["loc"]) or "frontmatter"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class Library:
    """Indexed notes with lazy loading.

    Nothing is read from disk until a topic is first requested, so
    ``--help`` and ``glossary`` never touch the notes.
    """

    def __init__(
        self,
        settings: NotesSettings,
        plugin_manager: PluginManager | None = None,
    ) -> None:
        self._settings = settings
        self._plugins = plugin_manager
        self._topics: dict[str, Topic] | None = None
        self._issues: list[LoadIssue] = []
        self._overrides: list[str] = []

    @property
    def plugin_manager(self) -> PluginManager | None:
        return self._plugins

    @property
    def project_root(self) -> Path:
        return self._settings.project_root

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def sources(self) -> list[tuple[str, Path]]:
        """``(source_name, directory)`` pairs in override order."""
        found: list[tuple[str, Path]] = []
        if self._settings.library.include_builtin:
            found.append((BUILTIN_SOURCE, builtin_notes_dir()))
        if self._plugins is not None:
            found.extend(self._plugins.note_dirs())
        for raw in self._settings.library.extra_dirs:
            found.append((LOCAL_SOURCE, self._settings.resolve_path(raw)))
        return found

    def _load(self) -> dict[str, Topic]:
        if self._topics is not None:
            return self._topics

        topics: dict[str, Topic] = {}
        for source, directory in self.sources():
            if not directory.is_dir():
                self._issues.append(LoadIssue(directory, "Note directory not found", source))
                continue
            seen_here: set[str] = set()
            for path in iter_note_files(directory):
                topic = self._load_file(path, source)
                if topic is None:
                    continue
                if topic.id in seen_here:
                    self._issues.append(
                        LoadIssue(path, f"Duplicate topic id {topic.id!r}", source)
                    )
                    continue
                seen_here.add(topic.id)
                if topic.id in topics:
                    logger.warning(
                        "Topic %s from %s overrides %s",
                        topic.id,
                        source,
                        topics[topic.id].source,
                    )
                    self._overrides.append(topic.id)
                topics[topic.id] = topic

        logger.debug("Loaded %d topics (%d issues)", len(topics), len(self._issues))
        self._topics = topics
        return topics

    def _load_file(self, path: Path, source: str) -> Topic | None:
        try:
            text = path.read_text(encoding="utf-8-sig")
            return Topic.from_text(text, path=path, source=source)
        except (OSError, UnicodeDecodeError, FrontmatterError) as exc:
            message = str(exc)
        except ValidationError as exc:
            message = _describe_validation_error(exc)
        logger.warning("Skipping note %s: %s", path, message)
        self._issues.append(LoadIssue(path, message, source))
        return None

    def reload(self) -> None:
        self._topics = None
        self._issues = []
        self._overrides = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def issues(self) -> list[LoadIssue]:
        self._load()
        return list(self._issues)

    @property
    def overrides(self) -> list[str]:
        self._load()
        return list(self._overrides)

    def topics(self, *, category: Category | None = None, tag: str | None = None) -> list[Topic]:
        """Topics ordered by category, then ``order``, then id."""
        result = list(self._load().values())
        if category is not None:
            result = [t for t in result if t.category == category]
        if tag is not None:
            wanted = tag.strip().lower()
            result = [t for t in result if wanted in (x.lower() for x in t.meta.tags)]
        return sorted(result, key=Topic.sort_key)

    def get(self, topic_id: str) -> Topic | None:
        return self._load().get(topic_id.strip().lower())

    def suggest(self, topic_id: str, *, limit: int = 3) -> list[str]:
        return difflib.get_close_matches(topic_id.lower(), list(self._load()), n=limit)

    def tags(self) -> list[str]:
        return sorted({tag.lower() for t in self._load().values() for tag in t.meta.tags})

    def __len__(self) -> int:
        return len(self._load())
