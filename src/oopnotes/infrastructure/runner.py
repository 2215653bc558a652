"""Lesson resolution and execution with captured stdout.

A lesson target is ``package.module:function`` or, for notes kept outside
the package, ``relative/path.py:function`` resolved against the note's
directory. Running a lesson never raises for errors inside the lesson:
they are captured on the returned :class:`LessonRun`.
"""

from __future__ import annotations

import hashlib
import importlib
import importlib.util
import inspect
import io
import logging
import sys
import time
from collections.abc import Callable
from contextlib import redirect_stdout
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType

logger = logging.getLogger(__name__)


class LessonResolutionError(Exception):
    """The lesson target can't be imported or isn't callable."""


@dataclass(frozen=True)
class LessonRun:
    target: str
    stdout: str
    error: str | None = None
    duration_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


def _split_target(target: str) -> tuple[str, str]:
    module_ref, sep, func_name = target.rpartition(":")
    if not sep or not module_ref or not func_name:
        raise LessonResolutionError(f"Lesson target must be 'module:function', got {target!r}")
    return module_ref, func_name


def _load_file_module(path: Path) -> ModuleType:
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:8]
    module_name = f"oopnotes_lesson_{path.stem}_{digest}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise LessonResolutionError(f"Cannot load lesson file {path}")
    module = importlib.util.module_from_spec(spec)
    # dataclasses and pickling look the module up by name
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except (Exception, SystemExit) as exc:
        sys.modules.pop(module_name, None)
        raise LessonResolutionError(f"Error importing {path}: {exc}") from exc
    return module


def load_lesson_module(target: str, base_dir: Path | None = None) -> ModuleType:
    """Import the module half of *target*."""
    module_ref, _func_name = _split_target(target)
    if module_ref.endswith(".py"):
        path = Path(module_ref)
        if not path.is_absolute() and base_dir is not None:
            path = base_dir / path
        if not path.is_file():
            raise LessonResolutionError(f"Lesson file not found: {path}")
        return _load_file_module(path)
    try:
        return importlib.import_module(module_ref)
    except ImportError as exc:
        raise LessonResolutionError(f"Cannot import lesson module {module_ref!r}: {exc}") from exc


def resolve_lesson(target: str, base_dir: Path | None = None) -> Callable[[], object]:
    """Return the zero-argument callable named by *target*."""
    _module_ref, func_name = _split_target(target)
    module = load_lesson_module(target, base_dir)
    func = getattr(module, func_name, None)
    if not callable(func):
        raise LessonResolutionError(f"{target!r} does not name a callable")
    return func


def lesson_source(target: str, base_dir: Path | None = None) -> str:
    """Source code of the module holding the lesson."""
    module = load_lesson_module(target, base_dir)
    try:
        return inspect.getsource(module)
    except (OSError, TypeError) as exc:
        raise LessonResolutionError(f"Source unavailable for {target!r}: {exc}") from exc


def run_lesson(target: str, base_dir: Path | None = None) -> LessonRun:
    """Run a lesson and capture what it prints.

    Raises LessonResolutionError when the target can't be resolved; an
    exception raised by the lesson itself, ``SystemExit`` included, is
    recorded in ``error``.
    """
    func = resolve_lesson(target, base_dir)
    buffer = io.StringIO()
    error: str | None = None
    start = time.perf_counter()
    with redirect_stdout(buffer):
        try:
            func()
        except (Exception, SystemExit) as exc:
            error = f"{type(exc).__name__}: {exc}"
            logger.debug("Lesson %s raised", target, exc_info=True)
    duration_ms = (time.perf_counter() - start) * 1000
    return LessonRun(
        target=target,
        stdout=buffer.getvalue(),
        error=error,
        duration_ms=round(duration_ms, 2),
    )
