"""Locate ``oopnotes.toml``.

The file is searched for in the start directory and then in each parent,
the way git finds ``.git``. ``OOPNOTES_CONFIG`` replaces the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "oopnotes.toml"
CONFIG_ENV_VAR = "OOPNOTES_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Path of the nearest ``oopnotes.toml`` at or above *start* (default CWD).

    When ``OOPNOTES_CONFIG`` is set its file is used, and a missing file
    there means no config at all.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        if (directory / CONFIG_FILENAME).is_file():
            return directory / CONFIG_FILENAME
    return None

